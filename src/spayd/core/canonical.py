"""
Canonical and display serialization of descriptors.

Both renderings share one layout, ``SPD*<major>.<minor>`` followed by
``*<name>:<value>`` for each field in ascending name order with names and values
percent-encoded. They differ only in the field source:

- canonical_text walks ``iter_canonical()`` (CRC32 omitted) and is the sole input
  to checksum computation.
- display_text walks ``iter_fields()`` (everything stored) and is the external
  textual form.

This module is zero-IO.

Examples:
    >>> from spayd.core import Descriptor
    >>> d = Descriptor.v1_0({"MSG": "a*b", "CRC32": "00000000"})
    >>> canonical_text(d)
    'SPD*1.0*MSG:a%2Ab'
    >>> display_text(d)
    'SPD*1.0*CRC32:00000000*MSG:a%2Ab'
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .encoding import FIELD_SEPARATOR, VALUE_SEPARATOR, encode
from .versioning import Version

if TYPE_CHECKING:
    from .descriptor import Descriptor

__all__ = [
    "HEADER_PREFIX",
    "render",
    "canonical_text",
    "display_text",
]

HEADER_PREFIX = "SPD" + FIELD_SEPARATOR


def render(version: Version, fields: Iterable[tuple[str, str]]) -> str:
    """
    Render a header and already-ordered fields into descriptor text.

    Args:
        version (Version): Header version.
        fields (Iterable[tuple[str, str]]): (name, value) pairs in output order.

    Returns:
        str: Descriptor text with every name and value percent-encoded.
    """
    parts = [f"{HEADER_PREFIX}{version.major}.{version.minor}"]
    for name, value in fields:
        parts.append(encode(name) + VALUE_SEPARATOR + encode(value))
    return FIELD_SEPARATOR.join(parts)


def canonical_text(descriptor: Descriptor) -> str:
    """Render the checksum input: sorted fields without CRC32."""
    return render(descriptor.version, descriptor.iter_canonical())


def display_text(descriptor: Descriptor) -> str:
    """Render every stored field in sorted order."""
    return render(descriptor.version, descriptor.iter_fields())
