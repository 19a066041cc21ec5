"""
Presence validation for format-mandated fields.

Only field presence is checked here; field contents are never interpreted. Version
1.0 requires the account field (ACC). Versions without an entry in
REQUIRED_FIELDS mandate nothing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Final

from .errors import RequiredFieldMissing
from .fields import ACCOUNT
from .versioning import V1_0, Version

if TYPE_CHECKING:
    from .descriptor import Descriptor

__all__ = [
    "REQUIRED_FIELDS",
    "required_fields",
    "validate",
]

REQUIRED_FIELDS: Final[Mapping[Version, tuple[str, ...]]] = {
    V1_0: (ACCOUNT,),
}


def required_fields(version: Version) -> tuple[str, ...]:
    return REQUIRED_FIELDS.get(version, ())


def validate(descriptor: Descriptor) -> None:
    """
    Ensure every field mandated by the descriptor's version is present.

    Args:
        descriptor (Descriptor): Descriptor to check.

    Raises:
        RequiredFieldMissing: For the first mandated field (in declaration order)
            that is absent.
    """
    for name in required_fields(descriptor.version):
        if name not in descriptor:
            raise RequiredFieldMissing(name)
