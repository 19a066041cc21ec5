"""
Format version metadata for Short Payment Descriptors.

Exposes the Version value type carried in every descriptor header
(``SPD*<major>.<minor>``) and the revision this package emits by default.
This module is zero-IO.

Notes:
    - Versions compare lexicographically on (major, minor).
    - The parser builds Version instances from the header digits; callers build
      them directly when creating an empty descriptor.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    "Version",
    "V1_0",
    "parse_version",
]

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, order=True)
class Version:
    """
    Immutable descriptor format revision.

    Attributes:
        major (int): Non-negative major component.
        minor (int): Non-negative minor component.

    Raises:
        ValueError: If any component is negative.

    Examples:
        >>> from spayd.core.versioning import Version
        >>> Version(1, 0) < Version(1, 2) < Version(2, 0)
        True
        >>> str(Version(1, 0))
        '1.0'
    """

    major: int
    minor: int

    def __post_init__(self) -> None:
        if self.major < 0:
            raise ValueError(f"Version major must be non-negative, got {self.major}")
        if self.minor < 0:
            raise ValueError(f"Version minor must be non-negative, got {self.minor}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


V1_0 = Version(1, 0)


def parse_version(text: str) -> Version:
    """
    Parse a ``<major>.<minor>`` string into a Version.

    Args:
        text (str): Dotted version text, e.g. "1.0".

    Returns:
        Version: Parsed version.

    Raises:
        ValueError: If text is not two dot-separated runs of ASCII digits.
    """
    m = _VERSION_RE.fullmatch(text.strip())
    if m is None:
        raise ValueError(f"version must look like '<major>.<minor>', got {text!r}")
    return Version(int(m.group(1)), int(m.group(2)))
