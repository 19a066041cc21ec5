"""
Descriptor: version plus an ordered, unique-key field store.

A Descriptor owns its field mapping exclusively. Keys are unique (setting an
existing name replaces its value) and iteration is always in ascending key order,
which is what canonical serialization and the CRC32 checksum rely on.

Notes:
    - Storage is a plain dict; ordering is obtained with an explicit sort on every
      traversal, so insertion order never leaks into output.
    - Field names are case-sensitive and otherwise unrestricted; escaping happens
      at serialization time (see spayd.core.encoding).
    - Descriptors are plain mutable values with no locking. Hosts sharing one
      across threads must synchronize externally.

Examples:
    >>> from spayd.core.descriptor import Descriptor
    >>> d = Descriptor.v1_0([("CC", "CZK"), ("AM", "480.50")])
    >>> list(d.iter_fields())
    [('AM', '480.50'), ('CC', 'CZK')]
    >>> str(d)
    'SPD*1.0*AM:480.50*CC:CZK'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .canonical import canonical_text, display_text
from .fields import CHECKSUM
from .versioning import V1_0, Version

__all__ = ["Descriptor"]

FieldItems = Mapping[str, str] | Iterable[tuple[str, str]]


class Descriptor:
    """
    In-memory representation of one payment request.

    Attributes:
        version (Version): Format revision, fixed at construction.

    Args:
        version (Version): Format revision.
        fields (Mapping[str, str] | Iterable[tuple[str, str]] | None): Initial
            fields. Later duplicates overwrite earlier ones.
    """

    __slots__ = ("_version", "_fields")

    def __init__(self, version: Version, fields: FieldItems | None = None) -> None:
        self._version = version
        self._fields: dict[str, str] = {}
        if fields is not None:
            items = fields.items() if isinstance(fields, Mapping) else fields
            for name, value in items:
                self._fields[name] = value

    @classmethod
    def empty(cls, version: Version) -> Descriptor:
        return cls(version)

    @classmethod
    def v1_0(cls, fields: FieldItems | None = None) -> Descriptor:
        """Build a version 1.0 descriptor, optionally pre-populated."""
        return cls(V1_0, fields)

    @property
    def version(self) -> Version:
        return self._version

    # Field store

    def field(self, name: str) -> str | None:
        """Return the raw text of a field, or None when it is absent."""
        return self._fields.get(name)

    def set_field(self, name: str, value: str) -> None:
        """Insert or overwrite a field."""
        self._fields[name] = value

    def remove_field(self, name: str) -> str | None:
        """Drop a field, returning its previous value (None if it was absent)."""
        return self._fields.pop(name, None)

    def iter_fields(self) -> Iterator[tuple[str, str]]:
        """Yield (name, value) pairs in ascending name order."""
        for name in sorted(self._fields):
            yield name, self._fields[name]

    def iter_canonical(self) -> Iterator[tuple[str, str]]:
        """Yield fields in ascending name order, skipping the CRC32 field."""
        return ((name, value) for name, value in self.iter_fields() if name != CHECKSUM)

    # Serialization

    def canonical_text(self) -> str:
        return canonical_text(self)

    def display_text(self) -> str:
        return display_text(self)

    # Python protocol

    def __str__(self) -> str:
        return display_text(self)

    def __repr__(self) -> str:
        return f"Descriptor(version={self._version!r}, fields={dict(self.iter_fields())!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Descriptor):
            return NotImplemented
        return self._version == other._version and self._fields == other._fields

    # Mutable value type.
    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.iter_fields()
