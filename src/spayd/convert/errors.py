"""
Exceptions for the spayd.convert adapters.

Purpose
- Distinguish a field that is absent from one whose text cannot be converted.
- Keep spayd.core.errors as the source of truth for parse/checksum/validation errors;
  both classes here derive from spayd.core.errors.SpaydError.

Notes
- Adapters never raise these while formatting (domain value -> text); only getters
  that read a descriptor field do.
"""

from __future__ import annotations

from spayd.core.errors import SpaydError

__all__ = ["FieldMissing", "ConversionError"]


class FieldMissing(SpaydError):
    """
    Raised when a typed getter is asked for a field the descriptor does not hold.

    Attributes:
        field_name (str): Name of the absent field.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"field {field_name!r} is not present")


class ConversionError(SpaydError):
    """
    Raised when a field's text cannot be converted to its domain type.

    Attributes:
        field_name (str): Name of the field being converted.
        text (str): Offending raw text.
    """

    def __init__(self, field_name: str, text: str) -> None:
        self.field_name = field_name
        self.text = text
        super().__init__(f"cannot convert field {field_name!r}: {text!r}")
