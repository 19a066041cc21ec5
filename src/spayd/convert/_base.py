"""Shared get/convert and convert/set helpers for the typed adapters."""

from __future__ import annotations

from collections.abc import Callable
from decimal import InvalidOperation
from typing import TypeVar

from spayd.core.descriptor import Descriptor

from .errors import ConversionError, FieldMissing

T = TypeVar("T")
U = TypeVar("U")


def field_converted(descriptor: Descriptor, name: str, convert: Callable[[str], T]) -> T:
    """
    Read a field and convert its text.

    Raises:
        FieldMissing: If the field is absent.
        ConversionError: If convert rejects the text (ValueError or InvalidOperation).
    """
    text = descriptor.field(name)
    if text is None:
        raise FieldMissing(name)
    try:
        return convert(text)
    except (ValueError, InvalidOperation) as exc:
        raise ConversionError(name, text) from exc


def set_field_converted(
    descriptor: Descriptor, name: str, value: U, convert: Callable[[U], str]
) -> None:
    descriptor.set_field(name, convert(value))
