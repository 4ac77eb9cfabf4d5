"""Custom exceptions for shapeguard."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapeguard.services.validation import FieldError


class ShapeguardError(Exception):
    """Base exception for schema and validation errors."""
    pass


class SchemaDefinitionError(ShapeguardError):
    """Raised when a schema mapping cannot be compiled."""
    pass


class AccessFault(ShapeguardError, TypeError):
    """
    Raised when a field is read from a candidate that cannot be indexed.

    This aborts the whole validation call instead of being recorded as a
    field error: the caller handed over something that is not an object.
    """

    def __init__(self, path: str, value_kind: str):
        self.path = path
        self.value_kind = value_kind
        super().__init__(f"Cannot read properties of {value_kind}: .{path}")


class BodyValidationError(ShapeguardError, ValueError):
    """Aggregate failure carrying every recorded field error."""

    def __init__(self, message: str, errors: list[FieldError]):
        self.errors = errors
        super().__init__(message)

    @property
    def messages(self) -> list[str]:
        return [str(error) for error in self.errors]
