"""
Schema validation service.

Walks a compiled schema and a candidate value in lockstep and records
path-qualified errors.

- Nested objects report every inner error.
- Arrays stop at the first offending element (one error per field).
- A candidate that cannot be indexed raises ``AccessFault`` immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from shapeguard.config import settings
from shapeguard.exceptions import AccessFault, BodyValidationError
from shapeguard.schemas.classifier import NodeKind
from shapeguard.schemas.nodes import Schema, SchemaNode
from shapeguard.services.candidate import (
    UNDEFINED,
    is_absent,
    is_array,
    is_object,
    kind_of,
    read_field,
)

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    ARRAY_SHAPE_MISMATCH = "array_shape_mismatch"
    ARRAY_ELEMENT_MISMATCH = "array_element_mismatch"
    UNION_MISMATCH = "union_mismatch"
    OBJECT_SHAPE_MISMATCH = "object_shape_mismatch"


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f".{self.path} {self.message}"


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def messages(self) -> list[str]:
        return [str(error) for error in self.errors]

    def raise_for_errors(self, label: str) -> None:
        """Convert a non-empty result into a single ``BodyValidationError``."""
        if self.errors:
            joined = settings.ERROR_SEPARATOR.join(self.messages())
            raise BodyValidationError(f"{label}: {joined}", self.errors)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


def validate(
    schema: Schema | Mapping[str, Any],
    candidate: Any,
    *,
    partial: bool = False,
    prefix: str = "",
) -> ValidationResult:
    """
    Validate ``candidate`` against ``schema``.

    Raw mappings are compiled on every call. Errors are ordered depth-first
    in schema-key order.
    """
    compiled = Schema.compile(schema)
    result = ValidationResult()

    if compiled.optional_body and (is_absent(candidate) or candidate is None):
        return result

    for key, node in compiled.items():
        prop = f"{prefix}.{key}" if prefix else key
        if not is_object(candidate):
            logger.debug("Access fault reading '%s' from %s", prop, kind_of(candidate).value)
            raise AccessFault(prop, kind_of(candidate).value)

        value = read_field(candidate, key)
        if is_absent(value):
            if node.optional or partial:
                continue
            result.errors.append(FieldError(prop, "is undefined", ErrorKind.MISSING_FIELD))
            continue

        result.errors.extend(_check_node(node, value, prop, partial))

    if result.errors:
        logger.debug("Validation produced %d error(s) under '%s'", len(result.errors), prefix or ".")
    return result


def _check_node(node: SchemaNode, value: Any, prop: str, partial: bool) -> list[FieldError]:
    """Check one present value against its node."""
    actual = kind_of(value).value
    kind = node.kind

    if kind == NodeKind.PRIMITIVE:
        if actual != node.token:
            return [FieldError(prop, f"is {actual}, expected {node.token}", ErrorKind.TYPE_MISMATCH)]
        return []

    if kind == NodeKind.OPTIONAL_PRIMITIVE:
        if actual != node.token:
            return [
                FieldError(
                    prop,
                    f"is {actual}, expected {node.token} or undefined",
                    ErrorKind.TYPE_MISMATCH,
                )
            ]
        return []

    if kind in (NodeKind.PRIMITIVE_ARRAY, NodeKind.OPTIONAL_PRIMITIVE_ARRAY):
        if not is_array(value):
            suffix = " or undefined" if node.optional else ""
            return [
                FieldError(
                    prop,
                    f"is {actual}, expected Array<{node.token}>{suffix}",
                    ErrorKind.ARRAY_SHAPE_MISMATCH,
                )
            ]
        for element in value:
            element_kind = kind_of(element).value
            if element_kind != node.token:
                # first mismatch only
                return [
                    FieldError(
                        prop,
                        f"element contains {element_kind}, expected {node.token}",
                        ErrorKind.ARRAY_ELEMENT_MISMATCH,
                    )
                ]
        return []

    if kind == NodeKind.WILDCARD_ARRAY:
        if not is_array(value):
            return [
                FieldError(prop, f"is {actual}, expected Array<any>", ErrorKind.ARRAY_SHAPE_MISMATCH)
            ]
        return []

    if kind in (NodeKind.NESTED_ARRAY, NodeKind.OPTIONAL_NESTED_ARRAY):
        if not is_array(value):
            return [FieldError(prop, f"is {actual}, expected Array", ErrorKind.ARRAY_SHAPE_MISMATCH)]
        for element in value:
            if not is_object(element):
                return [
                    FieldError(
                        prop,
                        f"element contains {kind_of(element).value}, expected object",
                        ErrorKind.ARRAY_ELEMENT_MISMATCH,
                    )
                ]
            inner = validate(node.body, element, partial=partial, prefix=prop)
            if not inner.ok:
                return inner.errors
        return []

    if kind == NodeKind.LITERAL_UNION:
        allowed = " | ".join(node.literals)
        if not isinstance(value, str):
            return [
                FieldError(prop, f"is {actual}, expected literal of {allowed}", ErrorKind.UNION_MISMATCH)
            ]
        if value not in node.literals:
            return [
                FieldError(prop, f"value is invalid, expected literal of {allowed}", ErrorKind.UNION_MISMATCH)
            ]
        return []

    if kind in (NodeKind.NESTED_OBJECT, NodeKind.OPTIONAL_NESTED_OBJECT):
        # a marker-bearing body treats None as absent, same as at the top level
        if value is None and node.body.optional_body:
            return []
        if not is_object(value):
            return [FieldError(prop, f"is {actual}, expected object", ErrorKind.OBJECT_SHAPE_MISMATCH)]
        return validate(node.body, value, partial=partial, prefix=prop).errors

    # WILDCARD / OPTIONAL_WILDCARD accept any present value; UNRECOGNIZED is not checked
    return []


# ---------------------------------------------------------------------------
# Public verdict API
# ---------------------------------------------------------------------------


def validate_body(
    schema: Schema | Mapping[str, Any],
    value: Any,
    *,
    partial: bool = False,
    prefix: str = "",
    raise_on_error: bool = True,
) -> list[str]:
    """
    Validate ``value`` and return the error strings.

    Raises ``BodyValidationError`` when ``raise_on_error`` is set and any
    error was recorded.
    """
    result = validate(schema, value, partial=partial, prefix=prefix)
    if raise_on_error:
        result.raise_for_errors("Object does not match type")
    return result.messages()


def is_valid(schema: Schema | Mapping[str, Any], value: Any = UNDEFINED) -> bool:
    return validate(schema, value).ok


def is_valid_partial(schema: Schema | Mapping[str, Any], value: Any = UNDEFINED) -> bool:
    """Like ``is_valid`` but missing required fields are tolerated."""
    return validate(schema, value, partial=True).ok


def assert_valid(schema: Schema | Mapping[str, Any], value: Any, partial: bool = False) -> None:
    """Raise ``BodyValidationError`` unless ``value`` conforms to ``schema``."""
    validate(schema, value, partial=partial).raise_for_errors("Request body is invalid")
