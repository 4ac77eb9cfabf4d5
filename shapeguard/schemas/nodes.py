"""
Compiled schema representation.

A raw schema is a plain nested mapping. ``Schema.compile`` classifies every
node once and stores the result as a tagged ``SchemaNode`` so validation
dispatches on ``node.kind`` instead of re-inspecting raw shapes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from shapeguard.exceptions import SchemaDefinitionError
from shapeguard.schemas.classifier import (
    OPTIONAL_KINDS,
    OPTIONAL_MARKER,
    NodeKind,
    classify,
    is_optional_wrapper,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaNode:
    """A single classified entry of a schema."""

    kind: NodeKind
    token: str | None = None
    literals: tuple[str, ...] = ()
    body: Schema | None = None
    raw: Any = field(default=None, compare=False, repr=False)

    @property
    def optional(self) -> bool:
        return self.kind in OPTIONAL_KINDS


@dataclass(frozen=True)
class Schema(Mapping):
    """
    Ordered, immutable field-name -> SchemaNode mapping.

    ``optional_body`` is set when the raw mapping carried the reserved
    ``"?": "?"`` entry; that entry is not a field. A compiled schema can be
    nested inside a raw one and is reused as-is.
    """

    fields: Mapping[str, SchemaNode]
    optional_body: bool = False

    @classmethod
    def compile(cls, raw: Schema | Mapping[str, Any], path: str = "") -> Schema:
        if isinstance(raw, Schema):
            return raw
        if not isinstance(raw, Mapping):
            raise SchemaDefinitionError(
                f"Schema at '{path or '.'}' must be a mapping, got {type(raw).__name__}"
            )

        fields: dict[str, SchemaNode] = {}
        optional_body = False
        for key, value in raw.items():
            if not isinstance(key, str):
                raise SchemaDefinitionError(
                    f"Schema keys must be strings, got {key!r} at '{path or '.'}'"
                )
            if key == OPTIONAL_MARKER and value == OPTIONAL_MARKER:
                optional_body = True
                continue
            fields[key] = compile_node(value, f"{path}.{key}" if path else key)

        return cls(fields=MappingProxyType(fields), optional_body=optional_body)

    def __getitem__(self, key: str) -> SchemaNode:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def items(self):
        return self.fields.items()


def compile_node(raw: Any, path: str) -> SchemaNode:
    """Classify one raw node and attach whatever the engine needs for it."""
    kind = classify(raw)

    if kind == NodeKind.UNRECOGNIZED:
        logger.warning(
            "Unrecognized schema node at '%s': %r (present values are not checked)",
            path,
            raw,
        )
        return SchemaNode(kind=kind, raw=raw)

    if is_optional_wrapper(raw):
        inner = compile_node(raw[0], path)
        return SchemaNode(kind=kind, token=inner.token, body=inner.body, raw=raw)

    if kind in (NodeKind.PRIMITIVE, NodeKind.WILDCARD):
        return SchemaNode(kind=kind, token=raw, raw=raw)
    if kind in (NodeKind.OPTIONAL_PRIMITIVE, NodeKind.OPTIONAL_WILDCARD):
        return SchemaNode(kind=kind, token=raw[:-1], raw=raw)
    if kind in (NodeKind.PRIMITIVE_ARRAY, NodeKind.WILDCARD_ARRAY):
        return SchemaNode(kind=kind, token=raw[0], raw=raw)
    if kind == NodeKind.OPTIONAL_PRIMITIVE_ARRAY:
        return SchemaNode(kind=kind, token=raw[0][:-1], raw=raw)
    if kind == NodeKind.NESTED_ARRAY:
        return SchemaNode(kind=kind, body=Schema.compile(raw[0], path), raw=raw)
    if kind == NodeKind.LITERAL_UNION:
        return SchemaNode(kind=kind, literals=tuple(raw), raw=raw)

    # NESTED_OBJECT / OPTIONAL_NESTED_OBJECT
    return SchemaNode(kind=kind, body=Schema.compile(raw, path), raw=raw)
