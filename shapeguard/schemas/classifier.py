"""
Structural classification of raw schema nodes.

A schema node carries no explicit tag: its kind follows from its shape.
The predicates below inspect only the schema side and never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

PRIMITIVES = ("string", "number", "boolean")
OPTIONAL_PRIMITIVES = tuple(f"{token}?" for token in PRIMITIVES)
WILDCARDS = ("any", "unknown")
OPTIONAL_WILDCARDS = tuple(f"{token}?" for token in WILDCARDS)
OPTIONAL_MARKER = "?"

TOKENS = PRIMITIVES + OPTIONAL_PRIMITIVES + WILDCARDS + OPTIONAL_WILDCARDS


class NodeKind(str, Enum):
    PRIMITIVE = "primitive"
    OPTIONAL_PRIMITIVE = "optional_primitive"
    WILDCARD = "wildcard"
    OPTIONAL_WILDCARD = "optional_wildcard"
    PRIMITIVE_ARRAY = "primitive_array"
    OPTIONAL_PRIMITIVE_ARRAY = "optional_primitive_array"
    WILDCARD_ARRAY = "wildcard_array"
    NESTED_ARRAY = "nested_array"
    OPTIONAL_NESTED_ARRAY = "optional_nested_array"
    LITERAL_UNION = "literal_union"
    NESTED_OBJECT = "nested_object"
    OPTIONAL_NESTED_OBJECT = "optional_nested_object"
    UNRECOGNIZED = "unrecognized"


OPTIONAL_KINDS = frozenset(
    {
        NodeKind.OPTIONAL_PRIMITIVE,
        NodeKind.OPTIONAL_WILDCARD,
        NodeKind.OPTIONAL_PRIMITIVE_ARRAY,
        NodeKind.OPTIONAL_NESTED_ARRAY,
        NodeKind.OPTIONAL_NESTED_OBJECT,
    }
)

# Kinds an ``[inner, "?"]`` wrapper can make optional.
_OPTIONAL_OF = {
    NodeKind.PRIMITIVE_ARRAY: NodeKind.OPTIONAL_PRIMITIVE_ARRAY,
    NodeKind.OPTIONAL_PRIMITIVE_ARRAY: NodeKind.OPTIONAL_PRIMITIVE_ARRAY,
    NodeKind.NESTED_ARRAY: NodeKind.OPTIONAL_NESTED_ARRAY,
    NodeKind.OPTIONAL_NESTED_ARRAY: NodeKind.OPTIONAL_NESTED_ARRAY,
    NodeKind.NESTED_OBJECT: NodeKind.OPTIONAL_NESTED_OBJECT,
    NodeKind.OPTIONAL_NESTED_OBJECT: NodeKind.OPTIONAL_NESTED_OBJECT,
}


def _is_sequence(node: Any) -> bool:
    return isinstance(node, (list, tuple))


def is_primitive(node: Any) -> bool:
    return isinstance(node, str) and node in PRIMITIVES


def is_optional_primitive(node: Any) -> bool:
    return isinstance(node, str) and node in OPTIONAL_PRIMITIVES


def is_wildcard(node: Any) -> bool:
    return isinstance(node, str) and node in WILDCARDS


def is_optional_wildcard(node: Any) -> bool:
    return isinstance(node, str) and node in OPTIONAL_WILDCARDS


def is_token(node: Any) -> bool:
    return isinstance(node, str) and node in TOKENS


def is_tuple_primitive(node: Any) -> bool:
    return _is_sequence(node) and len(node) == 1 and is_primitive(node[0])


def is_tuple_optional(node: Any) -> bool:
    return _is_sequence(node) and len(node) == 1 and is_optional_primitive(node[0])


def is_tuple_wildcard(node: Any) -> bool:
    return _is_sequence(node) and len(node) == 1 and is_wildcard(node[0])


def is_tuple_body(node: Any) -> bool:
    return _is_sequence(node) and len(node) == 1 and isinstance(node[0], Mapping)


def is_body(node: Any) -> bool:
    return isinstance(node, Mapping)


def has_optional_marker(node: Any) -> bool:
    """
    True for a mapping carrying the reserved ``"?": "?"`` entry, or for a
    compiled schema that was built from one.
    """
    if not is_body(node):
        return False
    return node.get(OPTIONAL_MARKER) == OPTIONAL_MARKER or getattr(node, "optional_body", False)


def is_optional_wrapper(node: Any) -> bool:
    """``[shape, "?"]`` where ``shape`` is itself a list or a mapping."""
    return (
        _is_sequence(node)
        and len(node) == 2
        and node[1] == OPTIONAL_MARKER
        and (_is_sequence(node[0]) or is_body(node[0]))
    )


def is_union(node: Any) -> bool:
    """One or more plain strings, none of them a primitive or wildcard token."""
    if not _is_sequence(node) or len(node) < 1:
        return False
    return all(isinstance(item, str) and not is_token(item) for item in node)


def classify(node: Any) -> NodeKind:
    """Return the single kind a raw schema node represents."""
    if is_optional_wrapper(node):
        return _OPTIONAL_OF.get(classify(node[0]), NodeKind.UNRECOGNIZED)
    if is_primitive(node):
        return NodeKind.PRIMITIVE
    if is_optional_primitive(node):
        return NodeKind.OPTIONAL_PRIMITIVE
    if is_wildcard(node):
        return NodeKind.WILDCARD
    if is_optional_wildcard(node):
        return NodeKind.OPTIONAL_WILDCARD
    if is_tuple_primitive(node):
        return NodeKind.PRIMITIVE_ARRAY
    if is_tuple_optional(node):
        return NodeKind.OPTIONAL_PRIMITIVE_ARRAY
    if is_tuple_wildcard(node):
        return NodeKind.WILDCARD_ARRAY
    if is_tuple_body(node):
        return NodeKind.NESTED_ARRAY
    if is_union(node):
        return NodeKind.LITERAL_UNION
    if is_body(node):
        if has_optional_marker(node):
            return NodeKind.OPTIONAL_NESTED_OBJECT
        return NodeKind.NESTED_OBJECT
    return NodeKind.UNRECOGNIZED
