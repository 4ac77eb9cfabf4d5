"""
Render schemas as GraphQL query strings.

A schema doubles as a selection set: nested objects and nested-body arrays
expand into ``name { ... }`` while every other field is a bare name.
Parameter mappings become a call-argument list.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from shapeguard.schemas.nodes import Schema
from shapeguard.services.candidate import is_absent


def to_gql(fn: str, params: Mapping[str, Any] | None, schema: Schema | Mapping[str, Any] | list) -> str:
    """
    Build a complete query body.

        to_gql("user", {"id": "1"}, {"id": "string", "tags": ["string"]})
        -> '{ user (id: "1") { id tags } }'
    """
    return f"{{ {to_function(fn, params)} {to_gql_return(schema)} }}"


def to_function(fn: str, params: Mapping[str, Any] | None) -> str:
    if params is None:
        return fn
    return f"{fn} ({_pairs(params)})"


def parameterise(value: Any) -> str:
    """Serialise one argument value in GraphQL literal notation."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return json.dumps(value, ensure_ascii=False)
    if is_absent(value):
        return ""
    if isinstance(value, (list, tuple)):
        items = [parameterise(item) for item in value if not is_absent(item)]
        return f"[{', '.join(items)}]"
    if isinstance(value, Mapping):
        return f"{{ {_pairs(value)} }}"
    raise TypeError(f"Cannot serialise {type(value).__name__} as a query argument")


def _pairs(params: Mapping[str, Any]) -> str:
    return ", ".join(
        f"{key}: {parameterise(val)}" for key, val in params.items() if not is_absent(val)
    )


def to_gql_return(schema: Schema | Mapping[str, Any] | list | None) -> str:
    """Render a schema (or a one-element ``[schema]`` list) as a selection set."""
    if schema is None:
        return ""
    if isinstance(schema, (list, tuple)):
        schema = schema[0]

    compiled = Schema.compile(schema)
    props = []
    for key, node in compiled.items():
        if node.body is not None:
            props.append(f"{key} {to_gql_return(node.body)}")
        else:
            props.append(key)
    return f"{{ {' '.join(props)} }}"
