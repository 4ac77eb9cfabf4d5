"""Tests for the GraphQL query projector."""

import pytest

from shapeguard.format.gql import parameterise, to_function, to_gql, to_gql_return
from shapeguard.services.candidate import UNDEFINED


def test_to_gql_wraps_call_and_selection():
    query = to_gql("user", {"id": "1"}, {"id": "string", "tags": ["string"]})
    assert query == '{ user (id: "1") { id tags } }'


def test_selection_expands_nested_shapes_only():
    schema = {
        "id": "string",
        "score": "number?",
        "payload": "any",
        "kind": ["a", "b"],
        "location": {"country": "string", "state": "string"},
        "items": [{"sku": "string", "qty": "number"}],
        "meta": [{"rev": "number"}, "?"],
        "history": [[{"at": "string"}], "?"],
    }
    assert to_gql_return(schema) == (
        "{ id score payload kind location { country state } "
        "items { sku qty } meta { rev } history { at } }"
    )


def test_selection_skips_optional_body_marker():
    assert to_gql_return({"?": "?", "id": "string"}) == "{ id }"


def test_selection_unwraps_list_form():
    assert to_gql_return([{"id": "string"}]) == "{ id }"


def test_selection_of_none_is_empty():
    assert to_gql_return(None) == ""
    assert to_gql("ping", None, None) == "{ ping  }"


def test_function_without_params():
    assert to_function("viewer", None) == "viewer"
    assert to_function("viewer", {}) == "viewer ()"


def test_parameters_are_serialised_as_literals():
    params = {
        "a": 1,
        "b": None,
        "c": UNDEFINED,
        "d": [1, "x", True, UNDEFINED],
        "e": {"f": "g", "h": UNDEFINED},
        "i": 2.5,
    }
    assert to_function("fn", params) == 'fn (a: 1, b: null, d: [1, "x", true], e: { f: "g" }, i: 2.5)'


def test_strings_are_json_escaped():
    assert parameterise('say "hi"') == '"say \\"hi\\""'
    assert parameterise("café") == '"café"'


def test_undefined_renders_empty():
    assert parameterise(UNDEFINED) == ""


def test_unsupported_parameter_type():
    with pytest.raises(TypeError, match="Cannot serialise object"):
        parameterise(object())
