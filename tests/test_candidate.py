"""Tests for candidate value classification."""

import pytest

from shapeguard.services.candidate import UNDEFINED, ValueKind, is_object, kind_of, read_field


@pytest.mark.parametrize(
    "value, kind",
    [
        (UNDEFINED, ValueKind.UNDEFINED),
        (None, ValueKind.NULL),
        (True, ValueKind.BOOLEAN),
        (0, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        ("", ValueKind.STRING),
        ([], ValueKind.ARRAY),
        ((1, 2), ValueKind.ARRAY),
        ({}, ValueKind.OBJECT),
    ],
)
def test_kind_of(value, kind):
    assert kind_of(value) == kind


def test_undefined_is_a_falsy_singleton():
    assert not UNDEFINED
    assert type(UNDEFINED)() is UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"


def test_read_field_distinguishes_missing_from_none():
    assert read_field({"a": None}, "a") is None
    assert read_field({}, "a") is UNDEFINED


def test_only_mappings_are_objects():
    assert is_object({"a": 1})
    assert not is_object(None)
    assert not is_object([])
