"""Tests for the record-like (three named fields) representation of a vector"""

import attrs
from expression import result
import hypothesis as hyp
import pytest

from vector3d import Vector3d
from .hypothesis_extra_strategies import gen_float_vector


def test_field_names_are_stable_and_ordered():
    assert Vector3d.field_names() == ("x", "y", "z")
    assert tuple(f.name for f in attrs.fields(Vector3d)) == Vector3d.field_names()


def test_to_mapping_is_ordered_by_axis():
    m = Vector3d(3, 1, 2).to_mapping()
    assert list(m.items()) == [("x", 3), ("y", 1), ("z", 2)]


def test_to_tuple():
    assert Vector3d(3, 1, 2).to_tuple == (3, 1, 2)


@hyp.given(original_vector=gen_float_vector())
def test_vector_roundtrips_through_mapping(original_vector):
    match Vector3d.from_mapping(attrs.asdict(original_vector)):
        case result.Result(tag="ok", ok=parsed_vector):
            assert parsed_vector == original_vector
        case result.Result(tag="error", error=err_msg):
            pytest.fail(f"Failed to parse vector: {err_msg}")
        case unexpected:
            pytest.fail(f"Expected a Result-wrapped value but got a value of type {type(unexpected).__name__}")


@pytest.mark.parametrize("mapping", [
    {"x": 1, "y": 2},
    {"x": 1, "y": 2, "z": 3, "w": 4},
    {"a": 1, "b": 2, "c": 3},
    {},
    ])
def test_from_mapping_requires_exactly_the_three_fields(mapping):
    match Vector3d.from_mapping(mapping):
        case result.Result(tag="error", error=err):
            assert isinstance(err, TypeError)
        case result.Result(tag="ok", ok=v):
            pytest.fail(f"Expected failure to parse vector but got {v!r}")
    with pytest.raises(TypeError):
        Vector3d.unsafe_from_mapping(mapping)


def test_from_mapping_ignores_key_order():
    assert Vector3d.unsafe_from_mapping({"z": 3, "x": 1, "y": 2}) == Vector3d(1, 2, 3)


@pytest.mark.parametrize("values", [[1, 2, 3], (1, 2, 3), range(1, 4)])
def test_from_sequence(values):
    assert Vector3d.from_sequence(values) == Vector3d(1, 2, 3)


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4]])
def test_from_sequence_requires_exactly_three_values(values):
    with pytest.raises(ValueError):
        Vector3d.from_sequence(values)
