# tests/core/config/test_immutable_flat_map.py
"""Testes do mapa plano somente leitura (`ImmutableFlatMap`)."""

import pytest

from flatconf.core.config.errors import UnsupportedOperationError
from flatconf.core.config.flat import ImmutableFlatMap


@pytest.fixture
def flat():
    return ImmutableFlatMap({"a.b": "1", "c": "x"})


def test_reads_like_a_mapping(flat):
    assert flat["a.b"] == "1"
    assert flat.get("missing") is None
    assert sorted(flat) == ["a.b", "c"]
    assert len(flat) == 2
    assert "c" in flat


def test_equals_plain_dict(flat):
    assert flat == {"c": "x", "a.b": "1"}
    assert flat != {"c": "x"}


@pytest.mark.parametrize(
    "mutate",
    [
        lambda m: m.__setitem__("c", "y"),
        lambda m: m.__delitem__("c"),
        lambda m: m.update(c="y"),
        lambda m: m.pop("c"),
        lambda m: m.popitem(),
        lambda m: m.clear(),
        lambda m: m.setdefault("d", "z"),
        lambda m: m.__ior__({"d": "z"}),
    ],
)
def test_rejects_mutation(flat, mutate):
    with pytest.raises(UnsupportedOperationError):
        mutate(flat)
    assert flat == {"a.b": "1", "c": "x"}


def test_mutation_error_is_type_error(flat):
    with pytest.raises(TypeError):
        flat["c"] = "y"


def test_hash_is_order_independent():
    first = ImmutableFlatMap({"a": "1", "b": "2"})
    second = ImmutableFlatMap({"b": "2", "a": "1"})

    assert hash(first) == hash(second)


def test_copies_source_mapping():
    source = {"a": "1"}
    flat = ImmutableFlatMap(source)

    source["a"] = "2"

    assert flat["a"] == "1"


def test_in_place_union_is_rejected(flat):
    with pytest.raises(UnsupportedOperationError):
        flat |= {"d": "z"}
