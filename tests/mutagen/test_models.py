"""
Tests for grammar node construction.
"""

import pytest

from src.mutagen.errors import EmptyChoice, InvalidWeight
from src.mutagen.models import (
    AAn,
    Empty,
    Fixed,
    Literal,
    Mark,
    Period,
    Sequence,
    Shuffle,
    Weighted,
    as_node,
    choice,
    describe,
    fixed,
    sequence,
    shuffle,
    weighted,
)


def test_strings_and_none_are_coerced():
    seq = sequence("hello", None, "", Period)

    assert seq.children[0] == Literal("hello")
    assert isinstance(seq.children[1], Empty)
    assert isinstance(seq.children[2], Empty)
    assert seq.children[3] is Mark.PERIOD


def test_control_aliases_are_enum_members():
    assert AAn is Mark.A_AN
    assert Period == Mark.PERIOD
    assert as_node(Period) is Mark.PERIOD


def test_choice_is_uniform_weighted():
    node = choice("red", "green", "blue")

    assert isinstance(node, Weighted)
    assert node.weights == (1, 1, 1)
    assert node.total_weight == 3
    assert node.children == [Literal("red"), Literal("green"), Literal("blue")]


def test_weighted_from_alternating_args():
    node = weighted(2, "human", 1, "elf", 1, "dwarf")

    assert node.weights == (2, 1, 1)
    assert node.total_weight == 4
    assert node.children[0] == Literal("human")


def test_weighted_rejects_odd_argument_count():
    with pytest.raises(ValueError, match="alternating"):
        weighted(2, "human", 1)


@pytest.mark.parametrize("weight", [0, -1, 1.5, True, "2"])
def test_weighted_rejects_bad_weights(weight):
    with pytest.raises(InvalidWeight):
        Weighted([(weight, "a")])


def test_empty_alternatives_are_rejected():
    with pytest.raises(EmptyChoice):
        choice()
    with pytest.raises(EmptyChoice):
        shuffle()
    # EmptyChoice is also a ValueError
    with pytest.raises(ValueError):
        Weighted([])


def test_fixed_coerces_child():
    node = fixed("gender", "aunt")

    assert isinstance(node, Fixed)
    assert node.child == Literal("aunt")


def test_as_node_rejects_foreign_values():
    with pytest.raises(TypeError):
        as_node(42)


def test_shuffle_nodes_compare_by_identity():
    a = shuffle("one", "two")
    b = shuffle("one", "two")

    assert a != b
    assert a == a
    assert isinstance(a, Shuffle)


def test_describe():
    assert describe(weighted(2, "a", 1, "b")) == "Weighted[2, 1]"
    assert describe(shuffle("a", "b", "c")) == "Shuffle[3]"
    assert describe(fixed("x", "a")) == "Fixed('x')"
    assert describe(Mark.COMMA) == "COMMA"
    assert describe(Sequence([])) == "Sequence"
