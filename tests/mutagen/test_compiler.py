"""
Tests for compiling node trees into cycle-bound trees.
"""

import logging

import pytest

from src.mutagen.compiler import (
    Builder,
    CompiledFixed,
    CompiledSequence,
    CompiledShuffle,
    CompiledToken,
    CompiledWeighted,
)
from src.mutagen.cycles import CyclePool
from src.mutagen.errors import LabelMismatch, PoolExhausted
from src.mutagen.models import (
    AAn,
    Concat,
    Empty,
    Period,
    choice,
    fixed,
    sequence,
    shuffle,
    weighted,
)


def _make_builder(*primes: int) -> Builder:
    return Builder(CyclePool(primes) if primes else None)


def test_leaves_and_sequences_use_no_cycles():
    builder = _make_builder()
    compiled = builder.compile(sequence("hello", Empty(), Period, AAn, Concat))

    assert isinstance(compiled, CompiledSequence)
    assert compiled.children[0] == CompiledToken("hello")
    assert compiled.children[1] == CompiledSequence([])
    assert compiled.children[2] == CompiledToken(Period)
    assert builder.pool.allocated == 0


def test_plain_string_root():
    assert _make_builder().compile("hello") == CompiledToken("hello")


def test_parent_choice_allocates_before_children():
    builder = _make_builder()
    compiled = builder.compile(choice(choice("a", "b"), "c"))

    assert isinstance(compiled, CompiledWeighted)
    assert compiled.cycle == 13619
    assert compiled.children[0].cycle == 13613
    assert compiled.weights == (1, 1)
    assert builder.pool.allocated == 2


def test_subtree_allocates_before_next_sibling():
    builder = _make_builder(5, 7, 11, 13)
    compiled = builder.compile(sequence(choice(choice("a", "b"), "c"), choice("d", "e")))

    first, second = compiled.children
    assert first.cycle == 13
    assert first.children[0].cycle == 11
    assert second.cycle == 7
    assert builder.pool.remaining == 1


def test_deeply_nested_tree_compiles():
    node = shuffle("x", "y")
    for _ in range(5000):
        node = fixed("depth", sequence(node))
    builder = _make_builder()
    compiled = builder.compile(node)

    assert isinstance(compiled, CompiledFixed)
    assert builder.pool.allocated == 1
    assert builder.shuffle_count == 1


def test_weighted_keeps_weights():
    compiled = _make_builder().compile(weighted(2, "human", 1, "elf", 1, "dwarf"))

    assert compiled.weights == (2, 1, 1)
    assert compiled.total_weight == 4
    assert compiled.label is None


def test_fixed_nodes_share_one_cycle():
    builder = _make_builder()
    compiled = builder.compile(sequence(
        fixed("gender", choice("aunt", "uncle")),
        choice("x", "y"),
        fixed("gender", choice("Harriet", "Harold")),
    ))

    first, middle, last = compiled.children
    assert isinstance(first, CompiledFixed)
    assert first.child.cycle == last.child.cycle == 13619
    assert first.child.label == "gender"
    assert middle.cycle == 13613
    assert builder.pool.allocated == 2
    assert builder.pool.labels == {"gender": 13619}


def test_fixed_around_non_choice_ignores_label():
    builder = _make_builder()
    compiled = builder.compile(fixed("gender", sequence("a", "b")))

    assert isinstance(compiled, CompiledFixed)
    assert isinstance(compiled.child, CompiledSequence)
    assert builder.pool.labels == {}
    assert builder.pool.allocated == 0


def test_fixed_label_applies_only_to_immediate_child():
    builder = _make_builder()
    compiled = builder.compile(fixed("gender", choice(choice("a", "b"), "c")))

    outer = compiled.child
    assert outer.label == "gender"
    assert outer.children[0].label is None
    assert outer.children[0].cycle != outer.cycle


def test_label_arity_mismatch_is_rejected():
    tree = sequence(
        fixed("gender", choice("aunt", "uncle")),
        fixed("gender", choice("Harriet", "Harold", "Pat")),
    )
    with pytest.raises(LabelMismatch, match="gender"):
        _make_builder().compile(tree)


def test_label_weight_mismatch_is_rejected():
    tree = sequence(
        fixed("gender", weighted(2, "aunt", 1, "uncle")),
        fixed("gender", choice("Harriet", "Harold")),
    )
    with pytest.raises(LabelMismatch, match=r"weights \[2, 1\]"):
        _make_builder().compile(tree)


def test_label_kind_mismatch_is_rejected():
    tree = sequence(
        fixed("gender", shuffle("aunt", "uncle")),
        fixed("gender", choice("Harriet", "Harold")),
    )
    with pytest.raises(LabelMismatch):
        _make_builder().compile(tree)


def test_pool_exhaustion_is_fatal():
    tree = sequence(choice("a", "b"), choice("c", "d"), choice("e", "f"))

    with pytest.raises(PoolExhausted):
        _make_builder(7, 11).compile(tree)


def test_repeated_shuffle_shares_state_but_not_cycle():
    x = shuffle("one", "two", "three")
    builder = _make_builder()
    compiled = builder.compile(sequence(x, x, shuffle("a", "b")))

    first, second, other = compiled.children
    assert isinstance(first, CompiledShuffle)
    assert first.state is second.state
    assert first.cycle != second.cycle
    assert other.state is not first.state
    assert builder.shuffle_count == 2


def test_compile_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="src.mutagen.compiler"):
        _make_builder().compile(choice("a", "b"))

    assert "1 cycles used" in caplog.text
