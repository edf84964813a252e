"""
Tests for seed-driven evaluation of compiled trees.
"""

import pytest

from src.mutagen.compiler import (
    Builder,
    CompiledShuffle,
    CompiledToken,
    CompiledWeighted,
    ShuffleState,
)
from src.mutagen.evaluator import (
    GenerationSession,
    check_seed,
    draw_shuffle,
    generate_tokens,
    select_weighted,
    shuffle_order,
)
from src.mutagen.models import Comma, Period, Sequence, choice, fixed, sequence, shuffle


def _make_weighted(cycle: int = 7) -> CompiledWeighted:
    return CompiledWeighted(
        cycle=cycle,
        weights=(2, 1, 1),
        children=[CompiledToken("human"), CompiledToken("elf"), CompiledToken("dwarf")],
    )


def _make_shuffle(cycle: int = 5) -> CompiledShuffle:
    return CompiledShuffle(
        cycle=cycle,
        children=[CompiledToken("one"), CompiledToken("two"), CompiledToken("three")],
    )


@pytest.mark.parametrize(
    "seed,expected",
    [
        (0, 0),  # 0 % 7 % 4 = 0
        (1, 0),
        (2, 1),
        (3, 2),
        (8, 0),  # 8 % 7 = 1
        (9, 1),  # 9 % 7 = 2
        (10, 2),  # 10 % 7 = 3
        (13, 1),  # 13 % 7 = 6, 6 % 4 = 2
    ],
)
def test_select_weighted_walks_weights(seed, expected):
    assert select_weighted(_make_weighted(), seed) == expected


def test_shuffle_order_swap_pass():
    # seed 7, cycle 5: j = 7%5%3 = 2, 7%7%3 = 0, 7%9%3 = 1
    assert shuffle_order(_make_shuffle(), 7) == [1, 0, 2]


def test_draw_shuffle_takes_from_end_and_refills():
    node = _make_shuffle()
    state = ShuffleState()

    draws = [draw_shuffle(node, 7, state) for _ in range(4)]

    assert draws == [2, 0, 1, 2]
    assert state.last_seed == 7


def test_draw_shuffle_resets_on_new_seed():
    node = _make_shuffle()
    state = ShuffleState()
    draw_shuffle(node, 7, state)
    assert len(state.pending) == 2

    draw_shuffle(node, 8, state)

    assert state.last_seed == 8
    assert len(state.pending) == 2


def test_generate_tokens_keeps_marks():
    compiled = Builder().compile(sequence("hello", Comma, "world", Period))

    assert generate_tokens(compiled, 0) == ["hello", Comma, "world", Period]


def test_generate_tokens_uniform_choice():
    compiled = Builder().compile(choice("red", "green", "blue"))

    # Seeds below the cycle (13619) index directly
    assert [generate_tokens(compiled, seed) for seed in range(4)] == [
        ["red"], ["green"], ["blue"], ["red"],
    ]


def test_fixed_choices_agree_for_every_seed():
    compiled = Builder().compile(sequence(
        fixed("gender", choice("aunt", "uncle")),
        fixed("gender", choice("Harriet", "Harold")),
    ))

    for seed in list(range(50)) + [13613, 13619 * 3 + 1, 10 ** 12 + 7]:
        tokens = generate_tokens(compiled, seed)
        assert tokens in (["aunt", "Harriet"], ["uncle", "Harold"])


def test_unlabelled_choices_can_disagree():
    compiled = Builder().compile(sequence(
        choice("aunt", "uncle"),
        choice("Harriet", "Harold"),
    ))

    # 13613 % 13619 is odd, 13613 % 13613 is even
    assert generate_tokens(compiled, 13613) == ["uncle", "Harriet"]


def test_repeated_shuffle_draws_without_replacement():
    x = shuffle("one", "two", "three")
    compiled = Builder().compile(sequence(x, x, x))

    for seed in range(100):
        tokens = generate_tokens(compiled, seed)
        assert sorted(tokens) == ["one", "three", "two"]


def test_shuffle_memo_persists_between_calls():
    x = shuffle("one", "two", "three")
    compiled = Builder().compile(sequence(x, x))

    first = generate_tokens(compiled, 0)
    second = generate_tokens(compiled, 0)

    assert first == ["two", "one"]
    assert second == ["three", "two"]


def test_sessions_isolate_shuffle_state():
    x = shuffle("one", "two", "three")
    compiled = Builder().compile(sequence(x, x))

    assert generate_tokens(compiled, 0, GenerationSession()) == ["two", "one"]
    assert generate_tokens(compiled, 0, GenerationSession()) == ["two", "one"]

    session = GenerationSession()
    generate_tokens(compiled, 0, session)
    assert generate_tokens(compiled, 0, session) == ["three", "two"]
    assert len(session.states) == 1
    # The tree's own state was never touched
    assert compiled.children[0].state.last_seed is None


def test_session_shared_between_grammars():
    big = Builder().compile(shuffle("a", "b", "c", "d", "e", "f"))
    small = Builder().compile(shuffle("x", "y"))
    session = GenerationSession()

    generate_tokens(big, 3, session)
    tokens = generate_tokens(small, 3, session)

    assert tokens == generate_tokens(small, 3, GenerationSession())
    assert len(session.states) == 2


def test_deeply_nested_tree():
    node = choice("left", "right")
    for _ in range(5000):
        node = Sequence([node])
    compiled = Builder().compile(node)

    assert generate_tokens(compiled, 0) == ["left"]
    assert generate_tokens(compiled, 1) == ["right"]


@pytest.mark.parametrize("seed", [-1, 1.5, "3", True, None])
def test_bad_seeds_rejected(seed):
    with pytest.raises(ValueError):
        check_seed(seed)


def test_check_seed_passes_valid_seed():
    assert check_seed(0) == 0
    assert check_seed(10 ** 15) == 10 ** 15
