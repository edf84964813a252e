"""
Evaluator: Walk a compiled tree for one seed, producing raw tokens.

Selection is pure integer arithmetic on the seed and each node's cycle:
(seed mod cycle) mod total_weight for weighted choices, and a seeded swap
pass for shuffles.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .compiler import (
    CompiledFixed,
    CompiledNode,
    CompiledSequence,
    CompiledShuffle,
    CompiledToken,
    CompiledWeighted,
    ShuffleState,
    Token,
)


@dataclass
class GenerationSession:
    """
    Shuffle draw state held outside the compiled tree.

    Pass the same session to consecutive evaluations that should share
    "don't repeat" memory; use separate sessions for independent callers.
    A session may be shared between different compiled grammars: each
    compiled Shuffle gets its own entry, keyed by the state object it
    carries.
    """
    states: Dict[ShuffleState, ShuffleState] = field(default_factory=dict)

    def state_for(self, node: CompiledShuffle) -> ShuffleState:
        if node.state not in self.states:
            self.states[node.state] = ShuffleState()
        return self.states[node.state]


def check_seed(seed: int) -> int:
    """Validate a seed, returning it unchanged."""
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"Seed must be an integer, got {seed!r}")
    if seed < 0:
        raise ValueError(f"Seed must be non-negative, got {seed}")
    return seed


def select_weighted(node: CompiledWeighted, seed: int) -> int:
    """Index of the alternative a Weighted node picks for ``seed``."""
    value = (seed % node.cycle) % node.total_weight
    for index, weight in enumerate(node.weights):
        if value < weight:
            return index
        value -= weight
    # Unreachable while value < total_weight
    return len(node.weights) - 1


def shuffle_order(node: CompiledShuffle, seed: int) -> List[int]:
    """Fresh draw order for a Shuffle node; items are drawn from the end."""
    count = len(node.children)
    order = list(range(count))
    for i in range(count):
        j = (seed % (node.cycle + 2 * i)) % count
        order[i], order[j] = order[j], order[i]
    return order


def draw_shuffle(node: CompiledShuffle, seed: int, state: ShuffleState) -> int:
    """Take the next child index from ``state``, refilling as needed."""
    if seed != state.last_seed:
        state.last_seed = seed
        state.pending = []
    if not state.pending:
        state.pending = shuffle_order(node, seed)
    return state.pending.pop()


def generate_tokens(
    node: CompiledNode,
    seed: int,
    session: Optional[GenerationSession] = None,
) -> List[Token]:
    """
    Evaluate ``node`` for ``seed``.

    Args:
        node: Compiled tree root
        seed: Non-negative integer seed
        session: Where to keep Shuffle state. Defaults to the state stored
            on the compiled nodes themselves.

    Returns:
        Flat list of words and control marks
    """
    check_seed(seed)
    tokens: List[Token] = []
    # Explicit stack so deeply nested trees do not hit the recursion limit.
    # Nodes are visited in pre-order, which keeps shuffle draws in
    # left-to-right order.
    stack: List[CompiledNode] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, CompiledToken):
            tokens.append(current.token)
        elif isinstance(current, CompiledSequence):
            stack.extend(reversed(current.children))
        elif isinstance(current, CompiledWeighted):
            stack.append(current.children[select_weighted(current, seed)])
        elif isinstance(current, CompiledShuffle):
            state = current.state if session is None else session.state_for(current)
            stack.append(current.children[draw_shuffle(current, seed, state)])
        elif isinstance(current, CompiledFixed):
            stack.append(current.child)
        else:
            raise TypeError(f"Cannot evaluate {current!r}")
    return tokens
