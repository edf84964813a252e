"""
Builder: Compile a node tree into a tree of bound, evaluable nodes.

Every Weighted and Shuffle node is bound to a prime cycle taken from a
CyclePool. Fixed labels make several choice points share one cycle so that
they select the same branch for any seed.
"""

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple, Union

from .cycles import CyclePool
from .errors import LabelMismatch
from .models import (
    Empty,
    Fixed,
    Literal,
    Mark,
    Node,
    Sequence,
    Shuffle,
    Weighted,
    as_node,
    describe,
)

logger = logging.getLogger(__name__)

Token = Union[str, Mark]


@dataclass(eq=False)
class ShuffleState:
    """
    Draw order for one Shuffle node within the current seed's generation.

    Compared and hashed by identity, so a compiled node's own state can key
    the per-session copies held by a GenerationSession.
    """
    last_seed: Optional[int] = None
    pending: List[int] = field(default_factory=list)

    def reset(self) -> None:
        self.last_seed = None
        self.pending = []


@dataclass
class CompiledToken:
    """Leaf emitting a fixed word or control mark."""
    token: Token


@dataclass
class CompiledSequence:
    children: List["CompiledNode"] = field(default_factory=list)


@dataclass
class CompiledWeighted:
    cycle: int
    weights: Tuple[int, ...]
    children: List["CompiledNode"]
    label: Optional[str] = None

    @property
    def total_weight(self) -> int:
        return sum(self.weights)


@dataclass
class CompiledShuffle:
    cycle: int
    children: List["CompiledNode"]
    state: ShuffleState = field(default_factory=ShuffleState)
    label: Optional[str] = None


@dataclass
class CompiledFixed:
    label: str
    child: "CompiledNode"


CompiledNode = Union[
    CompiledToken, CompiledSequence, CompiledWeighted, CompiledShuffle, CompiledFixed
]

# Source node still to compile, the label forwarded to it, and the callback
# that attaches its compiled form to the parent
Pending = Tuple[Node, Optional[str], Callable[[CompiledNode], None]]


class Builder:
    """
    Compiles node trees.

    A Builder owns the cycle pool and label map for one compilation; build a
    new one for each grammar root.
    """

    def __init__(self, pool: Optional[CyclePool] = None):
        self.pool = pool if pool is not None else CyclePool()
        self._label_signatures: Dict[str, Tuple] = {}
        self._shuffle_states: Dict[int, ShuffleState] = {}

    @property
    def shuffle_count(self) -> int:
        """Number of distinct Shuffle nodes compiled so far."""
        return len(self._shuffle_states)

    def compile(self, node: Node) -> CompiledNode:
        """
        Compile ``node`` and everything beneath it.

        The tree is walked with an explicit stack, so nesting depth is not
        limited by the interpreter's recursion limit.

        Raises:
            PoolExhausted: If the tree needs more cycles than the pool holds
            LabelMismatch: If nodes sharing a Fixed label differ in shape
        """
        root: List[Optional[CompiledNode]] = [None]
        stack: List[Pending] = [(as_node(node), None, partial(root.__setitem__, 0))]
        while stack:
            current, label, attach = stack.pop()
            compiled, pending = self._build(current, label)
            attach(compiled)
            # First child on top, so cycles are allocated in pre-order
            stack.extend(reversed(pending))

        logger.info(
            f"Compiled grammar: {self.pool.allocated} cycles used, "
            f"{len(self.pool.labels)} labels, {self.pool.remaining} primes left"
        )
        return root[0]

    def _build(
        self, node: Node, label: Optional[str] = None
    ) -> Tuple[CompiledNode, List[Pending]]:
        """Compile one node, returning its children still to be built."""
        if isinstance(node, Mark):
            return CompiledToken(node), []
        if isinstance(node, Literal):
            return CompiledToken(node.text), []
        if isinstance(node, Empty):
            # Emits nothing
            return CompiledSequence([]), []
        if isinstance(node, Sequence):
            compiled = CompiledSequence([None] * len(node.children))
            return compiled, _slots(compiled.children, node.children)
        if isinstance(node, Fixed):
            return self._build_fixed(node)
        if isinstance(node, Weighted):
            cycle = self._cycle_for(node, label, ("weighted", node.weights))
            compiled = CompiledWeighted(
                cycle=cycle,
                weights=node.weights,
                children=[None] * len(node.children),
                label=label,
            )
            return compiled, _slots(compiled.children, node.children)
        if isinstance(node, Shuffle):
            cycle = self._cycle_for(node, label, ("shuffle", len(node.children)))
            compiled = CompiledShuffle(
                cycle=cycle,
                children=[None] * len(node.children),
                state=self._shuffle_state(node),
                label=label,
            )
            return compiled, _slots(compiled.children, node.children)
        raise TypeError(f"Cannot compile {node!r}")

    def _build_fixed(self, node: Fixed) -> Tuple[CompiledFixed, List[Pending]]:
        child_label = None
        if isinstance(node.child, (Weighted, Shuffle)):
            child_label = node.label
        else:
            logger.debug(
                f"Label {node.label!r} wraps {describe(node.child)}, which makes no choice"
            )
        compiled = CompiledFixed(label=node.label, child=None)
        return compiled, [(node.child, child_label, partial(setattr, compiled, "child"))]

    def _cycle_for(self, node: Node, label: Optional[str], signature: Tuple) -> int:
        if label is None:
            cycle = self.pool.allocate()
            logger.debug(f"Allocated cycle {cycle} for {describe(node)}")
            return cycle

        expected = self._label_signatures.setdefault(label, signature)
        if expected != signature:
            raise LabelMismatch(
                f"Label {label!r} wraps {describe(node)}, but was first used on a "
                f"{expected[0]} node with {self._format_signature(expected)}"
            )
        return self.pool.allocate_for_label(label)

    def _shuffle_state(self, node: Shuffle) -> ShuffleState:
        """State shared by every occurrence of the same Shuffle node."""
        return self._shuffle_states.setdefault(id(node), ShuffleState())

    @staticmethod
    def _format_signature(signature: Tuple) -> str:
        kind, shape = signature
        if kind == "weighted":
            return f"weights {list(shape)}"
        return f"{shape} alternatives"


def _slots(targets: List, children: List[Node]) -> List[Pending]:
    """Pending builds that fill ``targets`` in place, one per child."""
    return [
        (child, None, partial(targets.__setitem__, index))
        for index, child in enumerate(children)
    ]
