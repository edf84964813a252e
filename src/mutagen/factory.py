"""
Factory: Compile a grammar once, then generate text for any seed.

    factory = Factory(sequence(AAn, choice("elephant", "cat")))
    factory(0)  # "An elephant." or "A cat."
"""

from dataclasses import dataclass
from typing import List, Optional

from .assembler import assemble
from .compiler import Builder, CompiledNode, Token
from .cycles import CyclePool
from .evaluator import GenerationSession, generate_tokens
from .models import NodeLike, as_node


@dataclass
class CompiledGrammar:
    """A compiled tree plus bookkeeping from its compilation."""
    root: CompiledNode
    cycles_used: int
    labels: List[str]
    shuffle_count: int

    def reset_shuffles(self) -> None:
        """Forget Shuffle draw state stored on the tree."""
        _reset(self.root)


def _reset(root: CompiledNode) -> None:
    stack = [root]
    while stack:
        node = stack.pop()
        state = getattr(node, "state", None)
        if state is not None:
            state.reset()
        stack.extend(getattr(node, "children", []))
        child = getattr(node, "child", None)
        if child is not None:
            stack.append(child)


def compile_grammar(root: NodeLike, pool: Optional[CyclePool] = None) -> CompiledGrammar:
    """
    Compile a node tree.

    Raises:
        PoolExhausted: If the tree has more choice points than primes
        LabelMismatch: If nodes sharing a Fixed label differ in shape
    """
    builder = Builder(pool)
    compiled = builder.compile(as_node(root))
    return CompiledGrammar(
        root=compiled,
        cycles_used=builder.pool.allocated,
        labels=sorted(builder.pool.labels),
        shuffle_count=builder.shuffle_count,
    )


def evaluate_tokens(
    compiled: CompiledGrammar,
    seed: int,
    session: Optional[GenerationSession] = None,
) -> List[Token]:
    return generate_tokens(compiled.root, seed, session)


def evaluate(
    compiled: CompiledGrammar,
    seed: int,
    session: Optional[GenerationSession] = None,
) -> str:
    """Generate the finished text for ``seed``."""
    return assemble(evaluate_tokens(compiled, seed, session))


class Factory:
    """
    Callable text generator for one grammar.

    Shuffle state persists between calls; calls with the same seed continue
    the same draw order. Use ``fresh=True`` or a GenerationSession to avoid
    that.
    """

    def __init__(self, root: NodeLike, pool: Optional[CyclePool] = None):
        self.compiled = compile_grammar(root, pool)

    def __call__(
        self,
        seed: int,
        session: Optional[GenerationSession] = None,
        fresh: bool = False,
    ) -> str:
        if fresh and session is None:
            session = GenerationSession()
        return evaluate(self.compiled, seed, session)

    def tokens(self, seed: int, session: Optional[GenerationSession] = None) -> List[Token]:
        return evaluate_tokens(self.compiled, seed, session)

    def reset(self) -> None:
        self.compiled.reset_shuffles()
