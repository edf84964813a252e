"""
Seeded text generation from grammars of choice nodes.

Same seed, same text: a grammar is compiled once, binding every choice
point to a prime cycle, then evaluated for any number of seeds.
"""

from .models import (
    Mark,
    Literal,
    Empty,
    Sequence,
    Weighted,
    Shuffle,
    Fixed,
    Period,
    Comma,
    Semicolon,
    Dash,
    AAn,
    Concat,
    sequence,
    choice,
    weighted,
    shuffle,
    fixed,
)
from .errors import (
    MutagenError,
    PoolExhausted,
    EmptyChoice,
    InvalidWeight,
    LabelMismatch,
    GrammarError,
    GrammarSyntaxError,
    UnknownRule,
    RecursiveGrammar,
)
from .cycles import CyclePool
from .compiler import Builder
from .evaluator import GenerationSession, generate_tokens
from .assembler import assemble
from .factory import CompiledGrammar, Factory, compile_grammar, evaluate
from .grammar import Grammar, parse_grammar, load_grammar

__all__ = [
    # Nodes
    "Mark",
    "Literal",
    "Empty",
    "Sequence",
    "Weighted",
    "Shuffle",
    "Fixed",
    "Period",
    "Comma",
    "Semicolon",
    "Dash",
    "AAn",
    "Concat",
    "sequence",
    "choice",
    "weighted",
    "shuffle",
    "fixed",
    # Errors
    "MutagenError",
    "PoolExhausted",
    "EmptyChoice",
    "InvalidWeight",
    "LabelMismatch",
    "GrammarError",
    "GrammarSyntaxError",
    "UnknownRule",
    "RecursiveGrammar",
    # Compile / evaluate
    "CyclePool",
    "Builder",
    "GenerationSession",
    "generate_tokens",
    "assemble",
    "CompiledGrammar",
    "Factory",
    "compile_grammar",
    "evaluate",
    # Grammar text
    "Grammar",
    "parse_grammar",
    "load_grammar",
]
