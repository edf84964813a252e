"""
Exceptions raised while building, compiling and parsing grammars.
"""


class MutagenError(Exception):
    """Base exception for grammar construction and compilation failures."""
    pass


class PoolExhausted(MutagenError):
    """Raised when the cycle pool has no primes left to hand out."""
    pass


class EmptyChoice(MutagenError, ValueError):
    """Raised when a Weighted or Shuffle node is built with no alternatives."""
    pass


class InvalidWeight(MutagenError, ValueError):
    """Raised when a Weighted alternative has a non-positive or non-integer weight."""
    pass


class LabelMismatch(MutagenError):
    """Raised when nodes sharing a Fixed label disagree on arity or weights."""
    pass


class GrammarError(MutagenError):
    """Base exception for grammar-text problems."""
    pass


class GrammarSyntaxError(GrammarError):
    """Raised when grammar text cannot be parsed."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.line = line
        self.column = column
        if line:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class UnknownRule(GrammarError):
    """Raised when a grammar references a rule that is never defined."""
    pass


class RecursiveGrammar(GrammarError):
    """Raised when a rule refers to itself, directly or through other rules."""
    pass
