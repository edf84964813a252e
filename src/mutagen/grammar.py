"""
Grammar text parser.

Reads rule definitions like

    -name- = gender{ -male-name- / -female-name- }
    -male-name- = Bernard / Joseph / [2] Emmett
    -greeting- = hello , -a-an- { old / new } friend .

and produces node trees. Rules may be referenced before they are defined,
but a rule may not refer to itself, directly or through other rules.

Syntax summary:
    -name- = exp          rule definition
    a / b / [3] c         choice; [n] sets a weight (default 1)
    ( ... )               grouping; () is empty
    { a / b }             shuffle
    label{ a / b }        fixed choice shared by every use of ``label``
    . , ; --              punctuation
    # ...                 comment to end of line
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .errors import GrammarSyntaxError, RecursiveGrammar, UnknownRule
from .factory import Factory
from .models import (
    Empty,
    Fixed,
    Literal,
    Mark,
    Node,
    Sequence,
    Shuffle,
    Weighted,
)

logger = logging.getLogger(__name__)

DEFAULT_RULE = "-root-"

BUILTIN_RULES: Dict[str, Mark] = {
    "-a-": Mark.A_AN,
    "-an-": Mark.A_AN,
    "-a-an-": Mark.A_AN,
    "-adjoining-": Mark.CONCAT,
}

PUNCTUATION_MARKS = {
    ".": Mark.PERIOD,
    ",": Mark.COMMA,
    ";": Mark.SEMICOLON,
    "--": Mark.DASH,
}

TOKEN_PATTERN = re.compile(
    r"""
    (?P<space>[ \t\r\n]+|\#[^\n]*)
  | (?P<dash>--(?=\s|$))
  | (?P<name>-[A-Za-z0-9'-]+-)
  | (?P<punct>[.,;])
  | (?P<symbol>[=/()\[\]{}])
  | (?P<word>[A-Za-z0-9']+)
    """,
    re.VERBOSE,
)


@dataclass
class Token:
    kind: str
    value: str
    line: int
    column: int


# Parsed expressions are (kind, payload) tuples:
#   ("literal", str), ("mark", Mark), ("ref", name), ("empty", None),
#   ("seq", [expr]), ("choice", [(weight, expr)]), ("shuffle", [expr]),
#   ("fixed", (label, [(weight, expr)]))
Expr = Tuple[str, object]


def tokenize(text: str) -> List[Token]:
    """Split grammar text into tokens, dropping whitespace and comments."""
    tokens = []
    position = 0
    line = 1
    line_start = 0
    while position < len(text):
        match = TOKEN_PATTERN.match(text, position)
        if not match:
            raise GrammarSyntaxError(
                f"Unexpected character {text[position]!r}",
                line,
                position - line_start + 1,
            )
        kind = match.lastgroup
        value = match.group()
        if kind == "dash":
            kind = "punct"
        if kind != "space":
            tokens.append(Token(kind, value, line, position - line_start + 1))
        newlines = value.count("\n")
        if newlines:
            line += newlines
            line_start = position + value.rindex("\n") + 1
        position = match.end()
    return tokens


class _Parser:
    """Recursive-descent parser over a token list."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0

    def peek(self, offset: int = 0) -> Optional[Token]:
        index = self.index + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise self.error("Unexpected end of grammar")
        self.index += 1
        return token

    def expect(self, kind: str, value: Optional[str] = None) -> Token:
        token = self.peek()
        if token is None or token.kind != kind or (value is not None and token.value != value):
            wanted = value if value is not None else kind
            found = token.value if token else "end of grammar"
            raise self.error(f"Expected {wanted!r}, found {found!r}")
        self.index += 1
        return token

    def error(self, message: str) -> GrammarSyntaxError:
        token = self.peek()
        if token is None and self.tokens:
            token = self.tokens[-1]
        if token is None:
            return GrammarSyntaxError(message)
        return GrammarSyntaxError(message, token.line, token.column)

    def at_symbol(self, value: str, offset: int = 0) -> bool:
        token = self.peek(offset)
        return token is not None and token.kind == "symbol" and token.value == value

    def at_rule_start(self) -> bool:
        token = self.peek()
        return token is not None and token.kind == "name" and self.at_symbol("=", 1)

    def parse_rules(self) -> List[Tuple[Token, Expr]]:
        rules = []
        while self.peek() is not None:
            name = self.expect("name")
            self.expect("symbol", "=")
            rules.append((name, self.parse_expression()))
        return rules

    def parse_expression(self) -> Expr:
        alternatives = self.parse_alternatives()
        if len(alternatives) == 1:
            return alternatives[0][1]
        return ("choice", alternatives)

    def parse_alternatives(self) -> List[Tuple[int, Expr]]:
        alternatives = [self.parse_alternative()]
        while self.at_symbol("/"):
            self.advance()
            alternatives.append(self.parse_alternative())
        return alternatives

    def parse_alternative(self) -> Tuple[int, Expr]:
        weight = 1
        if self.at_symbol("["):
            self.advance()
            number = self.expect("word")
            if not number.value.isdigit() or int(number.value) <= 0:
                raise GrammarSyntaxError(
                    f"Weight must be a positive integer, got {number.value!r}",
                    number.line,
                    number.column,
                )
            weight = int(number.value)
            self.expect("symbol", "]")
        return weight, self.parse_sequence()

    def parse_sequence(self) -> Expr:
        factors = []
        while True:
            token = self.peek()
            if token is None or self.at_rule_start():
                break
            if token.kind == "symbol" and token.value in ("/", ")", "}", "]", "="):
                break
            factors.append(self.parse_factor())
        if not factors:
            return ("empty", None)
        if len(factors) == 1:
            return factors[0]
        return ("seq", factors)

    def parse_factor(self) -> Expr:
        token = self.advance()
        if token.kind == "name":
            return ("ref", token.value)
        if token.kind == "punct":
            return ("mark", PUNCTUATION_MARKS[token.value])
        if token.kind == "word":
            if self.at_symbol("{"):
                self.advance()
                alternatives = self.parse_alternatives()
                self.expect("symbol", "}")
                return ("fixed", (token.value, alternatives))
            return ("literal", token.value)
        if token.value == "(":
            expression = self.parse_expression()
            self.expect("symbol", ")")
            return expression
        if token.value == "{":
            alternatives = self.parse_alternatives()
            self.expect("symbol", "}")
            return ("shuffle", [expression for _, expression in alternatives])
        raise GrammarSyntaxError(
            f"Unexpected {token.value!r}", token.line, token.column
        )


class Grammar:
    """
    A table of named rules, each resolved to a node tree.

    Rules referenced from several places resolve to the same node object,
    so a shuffle rule used twice draws from one pool.
    """

    def __init__(self, rules: Dict[str, Node]):
        self.rules = rules

    @property
    def names(self) -> List[str]:
        return list(self.rules.keys())

    def rule(self, name: str = DEFAULT_RULE) -> Node:
        if name not in self.rules:
            raise UnknownRule(f"No rule named {name!r}")
        return self.rules[name]

    def factory(self, name: str = DEFAULT_RULE) -> Factory:
        return Factory(self.rule(name))

    def __contains__(self, name: str) -> bool:
        return name in self.rules

    def __len__(self) -> int:
        return len(self.rules)


class _Resolver:
    """Turns parsed rule expressions into nodes, following references."""

    def __init__(self, definitions: Dict[str, Expr]):
        self.definitions = definitions
        self.resolved: Dict[str, Node] = {}
        self.active: List[str] = []

    def resolve_all(self) -> Dict[str, Node]:
        for name in self.definitions:
            self.resolve(name)
        return {name: self.resolved[name] for name in self.definitions}

    def resolve(self, name: str) -> Node:
        if name in self.resolved:
            return self.resolved[name]
        if name in self.active:
            cycle = " -> ".join(self.active[self.active.index(name):] + [name])
            raise RecursiveGrammar(f"Rule refers to itself: {cycle}")
        if name not in self.definitions:
            if name in BUILTIN_RULES:
                return BUILTIN_RULES[name]
            raise UnknownRule(f"Reference to undefined rule {name!r}")

        self.active.append(name)
        node = self.build(self.definitions[name])
        self.active.pop()
        self.resolved[name] = node
        return node

    def build(self, expression: Expr) -> Node:
        kind, payload = expression
        if kind == "literal":
            return Literal(payload)
        if kind == "mark":
            return payload
        if kind == "ref":
            return self.resolve(payload)
        if kind == "empty":
            return Empty()
        if kind == "seq":
            return Sequence([self.build(item) for item in payload])
        if kind == "choice":
            return Weighted([(weight, self.build(item)) for weight, item in payload])
        if kind == "shuffle":
            return Shuffle([self.build(item) for item in payload])
        if kind == "fixed":
            label, alternatives = payload
            return Fixed(
                label,
                Weighted([(weight, self.build(item)) for weight, item in alternatives]),
            )
        raise ValueError(f"Unknown expression kind: {kind}")


def parse_grammar(text: str) -> Grammar:
    """
    Parse grammar text into a Grammar.

    Raises:
        GrammarSyntaxError: If the text is malformed or defines a rule twice
        UnknownRule: If a rule references an undefined rule
        RecursiveGrammar: If a rule refers to itself
    """
    parsed = _Parser(tokenize(text)).parse_rules()

    definitions: Dict[str, Expr] = {}
    for name, expression in parsed:
        if name.value in definitions:
            raise GrammarSyntaxError(
                f"Rule {name.value!r} defined twice", name.line, name.column
            )
        definitions[name.value] = expression

    rules = _Resolver(definitions).resolve_all()
    logger.info(f"Parsed grammar with {len(rules)} rules")
    return Grammar(rules)


def load_grammar(path: Union[str, Path]) -> Grammar:
    """Load and parse a grammar file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Grammar file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_grammar(f.read())
