"""
Node model for generative grammars.

A grammar is a tree of nodes. Plain strings and None are accepted wherever
a node is expected and are coerced to Literal and Empty respectively.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

from .errors import EmptyChoice, InvalidWeight


class Mark(Enum):
    """Control tokens consumed by the assembler rather than printed."""
    PERIOD = "period"
    COMMA = "comma"
    SEMICOLON = "semicolon"
    DASH = "dash"
    A_AN = "a_an"
    CONCAT = "concat"


Period = Mark.PERIOD
Comma = Mark.COMMA
Semicolon = Mark.SEMICOLON
Dash = Mark.DASH
AAn = Mark.A_AN
Concat = Mark.CONCAT


@dataclass(frozen=True)
class Literal:
    """Emits its text unchanged, whatever the seed."""
    text: str


@dataclass(frozen=True)
class Empty:
    """Emits nothing."""
    pass


@dataclass(eq=False)
class Sequence:
    """Emits each child in declared order."""
    children: List["Node"] = field(default_factory=list)

    def __post_init__(self):
        self.children = [as_node(child) for child in self.children]


@dataclass(eq=False)
class Weighted:
    """
    Emits exactly one child, picked with probability proportional to weight.

    Uniform choice is the case where every weight is 1.
    """
    pairs: List[Tuple[int, "Node"]]

    def __post_init__(self):
        if not self.pairs:
            raise EmptyChoice("Weighted node needs at least one alternative")
        normalized = []
        for weight, child in self.pairs:
            if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                raise InvalidWeight(f"Weights must be positive integers, got {weight!r}")
            normalized.append((weight, as_node(child)))
        self.pairs = normalized

    @property
    def weights(self) -> Tuple[int, ...]:
        return tuple(weight for weight, _ in self.pairs)

    @property
    def children(self) -> List["Node"]:
        return [child for _, child in self.pairs]

    @property
    def total_weight(self) -> int:
        return sum(self.weights)


@dataclass(eq=False)
class Shuffle:
    """
    Emits one child per use, avoiding repeats within one seed's generation.

    Instances are compared by identity: the same Shuffle reached from several
    places in a tree shares one draw order.
    """
    children: List["Node"]

    def __post_init__(self):
        if not self.children:
            raise EmptyChoice("Shuffle node needs at least one alternative")
        self.children = [as_node(child) for child in self.children]


@dataclass(eq=False)
class Fixed:
    """Transparent wrapper making every choice under ``label`` select alike."""
    label: str
    child: "Node"

    def __post_init__(self):
        self.child = as_node(self.child)


Node = Union[Literal, Empty, Sequence, Weighted, Shuffle, Fixed, Mark]
NodeLike = Union[Node, str, None]


def as_node(value: NodeLike) -> Node:
    """Coerce plain strings and None into nodes."""
    if value is None:
        return Empty()
    if isinstance(value, str):
        return Literal(value) if value else Empty()
    if isinstance(value, (Literal, Empty, Sequence, Weighted, Shuffle, Fixed, Mark)):
        return value
    raise TypeError(f"Not a grammar node: {value!r}")


def sequence(*children: NodeLike) -> Sequence:
    return Sequence(list(children))


def choice(*children: NodeLike) -> Weighted:
    """Uniform choice among ``children``."""
    return Weighted([(1, child) for child in children])


def weighted(*args: Union[int, NodeLike]) -> Weighted:
    """
    Build a Weighted node from alternating weights and nodes.

    weighted(2, "human", 1, "elf", 1, "dwarf")
    """
    if len(args) % 2:
        raise ValueError("weighted() expects alternating weight, node arguments")
    pairs = [(args[ix], args[ix + 1]) for ix in range(0, len(args), 2)]
    return Weighted(pairs)


def shuffle(*children: NodeLike) -> Shuffle:
    return Shuffle(list(children))


def fixed(label: str, child: NodeLike) -> Fixed:
    return Fixed(label, child)


def describe(node: Node) -> str:
    """Short human-readable name for a node, used in log and error messages."""
    if isinstance(node, Mark):
        return node.name
    if isinstance(node, Literal):
        return repr(node.text)
    if isinstance(node, Weighted):
        return f"Weighted{list(node.weights)}"
    if isinstance(node, Shuffle):
        return f"Shuffle[{len(node.children)}]"
    if isinstance(node, Fixed):
        return f"Fixed({node.label!r})"
    return type(node).__name__
