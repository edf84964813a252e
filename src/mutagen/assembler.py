"""
Assembler: Turn a raw token stream into punctuated, capitalized prose.

Punctuation marks do not print immediately; they set a pending separator
that is written in front of the next word. A stronger pending mark is never
downgraded by a weaker one (Period > Semicolon > Dash > Comma).
"""

import re
from enum import Enum
from typing import Iterable, List

from .compiler import Token
from .models import Mark


class Mode(Enum):
    """What separates the next word from the text before it."""
    BEGINNING = "beginning"
    NEW_SENTENCE = "new_sentence"
    INTERWORD = "interword"
    COMMA = "comma"
    SEMICOLON = "semicolon"
    DASH = "dash"
    A_AN = "a_an"
    CONCAT = "concat"


SEPARATORS = {
    Mode.CONCAT: "",
    Mode.INTERWORD: " ",
    Mode.COMMA: ", ",
    Mode.SEMICOLON: "; ",
    Mode.DASH: " -- ",
    Mode.NEW_SENTENCE: ". ",
}

# Modes a mark may upgrade; anything else already pending is as strong or stronger
UPGRADES_FROM = {
    Mark.COMMA: {Mode.INTERWORD},
    Mark.DASH: {Mode.INTERWORD, Mode.COMMA},
    Mark.SEMICOLON: {Mode.INTERWORD, Mode.COMMA, Mode.DASH},
}

MARK_MODES = {
    Mark.COMMA: Mode.COMMA,
    Mark.DASH: Mode.DASH,
    Mark.SEMICOLON: Mode.SEMICOLON,
}

STARTS_WITH_VOWEL = re.compile(r"^[aeiou]", re.IGNORECASE)


def capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def assemble(tokens: Iterable[Token]) -> str:
    """
    Join tokens into finished text.

    Example:
        assemble(["hello", Mark.COMMA, Mark.PERIOD, "goodbye"])
        -> "Hello. Goodbye."
    """
    pieces: List[str] = []
    mode = Mode.BEGINNING

    for token in tokens:
        if not token:
            continue

        if token is Mark.PERIOD:
            mode = Mode.NEW_SENTENCE
            continue
        if token in UPGRADES_FROM:
            if mode in UPGRADES_FROM[token]:
                mode = MARK_MODES[token]
            continue
        if token is Mark.CONCAT:
            mode = Mode.CONCAT
            continue

        next_mode = Mode.INTERWORD
        if token is Mark.A_AN:
            word = "a"
            next_mode = Mode.A_AN
        else:
            word = token

        if mode in (Mode.BEGINNING, Mode.NEW_SENTENCE):
            word = capitalize_first(word)

        if mode is Mode.A_AN:
            if STARTS_WITH_VOWEL.match(word):
                pieces.append("n")
            pieces.append(" ")
        elif mode is not Mode.BEGINNING:
            pieces.append(SEPARATORS[mode])

        pieces.append(word)
        mode = next_mode

    if mode not in (Mode.BEGINNING, Mode.NEW_SENTENCE):
        pieces.append(".")

    return "".join(pieces)
