"""Tokenizer for chord symbols, pluggable into Lark as a custom lexer.

Chord notation is too context-dependent for a regex lexer: ``b`` is a flat
but ``bb`` is a double flat, ``m`` is minor unless it starts ``maj``, and
``1`` only means something as part of ``11`` or ``13``. Tokens are
classified one code point at a time with a fixed lookahead of two.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Tuple

from lark import Token
from lark.lexer import Lexer

# Token types (terminal names in the grammar)
NOTE = "NOTE"
ACCIDENTAL = "ACCIDENTAL"
TONE = "TONE"
SUS = "SUS"
AUG = "AUG"
MAJ7 = "MAJ7"
MIN = "MIN"
DIM = "DIM"
HALFDIM = "HALFDIM"
FULLDIM = "FULLDIM"
SLASH = "SLASH"
DASH = "DASH"
PLUS = "PLUS"
SEVEN = "SEVEN"
TWO = "TWO"
FOUR = "FOUR"
FIVE = "FIVE"
SIX = "SIX"
UNKNOWN = "UNKNOWN"

TOKEN_TYPES = (
    NOTE,
    ACCIDENTAL,
    TONE,
    SUS,
    AUG,
    MAJ7,
    MIN,
    DIM,
    HALFDIM,
    FULLDIM,
    SLASH,
    DASH,
    PLUS,
    SEVEN,
    TWO,
    FOUR,
    FIVE,
    SIX,
)
"""Every token type the grammar knows about (UNKNOWN is deliberately absent)."""

DISPLAY_NAMES: Dict[str, str] = {
    NOTE: "note",
    ACCIDENTAL: "accidental",
    TONE: "tone",
    SUS: "'sus'",
    AUG: "'aug'",
    MAJ7: "'maj'",
    MIN: "'min'",
    DIM: "'dim'",
    HALFDIM: "'ø'",
    FULLDIM: "'o'",
    SLASH: "'/'",
    DASH: "'-'",
    PLUS: "'+'",
    SEVEN: "'7'",
    TWO: "'2'",
    FOUR: "'4'",
    FIVE: "'5'",
    SIX: "'6'",
    "$END": "end of input",
}
"""Human-readable names for token types, used in syntax errors."""

# Multi-character lexemes, checked before single characters. Order matters:
# "bb" must win over "b", and "maj"/"min" over "m".
_KEYWORDS: List[Tuple[str, str]] = [
    ("sus", SUS),
    ("aug", AUG),
    ("maj", MAJ7),
    ("min", MIN),
    ("dim", DIM),
    ("bb", ACCIDENTAL),
    ("11", TONE),
    ("13", TONE),
]

_SINGLE: Dict[str, str] = {
    "#": ACCIDENTAL,
    "♯": ACCIDENTAL,
    "x": ACCIDENTAL,
    "𝄪": ACCIDENTAL,
    "b": ACCIDENTAL,
    "♭": ACCIDENTAL,
    "𝄫": ACCIDENTAL,
    "n": ACCIDENTAL,
    "♮": ACCIDENTAL,
    "m": MIN,
    "ø": HALFDIM,
    "o": FULLDIM,
    "△": MAJ7,
    "∆": MAJ7,
    "9": TONE,
    "/": SLASH,
    "-": DASH,
    "+": PLUS,
    "2": TWO,
    "4": FOUR,
    "5": FIVE,
    "6": SIX,
    "7": SEVEN,
}

_NOTE_LETTERS = frozenset("ABCDEFG")


def _token(kind: str, text: str, start: int, end: int) -> Token:
    return Token(
        kind,
        text[start:end],
        start_pos=start,
        line=1,
        column=start + 1,
        end_line=1,
        end_column=end + 1,
        end_pos=end,
    )


def tokenize(text: str) -> Iterator[Token]:
    """Split chord text into tokens.

    Spaces are skipped. Characters that mean nothing in chord notation are
    emitted as UNKNOWN tokens so that the parser reports them.

    Args:
        text: The chord text

    Yields:
        Lark tokens whose value is the matched source text
    """
    pos = 0
    while pos < len(text):
        c = text[pos]
        if c == " ":
            pos += 1
            continue
        if c in _NOTE_LETTERS:
            yield _token(NOTE, text, pos, pos + 1)
            pos += 1
            continue
        for lexeme, kind in _KEYWORDS:
            if text.startswith(lexeme, pos):
                yield _token(kind, text, pos, pos + len(lexeme))
                pos += len(lexeme)
                break
        else:
            yield _token(_SINGLE.get(c, UNKNOWN), text, pos, pos + 1)
            pos += 1


class ChordLexer(Lexer):
    """Adapter exposing :func:`tokenize` to a Lark LALR parser."""

    def __init__(self, lexer_conf: Any) -> None:
        pass

    def lex(self, data: str) -> Iterator[Token]:  # type: ignore[override]
        return tokenize(data)
