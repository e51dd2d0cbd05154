"""Exceptions shared across chordspell."""

from __future__ import annotations

from typing import Iterable, Optional


class ChordError(Exception):
    """Base class for all chordspell errors."""


class NoteParseError(ChordError):
    """Raised when a note or accidental string cannot be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse {text!r}: {reason}")
        self.text = text


class ChordSyntaxError(ChordError):
    """Raised when chord text is not in the chord grammar.

    Attributes:
        text: The full input text
        token: The offending token text (empty at end of input)
        position: Character offset of the offending token, if known
        expected: Display names of the tokens that would have been accepted
    """

    def __init__(
        self,
        text: str,
        token: str,
        position: Optional[int],
        expected: Iterable[str] = (),
    ) -> None:
        self.text = text
        self.token = token
        self.position = position
        self.expected = tuple(sorted(expected))
        where = "end of input" if not token else repr(token)
        msg = f"syntax error in {text!r}: unexpected {where}"
        if position is not None and token:
            msg += f" at position {position}"
        if self.expected:
            msg += ", expecting " + " or ".join(self.expected)
        super().__init__(msg)


class ValidationError(ChordError):
    """Raised when a parsed chord is musically inconsistent."""


class PitchRangeError(ChordError):
    """Raised when a transposition needs an accidental beyond a double sharp or flat.

    Values produced by the parser and canonicalizer never trigger this for
    validated chords; seeing it means a model invariant was broken.
    """
