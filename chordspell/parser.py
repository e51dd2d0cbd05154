"""Parser for chord symbols using Lark."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from typing import List, Optional

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, UnexpectedToken

from chordspell.common import ChordSyntaxError
from chordspell.lexer import DISPLAY_NAMES, TOKEN_TYPES, ChordLexer
from chordspell.pitch import ACCIDENTAL_LEXEMES, Accidental, Note, NoteName
from chordspell.types import Chord, ChordTone, TriadType

logger = logging.getLogger(__name__)

# Lark grammar for chord symbols.
# Tokens come from ChordLexer, so every terminal is declared rather than
# defined. Several "triad + 7th" productions are spelled out separately so
# that an accidental can modify either the root or the 7th without
# ambiguity. Directly after the root, '-' and '+' always mean a triad;
# the first tone there may only carry an ACCIDENTAL, which in turn only
# follows a complete note.
CHORD_GRAMMAR = f"""
%declare {" ".join(TOKEN_TYPES)}

start: chord
     | chord SLASH note                    -> inverted

chord: note                                -> plain
     | note lead_tone extras               -> plain
     | note SEVEN extras                   -> dominant_seventh
     | note MAJ7 SEVEN extras              -> major_seventh
     | note MAJ7 extras                    -> major_color
     | note triad extras                   -> with_triad
     | note triad SEVEN extras             -> triad_seventh
     | note triad MAJ7 SEVEN extras        -> triad_major_seventh
     | note triad MAJ7 TONE extras         -> triad_major_extended
     | note triad ACCIDENTAL SEVEN extras  -> triad_altered_seventh

note: NOTE
    | NOTE ACCIDENTAL

triad: MIN                                 -> minor
     | DASH                                -> minor
     | DIM                                 -> diminished
     | HALFDIM                             -> half_diminished
     | FULLDIM                             -> fully_diminished
     | AUG                                 -> augmented
     | PLUS                                -> augmented
     | sus

sus: SUS
   | SUS TWO
   | SUS ACCIDENTAL TWO
   | SUS FOUR
   | SUS ACCIDENTAL FOUR

extras: tone*

lead_tone: tone_val
         | ACCIDENTAL tone_val

tone: tone_val
    | tone_mod tone_val

tone_val: TONE | TWO | FOUR | FIVE | SIX

tone_mod: DASH                             -> flat_mod
        | PLUS                             -> sharp_mod
        | ACCIDENTAL                       -> accidental_mod
"""


@dataclass(frozen=True)
class TriadMarker:
    """A parsed triad marker, with the suspension tone a ``sus`` carries."""

    kind: TriadType
    suspension: Optional[ChordTone] = None

    def tones(self) -> List[ChordTone]:
        return [] if self.suspension is None else [self.suspension]


def _accidental(token: Token) -> Accidental:
    return ACCIDENTAL_LEXEMES[str(token)]


class ChordTransformer(Transformer):
    """Transform a parsed chord tree into a Chord."""

    def start(self, items):
        """Transform an uninverted chord."""
        return items[0]

    def inverted(self, items):
        """Transform ``chord / note`` by attaching the bass note."""
        chord, _slash, bass = items
        chord.bass = bass
        return chord

    # Chord productions

    def plain(self, items):
        """Transform a root with optional tones: an implied major triad."""
        root = items[0]
        tones = [items[1], *items[2]] if len(items) > 1 else []
        return Chord(root, TriadType.Major, tones)

    def dominant_seventh(self, items):
        """Transform ``C7...``: appends a dominant 7th."""
        root, _seven, tones = items
        return Chord(root, TriadType.Major, [*tones, ChordTone(7)])

    def major_seventh(self, items):
        """Transform ``Cmaj7...``: appends a major 7th."""
        root, _maj, _seven, tones = items
        return Chord(root, TriadType.Major, [*tones, ChordTone(7, Accidental.Sharp)])

    def major_color(self, items):
        """Transform ``C△9``; a bare ``C△`` adds no 7th at all."""
        root, _maj, tones = items
        if any(tone.value > 7 for tone in tones):
            tones = [*tones, ChordTone(7, Accidental.Sharp)]
        return Chord(root, TriadType.Major, tones)

    def with_triad(self, items):
        root, triad, tones = items
        return Chord(root, triad.kind, [*tones, *triad.tones()])

    def triad_seventh(self, items):
        root, triad, _seven, tones = items
        return Chord(root, triad.kind, [*tones, ChordTone(7), *triad.tones()])

    def triad_major_seventh(self, items):
        root, triad, _maj, _seven, tones = items
        seventh = ChordTone(7, Accidental.Sharp)
        return Chord(root, triad.kind, [*tones, seventh, *triad.tones()])

    def triad_major_extended(self, items):
        """Transform ``C-△9``: a major 7th plus the extension written after it."""
        root, triad, _maj, extension, tones = items
        seventh = ChordTone(7, Accidental.Sharp)
        added = ChordTone(int(extension))
        return Chord(root, triad.kind, [*tones, seventh, added, *triad.tones()])

    def triad_altered_seventh(self, items):
        root, triad, acc, _seven, tones = items
        seventh = ChordTone(7, _accidental(acc))
        return Chord(root, triad.kind, [*tones, seventh, *triad.tones()])

    # Notes

    def note(self, items):
        """Transform a letter with an optional accidental."""
        name = NoteName[str(items[0])]
        if len(items) == 1:
            return Note(name)
        return Note(name, _accidental(items[1]))

    # Triads

    def minor(self, _items):
        return TriadMarker(TriadType.Minor)

    def diminished(self, _items):
        return TriadMarker(TriadType.Diminished)

    def half_diminished(self, _items):
        return TriadMarker(TriadType.HalfDiminished)

    def fully_diminished(self, _items):
        return TriadMarker(TriadType.FullyDiminished)

    def augmented(self, _items):
        return TriadMarker(TriadType.Augmented)

    def triad(self, items):
        """Pass through a ``sus`` marker."""
        return items[0]

    def sus(self, items):
        """Transform ``sus``, ``sus2``, ``sus♭2``, ``sus4`` or ``sus♯4``.

        A bare ``sus`` suspends the 2nd.
        """
        value = 4 if items[-1].type == "FOUR" else 2
        acc = _accidental(items[1]) if len(items) == 3 else Accidental.Natural
        return TriadMarker(TriadType.Suspended, ChordTone(value, acc))

    # Tones

    def extras(self, items):
        """Transform the written tones, keeping their order."""
        return list(items)

    def lead_tone(self, items):
        if len(items) == 1:
            return ChordTone(items[0])
        return ChordTone(items[1], _accidental(items[0]))

    def tone(self, items):
        if len(items) == 1:
            return ChordTone(items[0])
        return ChordTone(items[1], items[0])

    def tone_val(self, items):
        return int(items[0])

    def flat_mod(self, _items):
        return Accidental.Flat

    def sharp_mod(self, _items):
        return Accidental.Sharp

    def accidental_mod(self, items):
        return _accidental(items[0])


@cache
def _chord_parser() -> Lark:
    return Lark(CHORD_GRAMMAR, parser="lalr", lexer=ChordLexer)


def _syntax_error(text: str, exc: UnexpectedInput) -> ChordSyntaxError:
    expected = getattr(exc, "expected", None) or ()
    names = [DISPLAY_NAMES.get(name, name) for name in expected]
    if isinstance(exc, UnexpectedToken):
        token = exc.token
        position = token.start_pos if token.type != "$END" else None
        return ChordSyntaxError(text, str(token), position, names)
    return ChordSyntaxError(text, "", None, names)


def parse_chord(text: str) -> Chord:
    """Parse a chord symbol into a Chord.

    Args:
        text: Chord notation such as ``"C"``, ``"Bb7#9"`` or ``"A-7/C"``

    Returns:
        The parsed chord, not yet validated or canonicalized

    Raises:
        ChordSyntaxError: If the text is not a chord symbol

    Examples:
        >>> parse_chord("Amin7")
        # Chord with root A, a minor triad and a natural 7th

        >>> parse_chord("G♯△9♯11")
        # Major triad on G♯ with a 9th, a sharp 11th and an implied major 7th
    """
    try:
        tree = _chord_parser().parse(text)
    except UnexpectedInput as exc:
        logger.debug("failed to parse %r: %s", text, exc)
        raise _syntax_error(text, exc) from exc
    return ChordTransformer().transform(tree)
