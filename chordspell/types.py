"""Core chord types for chordspell."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import List, Optional, Tuple

from chordspell.constants import MAX_TONE_VALUE, MIN_TONE_VALUE, NUM_LETTERS
from chordspell.pitch import Accidental, Note


@dataclass(frozen=True)
class ChordTone:
    """A chord member beyond the triad, addressed by scale degree.

    Values 8..14 name the same degrees as 1..7 an octave up (9, 11, 13) and
    additionally imply the chord has a 7th.
    """

    value: int  # 1..14
    acc: Accidental = Accidental.Natural

    @property
    def degree(self) -> int:
        """The value folded into 1..7."""
        return self.value - NUM_LETTERS if self.value > NUM_LETTERS else self.value

    def is_valid(self) -> bool:
        return MIN_TONE_VALUE <= self.value <= MAX_TONE_VALUE and isinstance(
            self.acc, Accidental
        )

    def render(self, ascii: bool = False) -> str:
        """Render as accidental plus value; a sharp 7th is written ``△7``."""
        if self.value == 7 and self.acc == Accidental.Sharp:
            prefix = "maj" if ascii else "△"
        elif self.acc == Accidental.Natural:
            prefix = ""
        else:
            prefix = self.acc.ascii if ascii else self.acc.symbol
        return f"{prefix}{self.value}"

    def __str__(self) -> str:
        return self.render()


@unique
class TriadType(Enum):
    """The core shape of a chord."""

    Major = 0
    Augmented = 1
    Minor = 2
    Diminished = 3  # Fully diminished once a 7th is present
    HalfDiminished = 4  # Implies a minor 7th
    FullyDiminished = 5  # Implies a diminished 7th
    Suspended = 6  # No 3rd; a 2nd or 4th takes its place

    @property
    def symbol(self) -> str:
        """Notation text for this triad (empty for major)."""
        return _TRIAD_SYMBOLS[self]

    @property
    def fifth(self) -> Accidental:
        """Accidental of the 5th this triad implies."""
        if self in DIMINISHED_FAMILY:
            return Accidental.Flat
        elif self == TriadType.Augmented:
            return Accidental.Sharp
        else:
            return Accidental.Natural

    @property
    def implies_seventh(self) -> bool:
        return self in (TriadType.HalfDiminished, TriadType.FullyDiminished)

    @property
    def standard_offsets(self) -> Tuple[int, ...]:
        """Offset from the major scale for each degree 1..7 of this triad.

        Only the 3rd and 7th deviate: minor-family thirds are flat, and the
        unmodified 7th is the dominant (flat) 7th, or the diminished 7th for
        the diminished triads.
        """
        return _STANDARD_OFFSETS[self]

    def __str__(self) -> str:
        return self.symbol


DIMINISHED_FAMILY = frozenset(
    [TriadType.Diminished, TriadType.HalfDiminished, TriadType.FullyDiminished]
)

MINOR_FAMILY = DIMINISHED_FAMILY | {TriadType.Minor}

_TRIAD_SYMBOLS = {
    TriadType.Major: "",
    TriadType.Augmented: "+",
    TriadType.Minor: "-",
    TriadType.Diminished: "dim",
    TriadType.HalfDiminished: "ø",
    TriadType.FullyDiminished: "o",
    TriadType.Suspended: "sus",
}

_STANDARD_OFFSETS = {
    TriadType.Major: (0, 0, 0, 0, 0, 0, -1),
    TriadType.Augmented: (0, 0, 0, 0, 0, 0, -1),
    TriadType.Suspended: (0, 0, 0, 0, 0, 0, -1),
    TriadType.Minor: (0, 0, -1, 0, 0, 0, -1),
    TriadType.HalfDiminished: (0, 0, -1, 0, 0, 0, -1),
    TriadType.Diminished: (0, 0, -1, 0, 0, 0, -2),
    TriadType.FullyDiminished: (0, 0, -1, 0, 0, 0, -2),
}


@dataclass(eq=False)
class Chord:
    """Structured representation of a parsed chord symbol.

    Extra tones compare as a multiset, but their order is kept since it
    drives rendering. ``canonical`` records that the chord has already been
    canonicalized and is ignored by equality.
    """

    root: Note
    triad: TriadType = TriadType.Major
    extra_tones: List[ChordTone] = field(default_factory=list)
    bass: Optional[Note] = None  # None when the chord is not inverted
    canonical: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return (
            self.root == other.root
            and self.triad == other.triad
            and self.bass == other.bass
            and Counter(self.extra_tones) == Counter(other.extra_tones)
        )
