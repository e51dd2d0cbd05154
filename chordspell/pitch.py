"""Pitch algebra: letter names, accidentals, spelled notes and intervals.

Notes are spelled, not just pitch classes: C♯ and D♭ share a cardinal but
are different notes. Intervals are measured in scale degrees with a half-step
offset from the major-scale position of that degree, so transposing a note
always lands on a predictable letter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Dict, List, Sequence

from chordspell.common import NoteParseError, PitchRangeError
from chordspell.constants import (
    LETTER_CARDINALS,
    MAJOR_SCALE_STEPS,
    MAX_NOTES,
    NUM_LETTERS,
)


@unique
class NoteName(Enum):
    """The seven letter names, valued by position in the cycle A..G."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6

    @property
    def cardinal(self) -> int:
        """Half steps above A (A=0, B=2, C=3, D=5, E=7, F=8, G=10)."""
        return LETTER_CARDINALS[self.value]

    def advance(self, steps: int) -> NoteName:
        """Move forward (or backward, if negative) by letter steps, wrapping G to A.

        Args:
            steps: Number of letters to move.

        Returns:
            The resulting letter name.
        """
        return NOTE_NAME_LOOKUP[(self.value + steps) % NUM_LETTERS]

    def __str__(self) -> str:
        return self.name


NOTE_NAME_LOOKUP: Dict[int, NoteName] = {n.value: n for n in NoteName}
"""Lookup table from letter position (0-6) to NoteName."""


@unique
class Accidental(Enum):
    """A note modifier, valued by its half-step offset."""

    DoubleFlat = -2
    Flat = -1
    Natural = 0
    Sharp = 1
    DoubleSharp = 2

    @property
    def offset(self) -> int:
        """Number of half steps this accidental moves a note."""
        return self.value

    @property
    def symbol(self) -> str:
        return _ACCIDENTAL_SYMBOLS[self]

    @property
    def ascii(self) -> str:
        return _ACCIDENTAL_ASCII[self]

    def __str__(self) -> str:
        return self.symbol


_ACCIDENTAL_SYMBOLS = {
    Accidental.DoubleFlat: "𝄫",
    Accidental.Flat: "♭",
    Accidental.Natural: "♮",
    Accidental.Sharp: "♯",
    Accidental.DoubleSharp: "𝄪",
}

_ACCIDENTAL_ASCII = {
    Accidental.DoubleFlat: "bb",
    Accidental.Flat: "b",
    Accidental.Natural: "n",
    Accidental.Sharp: "#",
    Accidental.DoubleSharp: "x",
}

ACCIDENTAL_LEXEMES: Dict[str, Accidental] = {
    "n": Accidental.Natural,
    "♮": Accidental.Natural,
    "#": Accidental.Sharp,
    "♯": Accidental.Sharp,
    "b": Accidental.Flat,
    "♭": Accidental.Flat,
    "x": Accidental.DoubleSharp,
    "𝄪": Accidental.DoubleSharp,
    "bb": Accidental.DoubleFlat,
    "𝄫": Accidental.DoubleFlat,
}
"""Every accepted spelling of each accidental."""


def _wrap_offset(offset: int) -> int:
    """Fold a half-step difference into the range (-6, 6]."""
    offset %= MAX_NOTES
    return offset - MAX_NOTES if offset > MAX_NOTES // 2 else offset


def _fit_interval(degree: int, half_steps: int, wrap: bool = False) -> Interval:
    """Build an interval of the given size, respelling the degree if needed.

    Starting from the given degree, step to neighboring degrees until the
    offset from the major scale fits within a double accidental. With
    ``wrap``, offsets are first folded into (-6, 6], so a distance just under
    an octave stays on the starting degree as a flattened interval.
    """

    def offset_for(d: int) -> int:
        offset = half_steps - MAJOR_SCALE_STEPS[d - 1]
        return _wrap_offset(offset) if wrap else offset

    offset = offset_for(degree)
    while offset < -2:
        degree = degree - 1 if degree > 1 else NUM_LETTERS
        offset = offset_for(degree)
    while offset > 2:
        degree = degree + 1 if degree < NUM_LETTERS else 1
        offset = offset_for(degree)
    return Interval(degree, offset)


def _accidental_for(offset: int) -> Accidental:
    for acc in Accidental:
        if acc.offset == offset:
            return acc
    raise PitchRangeError(f"No accidental moves a note by {offset} half steps")


@dataclass(frozen=True)
class Interval:
    """Distance between two notes, in scale degrees plus a half-step offset.

    Degree 1 with offset 0 is the unison. A minor third is degree 3 with
    offset -1, a sharp fourth is degree 4 with offset 1, and so on.
    """

    degree: int  # Scale degree, 1..7
    offset: int  # Deviation from the major-scale degree, -2..2

    @property
    def half_steps(self) -> int:
        """Size of the interval within one octave, always in [0, 11]."""
        return (MAJOR_SCALE_STEPS[self.degree - 1] + self.offset) % MAX_NOTES

    def is_valid(self) -> bool:
        return 1 <= self.degree <= NUM_LETTERS and -2 <= self.offset <= 2


@dataclass(frozen=True)
class Note:
    """A spelled note: a letter name plus an accidental."""

    name: NoteName
    acc: Accidental = Accidental.Natural

    @property
    def cardinal(self) -> int:
        """Half steps above A, wrapped into [0, 11] (so A♭ is 11, not -1)."""
        return (self.name.cardinal + self.acc.offset) % MAX_NOTES

    def is_valid(self) -> bool:
        return isinstance(self.name, NoteName) and isinstance(self.acc, Accidental)

    def transpose(self, interval: Interval) -> Note:
        """Transpose this note up by an interval.

        The letter advances by ``degree - 1`` and the accidental is whichever
        one makes the pitch class come out right.

        Args:
            interval: The interval to move by.

        Returns:
            The transposed note.

        Raises:
            PitchRangeError: If reaching the target pitch on the target letter
                would need more than a double sharp or double flat.
        """
        letter = self.name.advance(interval.degree - 1)
        target = (self.cardinal + interval.half_steps) % MAX_NOTES
        diff = _wrap_offset(target - letter.cardinal)
        if not -2 <= diff <= 2:
            raise PitchRangeError(
                f"Cannot transpose {self} by {interval}: {letter} would need "
                f"an offset of {diff} half steps"
            )
        return Note(letter, _accidental_for(diff))

    def transpose_enharmonic(self, interval: Interval) -> Note:
        """Transpose this note up by an interval, respelling if necessary.

        Behaves like :meth:`transpose`, except that when the target letter
        would need more than a double accidental, the neighboring letter
        toward the target pitch is used instead (so C♭ up a diminished 7th
        is A♭ rather than B with three flats).
        """
        letter = self.name.advance(interval.degree - 1)
        target = (self.cardinal + interval.half_steps) % MAX_NOTES
        diff = _wrap_offset(target - letter.cardinal)
        while diff > 2:
            letter = letter.advance(1)
            diff = _wrap_offset(target - letter.cardinal)
        while diff < -2:
            letter = letter.advance(-1)
            diff = _wrap_offset(target - letter.cardinal)
        return Note(letter, _accidental_for(diff))

    def interval_to(self, other: Note) -> Interval:
        """Measure the interval from this note up to another.

        The degree comes from the letter distance and the offset from the
        half-step distance within the octave. If that degree would need an
        offset beyond a double sharp or flat, the degree is respelled until
        the offset fits, so B up to B♭ is a doubly sharpened sixth.

        Args:
            other: The upper note.

        Returns:
            A valid interval such that its half steps match the distance.
        """
        half_steps = (other.cardinal - self.cardinal) % MAX_NOTES
        degree = (other.name.value - self.name.value) % NUM_LETTERS + 1
        return _fit_interval(degree, half_steps)

    def render(self, ascii: bool = False) -> str:
        """Render as a letter followed by its accidental (omitted when natural)."""
        if self.acc == Accidental.Natural:
            return str(self.name)
        return str(self.name) + (self.acc.ascii if ascii else self.acc.symbol)

    def __str__(self) -> str:
        return self.render()


def parse_accidental(text: str) -> Accidental:
    """Parse an accidental written as ``n ♮ # ♯ b ♭ x 𝄪 bb 𝄫``.

    Raises:
        NoteParseError: If the text is not a known accidental.
    """
    acc = ACCIDENTAL_LEXEMES.get(text)
    if acc is None:
        raise NoteParseError(text, "invalid accidental")
    return acc


def parse_note(text: str) -> Note:
    """Parse a note such as ``"C"``, ``"Bb"``, ``"F♯"`` or ``"Cx"``.

    Args:
        text: A capital letter A-G optionally followed by an accidental.

    Returns:
        The parsed note.

    Raises:
        NoteParseError: If the text is empty or malformed.
    """
    if not text:
        raise NoteParseError(text, "empty string")
    try:
        name = NoteName[text[0]]
    except KeyError:
        raise NoteParseError(text, f"invalid note name {text[0]!r}") from None
    if len(text) == 1:
        return Note(name)
    return Note(name, parse_accidental(text[1:]))


def transpose_note(root: Note, intervals: Sequence[Interval]) -> List[Note]:
    """Transpose one root by each interval in turn.

    Returns:
        One note per interval, in the same order.
    """
    return [root.transpose(interval) for interval in intervals]


def transpose_notes(notes: Sequence[Note], interval: Interval) -> List[Note]:
    """Transpose each note by the same interval."""
    return [note.transpose(interval) for note in notes]


def measure_intervals(root: Note, notes: Sequence[Note]) -> List[Interval]:
    """Measure the interval from a root up to each note."""
    return [root.interval_to(note) for note in notes]


def negate(root: Note, notes: Sequence[Note]) -> List[Note]:
    """Reflect notes around a root ("negative harmony").

    A note that is k half steps above the root becomes the note k half steps
    below it (12 - k above). The root itself maps to itself. The reflected
    note is spelled from the inverted degree (a third becomes a sixth),
    respelled if the offset would not fit in a double accidental.

    Args:
        root: The axis of reflection.
        notes: The notes to reflect.

    Returns:
        The reflected notes, in the same order.
    """
    negated = []
    for note in notes:
        interval = root.interval_to(note)
        dist = MAX_NOTES - interval.half_steps
        if dist == MAX_NOTES:
            negated.append(note)
            continue
        degree = (NUM_LETTERS + 1 - interval.degree) % NUM_LETTERS + 1
        negated.append(root.transpose(_fit_interval(degree, dist, wrap=True)))
    return negated
