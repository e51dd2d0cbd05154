"""Musical consistency checks for parsed chords."""

from __future__ import annotations

from typing import Dict

from chordspell.common import ValidationError
from chordspell.pitch import Accidental
from chordspell.types import DIMINISHED_FAMILY, Chord, TriadType


def validate(chord: Chord) -> None:
    """Check that a chord is musically consistent.

    The chord is never modified.

    Args:
        chord: The chord to check

    Raises:
        ValidationError: On the first problem found
    """
    if not chord.root.is_valid():
        raise ValidationError(f"Chord root {chord.root!r} is invalid")
    if chord.bass is not None and not chord.bass.is_valid():
        raise ValidationError(f"Chord bass note {chord.bass!r} is invalid")
    if not isinstance(chord.triad, TriadType):
        raise ValidationError(f"Chord triad type {chord.triad!r} is invalid")

    # Accidental of the first tone seen for each degree
    seen: Dict[int, Accidental] = {}
    for tone in chord.extra_tones:
        if not tone.is_valid():
            raise ValidationError(f"Tone {tone!r} is invalid")
        degree = tone.degree
        if degree in (1, 3):
            raise ValidationError(f"Tone {tone.value} is not a valid chord extra")
        acc = seen.setdefault(degree, tone.acc)
        if acc != tone.acc:
            raise ValidationError(
                f"Tone {tone.value} has conflicting accidentals: {acc} and {tone.acc}"
            )

    triad = chord.triad
    if triad in (TriadType.Diminished, TriadType.FullyDiminished):
        seventh = seen.get(7)
        if seventh is not None and seventh != Accidental.Natural:
            raise ValidationError(
                f"Diminished chord should not have a modified 7th: {seventh}"
            )
    fifth = seen.get(5)
    if triad in DIMINISHED_FAMILY:
        if fifth is not None and fifth != Accidental.Flat:
            raise ValidationError(
                f"Diminished chord should not have a non-flat 5th: {fifth}"
            )
    elif triad == TriadType.Augmented:
        if fifth is not None and fifth != Accidental.Sharp:
            raise ValidationError(
                f"Augmented chord should not have a non-sharp 5th: {fifth}"
            )
    elif triad == TriadType.Suspended:
        if 2 not in seen and 4 not in seen:
            raise ValidationError(
                "Suspended chord must have a 2nd or 4th as its suspension tone"
            )


def is_valid(chord: Chord) -> bool:
    """Return whether :func:`validate` accepts the chord."""
    try:
        validate(chord)
    except ValidationError:
        return False
    return True
