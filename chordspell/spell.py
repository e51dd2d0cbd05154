"""Spelling chords as the notes they contain."""

from __future__ import annotations

from typing import List, Optional

from chordspell.constants import NUM_LETTERS
from chordspell.pitch import Interval, Note
from chordspell.types import Chord, ChordTone, TriadType


def _suspension_tone(tones: List[ChordTone]) -> Optional[ChordTone]:
    """Pick the tone a suspended chord suspends: 4 over 2, then 11 over 9."""
    for fourth, second in ((4, 2), (11, 9)):
        # The last tone of each value wins
        by_value = {tone.value: tone for tone in tones if tone.value in (fourth, second)}
        chosen = by_value.get(fourth) or by_value.get(second)
        if chosen is not None:
            return chosen
    return None


def _chord_tones(chord: Chord) -> List[ChordTone]:
    """The implied triad tones followed by the chord's extras."""
    tones = [ChordTone(1)]
    if chord.triad != TriadType.Suspended:
        tones.append(ChordTone(3))
    values = {tone.value for tone in chord.extra_tones}
    if 5 not in values:
        tones.append(ChordTone(5, chord.triad.fifth))
    if chord.triad.implies_seventh and 7 not in values:
        tones.append(ChordTone(7))
    tones.extend(chord.extra_tones)
    return tones


def spell(chord: Chord) -> List[Note]:
    """List the notes of a chord, lowest first.

    Chord tones come out stacked in thirds (root, 3rd, 5th, 7th) with the
    suspension tone in place of the 3rd and the remaining extensions above
    them. A bass note, when present, comes first. A tone whose letter would
    need more than a double accidental is spelled on the neighboring letter
    instead.

    The chord should already have passed validation.

    Args:
        chord: The chord to spell

    Returns:
        The spelled notes

    Examples:
        >>> spell(parse_chord("Amin7"))
        # A, C, E, G

        >>> spell(parse_chord("Gsus4/C"))
        # C (the bass), then G, C, D
    """
    tones = _chord_tones(chord)
    suspension = (
        _suspension_tone(tones) if chord.triad == TriadType.Suspended else None
    )
    has_seventh = any(tone.value == 7 for tone in tones)

    def order(tone: ChordTone) -> int:
        if tone.value in (1, 3, 5, 7):
            return tone.value
        if tone.value < 5 and tone == suspension:
            return tone.value
        if tone.value == 6 and not has_seventh:
            return tone.value
        return tone.value + NUM_LETTERS

    tones.sort(key=lambda tone: (order(tone), tone.acc.offset))
    offsets = chord.triad.standard_offsets
    intervals = [
        Interval(tone.degree, offsets[tone.degree - 1] + tone.acc.offset)
        for tone in tones
    ]
    notes = [chord.root.transpose_enharmonic(interval) for interval in intervals]
    if chord.bass is not None:
        notes.insert(0, chord.bass)
    return notes
