"""Canonicalization of chords.

Many spellings describe the same chord: ``C-7b5`` is ``Cø``, ``Csusb4`` is
just ``C``, and ``C9 2`` says the 9th twice. Canonicalization rewrites a
chord in place into a single representative form by running a fixed series
of passes over its tones, grouped by value.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import replace
from typing import DefaultDict, List, Optional, Sequence, Tuple

from chordspell.pitch import Accidental
from chordspell.types import (
    DIMINISHED_FAMILY,
    MINOR_FAMILY,
    Chord,
    ChordTone,
    TriadType,
)

logger = logging.getLogger(__name__)

ToneTable = DefaultDict[int, List[ChordTone]]

# Tones that are enharmonically the root and are dropped outright
_ROOT_ALIASES = frozenset(
    [ChordTone(7, Accidental.DoubleSharp), ChordTone(2, Accidental.DoubleFlat)]
)

# Same as the root, but still asserts a 7th
_IMPLYING_ROOT_ALIAS = ChordTone(9, Accidental.DoubleFlat)

# Suspension tones that are really a 3rd, in the order they are tried
_SUSPENSION_RESOLUTIONS: Sequence[Tuple[Tuple[int, int], Accidental, TriadType]] = (
    ((4, 11), Accidental.Flat, TriadType.Major),
    ((4, 11), Accidental.DoubleFlat, TriadType.Minor),
    ((2, 9), Accidental.Sharp, TriadType.Minor),
    ((2, 9), Accidental.DoubleSharp, TriadType.Major),
)


def _remove(table: ToneTable, *tones: ChordTone) -> int:
    """Remove every copy of the given tones, returning how many went."""
    removed = 0
    for tone in tones:
        kept = [t for t in table[tone.value] if t != tone]
        removed += len(table[tone.value]) - len(kept)
        table[tone.value] = kept
    return removed


def _contains(table: ToneTable, tone: ChordTone) -> bool:
    return tone in table[tone.value]


def _both(values: Tuple[int, int], acc: Accidental) -> List[ChordTone]:
    return [ChordTone(value, acc) for value in values]


def _resolve_suspension(table: ToneTable) -> Optional[TriadType]:
    """Find a suspension tone that is really a 3rd and drop it.

    Returns:
        The triad the 3rd implies, or None if the chord stays suspended
    """
    for values, acc, triad in _SUSPENSION_RESOLUTIONS:
        if _remove(table, *_both(values, acc)):
            return triad
    return None


def _consolidate(table: ToneTable, has_seventh: bool) -> None:
    """Fold each tone into the octave its chord expects.

    With a 7th, 2/4/6 become 9/11/13 and the meaningless 12/14 become 5/7.
    Without one, everything above 7 drops an octave.
    """
    for value in list(table):
        if has_seventh:
            if value < 7 and value != 5:
                shift = 7
            elif value in (12, 14):
                shift = -7
            else:
                continue
        elif value > 7:
            shift = -7
        else:
            continue
        moved = [replace(tone, value=value + shift) for tone in table[value]]
        table[value + shift].extend(moved)
        table[value] = []


def _demote_suspension(table: ToneTable) -> None:
    """Move one 11 (or failing that one 9) back down to be the suspension tone.

    A natural tone is preferred; otherwise the lowest accidental is taken.
    """
    for high, low in ((11, 4), (9, 2)):
        candidates = table[high]
        if not candidates:
            continue
        chosen = next((t for t in candidates if t.acc == Accidental.Natural), None)
        if chosen is None:
            chosen = min(candidates, key=lambda t: t.acc.offset)
        candidates.remove(chosen)
        table[low] = [replace(chosen, value=low)]
        return


def _tone_order(tone: ChordTone) -> Tuple[int, int]:
    # Altered 5ths go last
    value = 255 if tone.value == 5 else tone.value
    return value, tone.acc.offset


def canonicalize(chord: Chord) -> None:
    """Rewrite a chord in place into its canonical form.

    The chord should already have passed validation. Calling this on a
    chord that is already canonical does nothing.

    Args:
        chord: The chord to rewrite
    """
    if chord.canonical:
        return

    triad = chord.triad
    table: ToneTable = defaultdict(list)
    has_seventh = False
    has_natural_seventh = False
    implied_seventh = 1 if triad.implies_seventh else 0
    for tone in chord.extra_tones:
        if tone in _ROOT_ALIASES:
            continue
        if tone == _IMPLYING_ROOT_ALIAS:
            implied_seventh += 1
            continue
        if tone.value > 7:
            implied_seventh += 1
        elif tone.value == 7:
            has_seventh = True
            if tone.acc == Accidental.Natural:
                has_natural_seventh = True
        table[tone.value].append(tone)

    # The triad already supplies its own 5th
    _remove(table, ChordTone(5, triad.fifth))

    # Altered 5ths that turn the triad into another one
    if triad == TriadType.Minor and _remove(table, ChordTone(5, Accidental.Flat)):
        if has_seventh or implied_seventh:
            triad = TriadType.HalfDiminished
        else:
            triad = TriadType.Diminished
    elif triad == TriadType.Major and _remove(table, ChordTone(5, Accidental.Sharp)):
        triad = TriadType.Augmented

    # "dim7" is "o"
    if triad == TriadType.Diminished and (
        has_natural_seventh or (implied_seventh and not has_seventh)
    ):
        triad = TriadType.FullyDiminished
        implied_seventh += 1

    # A half diminished chord with a flattened 7th is fully diminished
    if (
        triad == TriadType.HalfDiminished
        and has_seventh
        and all(tone.acc == Accidental.Flat for tone in table[7])
    ):
        table[7] = [replace(tone, acc=Accidental.Natural) for tone in table[7]]
        triad = TriadType.FullyDiminished

    if implied_seventh and not has_seventh:
        table[7].append(ChordTone(7))
        has_seventh = True

    # Enharmonic duplicates of the 3rd
    if triad in (TriadType.Major, TriadType.Augmented):
        _remove(
            table,
            *_both((4, 11), Accidental.Flat),
            *_both((2, 9), Accidental.DoubleSharp),
        )
    elif triad in MINOR_FAMILY:
        _remove(
            table,
            *_both((2, 9), Accidental.Sharp),
            *_both((4, 11), Accidental.DoubleFlat),
        )

    if triad == TriadType.Suspended:
        resolved = _resolve_suspension(table)
        if resolved is not None:
            triad = resolved

    # The 6th of a fully diminished chord is its 7th
    if triad == TriadType.FullyDiminished:
        _remove(table, *_both((6, 13), Accidental.Natural))

    # A flat 6th is the sharp 5th
    if triad == TriadType.Augmented or _contains(table, ChordTone(5, Accidental.Sharp)):
        _remove(table, *_both((6, 13), Accidental.Flat))

    # A sharp 4th is the flat 5th
    flat_fifth = _contains(table, ChordTone(5, Accidental.Flat))
    if triad in DIMINISHED_FAMILY or (triad != TriadType.Suspended and flat_fifth):
        _remove(table, *_both((4, 11), Accidental.Sharp))
    elif triad == TriadType.Suspended and flat_fifth:
        if table[2] or table[9]:
            _remove(table, *_both((4, 11), Accidental.Sharp))
        elif _remove(table, *_both((4, 11), Accidental.Sharp)) and not (
            table[4] or table[11]
        ):
            # Still needs something to suspend
            table[4] = [ChordTone(4, Accidental.Sharp)]

    # A double sharp 4th is the perfect 5th
    if triad in (TriadType.Minor, TriadType.Major) and (
        not table[5] or _contains(table, ChordTone(5))
    ):
        _remove(table, *_both((4, 11), Accidental.DoubleSharp))

    _consolidate(table, has_seventh)
    for value, tones in table.items():
        table[value] = list(dict.fromkeys(tones))
    if has_seventh and triad == TriadType.Suspended:
        _demote_suspension(table)

    if triad != chord.triad:
        logger.debug("reclassified %s triad as %s", chord.triad.name, triad.name)
    chord.triad = triad
    chord.extra_tones = sorted(
        (tone for tones in table.values() for tone in tones), key=_tone_order
    )
    chord.canonical = True
