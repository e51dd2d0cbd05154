"""Printer for chords back to chord symbol text."""

from __future__ import annotations

from typing import List

from chordspell.pitch import ACCIDENTAL_LEXEMES, Accidental, Note
from chordspell.types import Chord, TriadType

_ACCIDENTAL_PREFIXES = tuple(ACCIDENTAL_LEXEMES)


def _omits_seventh(chord: Chord, index: int) -> bool:
    """Check whether the 7th at this index is implied by what follows it.

    A leading 7th followed by a natural extension (``C9``, ``C△9``) and the
    trailing 7th of a half or fully diminished chord (``Cø``) are implied.
    """
    tones = chord.extra_tones
    tone = tones[index]
    if tone.value != 7 or tone.acc not in (Accidental.Natural, Accidental.Sharp):
        return False
    leading = index == 0 or (chord.triad == TriadType.Suspended and index == 1)
    if not leading:
        return False
    if index + 1 < len(tones):
        following = tones[index + 1]
        return following.value > 7 and following.acc == Accidental.Natural
    return tone.acc == Accidental.Natural and chord.triad.implies_seventh


def _tone_texts(chord: Chord, ascii: bool) -> List[str]:
    texts = []
    for index, tone in enumerate(chord.extra_tones):
        text = tone.render(ascii)
        if _omits_seventh(chord, index):
            text = text[:-1]
        if not text:
            continue
        # Keep "9 11" from reading as "911"
        if texts and texts[-1][-1].isdigit() and text[0].isdigit():
            text = " " + text
        texts.append(text)
    return texts


def _root_text(root: Note, triad: TriadType, first: str, ascii: bool) -> str:
    text = root.render(ascii)
    # Major chords have no symbol, so a leading accidental would attach to the root
    if triad == TriadType.Major and first.startswith(_ACCIDENTAL_PREFIXES):
        if root.acc == Accidental.Natural:
            natural = Accidental.Natural
            text += natural.ascii if ascii else natural.symbol
        elif ascii and text.endswith("b") and first.startswith("b"):
            text += " "
    return text


def render(chord: Chord, ascii: bool = False) -> str:
    """Render a chord as chord symbol text.

    Tones are written in their stored order, so a canonicalized chord
    renders in its canonical form, and that text parses back to an
    equivalent chord.

    Args:
        chord: The chord to render
        ascii: Write accidentals as ``b # x bb n`` and a major 7th as
            ``maj`` instead of using Unicode symbols

    Returns:
        The chord symbol text

    Examples:
        >>> chord = parse_chord("Bb7#9")
        >>> canonicalize(chord)
        >>> render(chord)
        'B♭7♯9'
        >>> render(chord, ascii=True)
        'Bb7#9'
    """
    texts = _tone_texts(chord, ascii)
    first = chord.triad.symbol or (texts[0] if texts else "")
    parts = [_root_text(chord.root, chord.triad, first, ascii), chord.triad.symbol]
    parts.extend(texts)
    if chord.bass is not None:
        parts.append("/" + chord.bass.render(ascii))
    return "".join(parts)
