from typing import List

import pytest

from chordspell.canonical import canonicalize
from chordspell.parser import parse_chord
from chordspell.pitch import parse_note
from chordspell.spell import spell
from chordspell.types import Chord, ChordTone, TriadType


def spelled(text: str, canonical: bool = False) -> List[str]:
    """Helper spelling a chord symbol as note strings."""
    chord = parse_chord(text)
    if canonical:
        canonicalize(chord)
    return [str(note) for note in spell(chord)]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("C", ["C", "E", "G"]),
        ("Amin7", ["A", "C", "E", "G"]),
        ("Bb7#9", ["B♭", "D", "F", "A♭", "C♯"]),
        ("C#o", ["C♯", "E", "G", "B♭"]),
        ("Cø", ["C", "E♭", "G♭", "B♭"]),
        ("F+", ["F", "A", "C♯"]),
        ("Bdim", ["B", "D", "F"]),
        ("Ebmaj7", ["E♭", "G", "B♭", "D"]),
        ("Csus2", ["C", "D", "G"]),
        ("Csus", ["C", "D", "G"]),
        ("D-6", ["D", "F", "A", "B"]),
        ("C13", ["C", "E", "G", "A"]),
        ("C7b5", ["C", "E", "G♭", "B♭"]),
    ],
)
def test_spell(text: str, expected: List[str]) -> None:
    """Chords spell root first, stacked in thirds."""
    assert spelled(text) == expected


def test_spell_inversion() -> None:
    """The bass comes first, then the chord from its root."""
    assert spelled("Gsus4/C") == ["C", "G", "C", "D"]


def test_spell_canonical_extensions() -> None:
    """Extensions go above the 7th once canonicalization supplies it."""
    assert spelled("C13", canonical=True) == ["C", "E", "G", "B♭", "A"]
    assert spelled("C9 11", canonical=True) == ["C", "E", "G", "B♭", "D", "F"]


def test_spell_suspension_with_seventh() -> None:
    """A suspended 4th takes the place of the 3rd, below the 5th and 7th."""
    assert spelled("Csus4 7 9", canonical=True) == ["C", "F", "G", "B♭", "D"]


def test_spell_suspension_prefers_fourth() -> None:
    """With both a 2nd and a 4th, the 4th is the suspension."""
    chord = Chord(
        parse_note("C"), TriadType.Suspended, [ChordTone(2), ChordTone(4)]
    )
    assert [str(note) for note in spell(chord)] == ["C", "F", "G", "D"]


def test_spell_altered_fifth_replaces_implied() -> None:
    """An explicit 5th replaces the triad's own."""
    assert spelled("C7#5") == ["C", "E", "G♯", "B♭"]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Cbo", ["C♭", "E𝄫", "G𝄫", "A♭"]),
        ("Cbdim7", ["C♭", "E𝄫", "G𝄫", "A♭"]),
        ("B#+", ["B♯", "D𝄪", "G♯"]),
    ],
)
def test_spell_respells_out_of_range_letters(
    text: str, expected: List[str]
) -> None:
    """A tone that would need a triple accidental moves to the next letter."""
    assert spelled(text, canonical=True) == expected
