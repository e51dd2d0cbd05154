from chordspell.pitch import Accidental, Note, NoteName
from chordspell.types import Chord, ChordTone, TriadType

C = Note(NoteName.C)


def test_chord_tone_degree() -> None:
    """Values above 7 fold down an octave."""
    assert ChordTone(9).degree == 2
    assert ChordTone(13).degree == 6
    assert ChordTone(7).degree == 7


def test_chord_tone_render() -> None:
    """A sharp 7th is the major 7th symbol; other accidentals prefix the value."""
    assert str(ChordTone(9)) == "9"
    assert str(ChordTone(9, Accidental.Flat)) == "♭9"
    assert str(ChordTone(7, Accidental.Sharp)) == "△7"
    assert ChordTone(7, Accidental.Sharp).render(ascii=True) == "maj7"
    assert ChordTone(11, Accidental.Sharp).render(ascii=True) == "#11"


def test_triad_properties() -> None:
    """Triads know their symbol, their 5th and whether they imply a 7th."""
    assert TriadType.Major.symbol == ""
    assert TriadType.HalfDiminished.symbol == "ø"
    assert TriadType.Augmented.fifth == Accidental.Sharp
    assert TriadType.Diminished.fifth == Accidental.Flat
    assert TriadType.Suspended.fifth == Accidental.Natural
    assert TriadType.FullyDiminished.implies_seventh
    assert not TriadType.Diminished.implies_seventh
    assert TriadType.FullyDiminished.standard_offsets[6] == -2
    assert TriadType.HalfDiminished.standard_offsets[6] == -1


def test_chord_equality_ignores_tone_order() -> None:
    """Tones compare as a multiset."""
    first = Chord(C, TriadType.Major, [ChordTone(7), ChordTone(9)])
    second = Chord(C, TriadType.Major, [ChordTone(9), ChordTone(7)])
    assert first == second


def test_chord_equality_counts_tones() -> None:
    """Repeated tones matter for equality."""
    first = Chord(C, TriadType.Major, [ChordTone(9)])
    second = Chord(C, TriadType.Major, [ChordTone(9), ChordTone(9)])
    assert first != second


def test_chord_equality_ignores_canonical_flag() -> None:
    """The canonical flag is bookkeeping, not part of the chord."""
    assert Chord(C, canonical=True) == Chord(C)
    assert Chord(C) != Chord(C, bass=Note(NoteName.E))
