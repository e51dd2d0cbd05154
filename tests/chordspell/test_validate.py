import pytest

from chordspell.common import ValidationError
from chordspell.parser import parse_chord
from chordspell.pitch import Accidental, Note, NoteName
from chordspell.types import Chord, ChordTone, TriadType
from chordspell.validate import is_valid, validate

C = Note(NoteName.C)


@pytest.mark.parametrize(
    "text", ["C", "Amin7", "Bb7#9", "C#o", "Gsus4/C", "C9 2", "Cø△7", "C+#5"]
)
def test_valid_chords(text: str) -> None:
    """Ordinary chords pass validation."""
    validate(parse_chord(text))
    assert is_valid(parse_chord(text))


@pytest.mark.parametrize(
    "text,message",
    [
        ("Cdim#5", "non-flat 5th"),
        ("Co 5", "non-flat 5th"),
        ("Cø#5", "non-flat 5th"),
        ("C+b5", "non-sharp 5th"),
        ("Cob7", "modified 7th"),
        ("Cdim△7", "modified 7th"),
        ("C9b9", "conflicting accidentals"),
        ("C7 #11 b4", "conflicting accidentals"),
    ],
)
def test_invalid_chords(text: str, message: str) -> None:
    """Musically inconsistent chords are rejected with a reason."""
    chord = parse_chord(text)
    with pytest.raises(ValidationError, match=message):
        validate(chord)
    assert not is_valid(chord)


def test_diminished_with_sharp_fifth() -> None:
    """A diminished triad cannot have a sharp 5th."""
    chord = Chord(C, TriadType.Diminished, [ChordTone(5, Accidental.Sharp)])
    with pytest.raises(ValidationError):
        validate(chord)


def test_suspended_needs_suspension_tone() -> None:
    """A suspended chord must have a 2nd or 4th."""
    with pytest.raises(ValidationError, match="suspension"):
        validate(Chord(C, TriadType.Suspended, [ChordTone(7)]))
    validate(Chord(C, TriadType.Suspended, [ChordTone(11)]))


@pytest.mark.parametrize("value", [1, 3, 8, 10])
def test_root_and_third_are_not_extras(value: int) -> None:
    """Unisons and thirds cannot be added as extra tones."""
    with pytest.raises(ValidationError, match="not a valid chord extra"):
        validate(Chord(C, TriadType.Major, [ChordTone(value)]))


@pytest.mark.parametrize("value", [0, 15])
def test_out_of_range_tone(value: int) -> None:
    """Tone values run from 1 to 14."""
    with pytest.raises(ValidationError, match="invalid"):
        validate(Chord(C, TriadType.Major, [ChordTone(value)]))


def test_validate_does_not_mutate() -> None:
    """Validation leaves the chord untouched."""
    chord = parse_chord("C-7b5 9")
    tones = list(chord.extra_tones)
    validate(chord)
    assert chord.triad == TriadType.Minor
    assert chord.extra_tones == tones
    assert not chord.canonical
