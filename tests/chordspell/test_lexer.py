from typing import List, Tuple

import pytest

from chordspell.lexer import tokenize


def kinds(text: str) -> List[Tuple[str, str]]:
    """Helper returning (type, value) pairs for each token."""
    return [(token.type, str(token)) for token in tokenize(text)]


def test_tokenize_simple_chord() -> None:
    """A root with a seventh and an altered ninth."""
    assert kinds("Bb7#9") == [
        ("NOTE", "B"),
        ("ACCIDENTAL", "b"),
        ("SEVEN", "7"),
        ("ACCIDENTAL", "#"),
        ("TONE", "9"),
    ]


def test_tokenize_double_flat() -> None:
    """Two b's together are a single double flat."""
    assert kinds("Bbb7") == [("NOTE", "B"), ("ACCIDENTAL", "bb"), ("SEVEN", "7")]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Cmaj7", [("NOTE", "C"), ("MAJ7", "maj"), ("SEVEN", "7")]),
        ("Cm7", [("NOTE", "C"), ("MIN", "m"), ("SEVEN", "7")]),
        ("Cmin", [("NOTE", "C"), ("MIN", "min")]),
        ("Cmmaj7", [("NOTE", "C"), ("MIN", "m"), ("MAJ7", "maj"), ("SEVEN", "7")]),
        ("Cdim", [("NOTE", "C"), ("DIM", "dim")]),
        ("Caug", [("NOTE", "C"), ("AUG", "aug")]),
        ("Csus4", [("NOTE", "C"), ("SUS", "sus"), ("FOUR", "4")]),
        ("Cø", [("NOTE", "C"), ("HALFDIM", "ø")]),
        ("Co", [("NOTE", "C"), ("FULLDIM", "o")]),
        ("C∆9", [("NOTE", "C"), ("MAJ7", "∆"), ("TONE", "9")]),
        ("C-+", [("NOTE", "C"), ("DASH", "-"), ("PLUS", "+")]),
        ("C/E", [("NOTE", "C"), ("SLASH", "/"), ("NOTE", "E")]),
    ],
)
def test_tokenize_keywords(text: str, expected: List[Tuple[str, str]]) -> None:
    """Keywords and symbols map to their token types."""
    assert kinds(text) == expected


def test_tokenize_extensions() -> None:
    """11 and 13 are single tones; 2, 4, 5 and 6 have their own types."""
    assert kinds("11132456") == [
        ("TONE", "11"),
        ("TONE", "13"),
        ("TWO", "2"),
        ("FOUR", "4"),
        ("FIVE", "5"),
        ("SIX", "6"),
    ]


def test_tokenize_unicode_accidentals() -> None:
    """Every Unicode accidental is recognized."""
    assert [t for t, _ in kinds("𝄫♭♮♯𝄪")] == ["ACCIDENTAL"] * 5


def test_tokenize_skips_spaces() -> None:
    """Spaces separate tokens but are not tokens themselves."""
    tokens = list(tokenize("C7 9"))
    assert [str(t) for t in tokens] == ["C", "7", "9"]
    assert [t.start_pos for t in tokens] == [0, 1, 3]


def test_tokenize_unknown() -> None:
    """Characters outside the notation become UNKNOWN tokens."""
    assert kinds("H1s") == [("UNKNOWN", "H"), ("UNKNOWN", "1"), ("UNKNOWN", "s")]
