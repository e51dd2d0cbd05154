"""Chord symbol parsing, canonicalization and spelling."""

from chordspell.canonical import canonicalize
from chordspell.common import (
    ChordError,
    ChordSyntaxError,
    NoteParseError,
    PitchRangeError,
    ValidationError,
)
from chordspell.parser import parse_chord
from chordspell.pitch import (
    Accidental,
    Interval,
    Note,
    NoteName,
    measure_intervals,
    negate,
    parse_accidental,
    parse_note,
    transpose_note,
    transpose_notes,
)
from chordspell.printer import render
from chordspell.spell import spell
from chordspell.types import Chord, ChordTone, TriadType
from chordspell.validate import is_valid, validate

__all__ = [
    "parse_chord",
    "validate",
    "is_valid",
    "canonicalize",
    "spell",
    "render",
    "Chord",
    "ChordTone",
    "TriadType",
    "Note",
    "NoteName",
    "Accidental",
    "Interval",
    "parse_note",
    "parse_accidental",
    "transpose_note",
    "transpose_notes",
    "measure_intervals",
    "negate",
    "ChordError",
    "ChordSyntaxError",
    "NoteParseError",
    "ValidationError",
    "PitchRangeError",
]
