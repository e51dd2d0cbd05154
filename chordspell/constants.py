"""Constants for chordspell."""

from __future__ import annotations

# Half steps above A for each natural letter, in letter order A..G
LETTER_CARDINALS = (0, 2, 3, 5, 7, 8, 10)

# Half steps above the tonic for scale degrees 1..7 of a major scale
MAJOR_SCALE_STEPS = (0, 2, 4, 5, 7, 9, 11)

# Number of distinct pitch classes in an octave
MAX_NOTES = 12

# Number of letter names (and diatonic degrees)
NUM_LETTERS = 7

# Extra tone values run from 1 to 14 (9, 11 and 13 are 2, 4 and 6 plus an octave)
MIN_TONE_VALUE = 1
MAX_TONE_VALUE = 14
