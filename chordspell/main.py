"""Main entry point for the chordspell command.

Parses each chord symbol given on the command line, then prints its
rendered form and the notes it spells.
"""

import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from chordspell.canonical import canonicalize
from chordspell.common import ChordError
from chordspell.parser import parse_chord
from chordspell.printer import render
from chordspell.spell import spell
from chordspell.validate import validate


def describe_chord(text: str, ascii: bool = False, canonical: bool = True) -> str:
    """Describe one chord symbol as ``"<input> => <rendered>: <notes>"``.

    Args:
        text: The chord symbol to describe.
        ascii: Whether to render with ASCII accidentals.
        canonical: Whether to canonicalize before rendering and spelling.

    Returns:
        The description line.

    Raises:
        ChordError: If the chord cannot be parsed, validated or spelled.
    """
    chord = parse_chord(text)
    validate(chord)
    if canonical:
        canonicalize(chord)
    notes = " ".join(note.render(ascii) for note in spell(chord))
    return f"{text} => {render(chord, ascii)}: {notes}"


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options
        for the chordspell command.
    """
    parser = ArgumentParser(description="Spell chord symbols as notes.")
    parser.add_argument("chords", nargs="+", help="chord symbols, e.g. Bb7#9")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument(
        "--ascii", action="store_true", help="print ASCII accidentals"
    )
    parser.add_argument(
        "--no-canonical",
        dest="canonical",
        action="store_false",
        help="render and spell chords as written",
    )
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the chordspell command.

    Parses command-line arguments, configures logging, and describes each
    chord in turn, stopping at the first one that fails.

    Returns:
        The process exit status.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    for text in args.chords:
        try:
            line = describe_chord(text, ascii=args.ascii, canonical=args.canonical)
        except ChordError as exc:
            logging.error("%s", exc)
            return 1
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
