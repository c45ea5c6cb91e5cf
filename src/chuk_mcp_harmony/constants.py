"""
Constants and static tables for the harmony engine.

No magic strings - interval names, diatonic semitone tables, and
error messages live here.
"""

from enum import Enum
from pathlib import Path

# Natural (unaltered) intervals, indexed by semitone count 0-12
SHORT_INTERVAL_NAMES: tuple[str, ...] = (
    "P1",
    "m2",
    "M2",
    "m3",
    "M3",
    "P4",
    "TT",
    "P5",
    "m6",
    "M6",
    "m7",
    "M7",
    "P8",
)

LONG_INTERVAL_NAMES: tuple[str, ...] = (
    "Unison",
    "Minor 2nd",
    "Major 2nd",
    "Minor 3rd",
    "Major 3rd",
    "Perfect 4th",
    "Tritone",
    "Perfect 5th",
    "Minor 6th",
    "Major 6th",
    "Minor 7th",
    "Major 7th",
    "Octave",
)

# Constant names for Interval class attributes, same indexing
INTERVAL_CONSTANT_NAMES: tuple[str, ...] = (
    "UNISON",
    "MINOR_SECOND",
    "MAJOR_SECOND",
    "MINOR_THIRD",
    "MAJOR_THIRD",
    "PERFECT_FOURTH",
    "TRITONE",
    "PERFECT_FIFTH",
    "MINOR_SIXTH",
    "MAJOR_SIXTH",
    "MINOR_SEVENTH",
    "MAJOR_SEVENTH",
    "OCTAVE",
)

# Diatonic number for each natural semitone count (None = tritone)
DIATONIC_NUMBERS: tuple[int | None, ...] = (1, 2, 2, 3, 3, 4, None, 5, 6, 6, 7, 7, 8)

# Diatonic number -> natural semitones, by quality family
PERFECT_SEMITONES: dict[int, int] = {1: 0, 4: 5, 5: 7, 8: 12}
MAJOR_SEMITONES: dict[int, int] = {2: 2, 3: 4, 6: 9, 7: 11}
MINOR_SEMITONES: dict[int, int] = {2: 1, 3: 3, 6: 8, 7: 10}

SEMITONES_PER_OCTAVE = 12
MAX_DIATONIC_NUMBER = 8

# Diatonic number of the bass interval -> inversion tag
BASS_NUMBER_TO_INVERSION: dict[int, int] = {3: 1, 5: 2}

# Figured-bass inversion letters
INVERSION_LETTERS: dict[str, int] = {"a": 0, "b": 1, "c": 2, "d": 3}

# Compact catalog notation for semitone offsets above 9
COMPACT_SEMITONE_DIGITS: dict[str, int] = {"t": 10, "e": 11}

DEFAULT_CHORD_QUALITY = "Major"

CATALOG_PATH = Path(__file__).parent / "catalog" / "chord_qualities.yaml"


class IntervalQuality(str, Enum):
    """Interval qualities, valued by their abbreviation."""

    DOUBLY_DIMINISHED = "dd"
    DIMINISHED = "d"
    MINOR = "m"
    PERFECT = "P"
    MAJOR = "M"
    AUGMENTED = "A"
    DOUBLY_AUGMENTED = "AA"


# Accidental offset -> quality; offset 0 depends on the diatonic number
ACCIDENTAL_QUALITIES: dict[int, IntervalQuality] = {
    -2: IntervalQuality.DOUBLY_DIMINISHED,
    -1: IntervalQuality.DIMINISHED,
    1: IntervalQuality.AUGMENTED,
    2: IntervalQuality.DOUBLY_AUGMENTED,
}


class ErrorMessages:
    """Standardized error messages."""

    INTERVAL_NOT_FOUND = "No interval named '{name}'."
    INTERVAL_OUT_OF_RANGE = "Natural semitones must be 0-12, got {semitones}."
    INCOMPATIBLE_OPERANDS = "Can't take the interval between {a!r} and {b!r}."
    CHORD_QUALITY_NOT_FOUND = "'{name}' is not a chord name."
    NO_MATCHING_INTERVALS = "No chord quality matches these intervals: {intervals}."
    ALREADY_INVERTED = "Unimplemented: invert an inverted chord quality ({name})."
    MALFORMED_CHORD = "Can't parse a pitch from chord name '{text}'."
    MALFORMED_PITCH = "Can't parse pitch name '{text}'."
    MALFORMED_INVERSION = "Unknown inversion selector '{selector}'."
    EMPTY_PITCHES = "At least one pitch is required to identify a chord."
