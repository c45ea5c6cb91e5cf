"""
Pitch primitives - PitchClass, Pitch, and the PitchLike capability.

PitchClass represents the 12 chromatic pitches (octave-independent).
Pitch is an octave-qualified pitch, numbered like MIDI (C4 = 60).
Both can be displaced by an Interval, which is all chords need of them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from chuk_mcp_harmony.constants import SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_mcp_harmony.core.accidentals import ACCIDENTAL_CHARS, parse_accidentals
from chuk_mcp_harmony.errors import MalformedError

if TYPE_CHECKING:
    from chuk_mcp_harmony.core.interval import Interval

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]
_LETTER_SEMITONES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

_ACC = re.escape(ACCIDENTAL_CHARS)
_PITCH_CLASS_RE = re.compile(rf"([A-Ga-g])([{_ACC}]*)")
_SCIENTIFIC_RE = re.compile(rf"([A-Ga-g])([{_ACC}]*)(-?\d+)")
_HELMHOLTZ_RE = re.compile(rf"([A-Ga-g])([{_ACC}]*)('+|′+|,+)")

# Helmholtz: "C" is C2, "c" is C3; each prime raises and each comma lowers an octave
_HELMHOLTZ_UPPER_OCTAVE = 2
_HELMHOLTZ_LOWER_OCTAVE = 3


@runtime_checkable
class PitchLike(Protocol):
    """Anything an Interval can displace: PitchClass or Pitch."""

    def add(self, interval: Interval) -> PitchLike: ...


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    Enum members are singletons, so pitch classes are interned.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def add(self, interval: Interval) -> PitchClass:
        """Displace this pitch class by an interval."""
        return self.transpose(interval.semitones)

    def as_pitch(self, octave: int = 4) -> Pitch:
        """Place this pitch class in an octave."""
        return Pitch(self.value + (octave + 1) * SEMITONES_PER_OCTAVE)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    def __str__(self) -> str:
        return self.spell()

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'E♭'."""
        name = name.strip()
        match = _PITCH_CLASS_RE.fullmatch(name)
        if match:
            return cls.from_midi(_letter_semitones(match.group(1), match.group(2)))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise MalformedError(ErrorMessages.MALFORMED_PITCH.format(text=name))


@dataclass(frozen=True)
class Pitch:
    """
    An octave-qualified pitch, stored as a MIDI note number.

    Scientific pitch notation: C4 = 60, A4 = 69.
    """

    midi_number: int

    @property
    def pitch_class(self) -> PitchClass:
        """The octave-free pitch class."""
        return PitchClass.from_midi(self.midi_number)

    @property
    def octave(self) -> int:
        """Scientific octave number (C4 is middle C)."""
        return self.midi_number // SEMITONES_PER_OCTAVE - 1

    @property
    def name(self) -> str:
        """Scientific pitch name, e.g. 'G#4'."""
        return f"{self.pitch_class.spell()}{self.octave}"

    def transpose(self, semitones: int) -> Pitch:
        """Transpose by a number of semitones (positive or negative)."""
        return Pitch(self.midi_number + semitones)

    def add(self, interval: Interval) -> Pitch:
        """Displace this pitch by an interval."""
        return self.transpose(interval.semitones)

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """
        Parse a scientific ('E4', 'C♯4', 'Bb-1') or Helmholtz ("e'", 'E,') pitch name.

        Raises:
            MalformedError: If the name is neither form
        """
        name = name.strip()
        match = _SCIENTIFIC_RE.fullmatch(name)
        if match:
            letter, accidentals, octave = match.groups()
            return cls._from_parts(letter, accidentals, int(octave))

        match = _HELMHOLTZ_RE.fullmatch(name)
        if match:
            letter, accidentals, marks = match.groups()
            return cls._from_parts(letter, accidentals, _helmholtz_octave(letter, marks))

        raise MalformedError(ErrorMessages.MALFORMED_PITCH.format(text=name))

    @classmethod
    def _from_parts(cls, letter: str, accidentals: str, octave: int) -> Pitch:
        semitones = _letter_semitones(letter, accidentals)
        return cls(semitones + (octave + 1) * SEMITONES_PER_OCTAVE)


def _letter_semitones(letter: str, accidentals: str) -> int:
    return _LETTER_SEMITONES[letter.upper()] + parse_accidentals(accidentals)


def _helmholtz_octave(letter: str, marks: str) -> int:
    base = _HELMHOLTZ_UPPER_OCTAVE if letter.isupper() else _HELMHOLTZ_LOWER_OCTAVE
    if marks.startswith(","):
        return base - len(marks)
    return base + len(marks)


def parse_pitch_like(name: str) -> PitchClass | Pitch:
    """
    Parse a pitch or pitch-class name.

    A bare letter with accidentals ('E', 'Bb') is a PitchClass; anything
    carrying an octave number or Helmholtz marks is a Pitch.
    """
    name = name.strip()
    if _PITCH_CLASS_RE.fullmatch(name):
        return PitchClass.parse(name)
    return Pitch.parse(name)


def pitch_prefixes(text: str) -> list[tuple[PitchClass | Pitch, str]]:
    """
    Find the pitch readings of the start of `text`.

    Returns (pitch, remainder) pairs, octave-free reading first, so that
    callers can prefer 'E' + '7' over 'E7' + ''.
    """
    readings: list[tuple[PitchClass | Pitch, str]] = []
    match = _PITCH_CLASS_RE.match(text)
    if match:
        readings.append((PitchClass.parse(match.group(0)), text[match.end() :]))
    for pattern in (_SCIENTIFIC_RE, _HELMHOLTZ_RE):
        match = pattern.match(text)
        if match:
            readings.append((Pitch.parse(match.group(0)), text[match.end() :]))
    return readings
