"""
Interval primitive - a signed distance between pitches within one octave.

An Interval is a natural diatonic size (P1 through P8, in semitones) plus a
signed accidental offset: A4 is P4 raised once, d5 is P5 lowered once, and
neither is the same interval as TT even though all three span 6 semitones.

Intervals are interned. Interval(4) is Interval(4), so identity and equality
coincide and intervals can be used as set members and dict keys.
"""

from __future__ import annotations

import re
import threading
from typing import ClassVar

from chuk_mcp_harmony.constants import (
    ACCIDENTAL_QUALITIES,
    DIATONIC_NUMBERS,
    INTERVAL_CONSTANT_NAMES,
    LONG_INTERVAL_NAMES,
    MAJOR_SEMITONES,
    MAX_DIATONIC_NUMBER,
    MINOR_SEMITONES,
    PERFECT_SEMITONES,
    SEMITONES_PER_OCTAVE,
    SHORT_INTERVAL_NAMES,
    ErrorMessages,
    IntervalQuality,
)
from chuk_mcp_harmony.core.accidentals import accidental_string
from chuk_mcp_harmony.core.pitch import Pitch, PitchClass
from chuk_mcp_harmony.errors import IncompatibleOperandsError, NotFoundError

_ALTERED_RE = re.compile(r"([Ad])\s*(\d+)")
_ALTERED_WORD_RE = re.compile(r"(augmented|diminished)\s*(\d+)", re.IGNORECASE)
_ALTERATIONS: dict[str, int] = {"a": 1, "augmented": 1, "d": -1, "diminished": -1}
_QUALITY_PREFIXES: dict[str, IntervalQuality] = {
    "P": IntervalQuality.PERFECT,
    "M": IntervalQuality.MAJOR,
    "m": IntervalQuality.MINOR,
}


class _IntervalCache:
    """
    Process-wide interning table.

    Buckets by natural semitones, then by accidental offset. Insert-if-absent
    runs under a lock so concurrent first use never yields two instances.
    """

    def __init__(self) -> None:
        self._buckets: dict[int, dict[int, Interval]] = {}
        self._lock = threading.Lock()

    def get_or_create(self, natural_semitones: int, accidentals: int) -> Interval:
        bucket = self._buckets.get(natural_semitones)
        if bucket is not None and accidentals in bucket:
            return bucket[accidentals]
        with self._lock:
            bucket = self._buckets.setdefault(natural_semitones, {})
            interval = bucket.get(accidentals)
            if interval is None:
                interval = object.__new__(Interval)
                object.__setattr__(interval, "_natural_semitones", natural_semitones)
                object.__setattr__(interval, "_accidentals", accidentals)
                bucket[accidentals] = interval
            return interval

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())


_cache = _IntervalCache()


class Interval:
    """
    Distance between pitches, within an octave.

    This is the fundamental building block - chords are interval sets,
    and chord recognition is interval-set lookup.

    Immutable and interned.
    """

    __slots__ = ("_natural_semitones", "_accidentals")
    _natural_semitones: int
    _accidentals: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __new__(cls, natural_semitones: int, accidentals: int = 0) -> Interval:
        """
        Return the interned interval.

        Args:
            natural_semitones: Semitones of the unaltered interval (0-12)
            accidentals: Signed alteration; -1 diminishes, +1 augments
        """
        if not 0 <= natural_semitones <= SEMITONES_PER_OCTAVE:
            raise ValueError(
                ErrorMessages.INTERVAL_OUT_OF_RANGE.format(semitones=natural_semitones)
            )
        return _cache.get_or_create(natural_semitones, accidentals)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Interval is immutable, can't set {name}")

    def __reduce__(self) -> tuple[type[Interval], tuple[int, int]]:
        # copy and pickle go back through the interning table
        return (Interval, (self._natural_semitones, self._accidentals))

    @classmethod
    def from_semitones(cls, natural_semitones: int, accidentals: int = 0) -> Interval:
        """Return the interned interval for a natural size and alteration."""
        return cls(natural_semitones, accidentals)

    @classmethod
    def from_string(cls, name: str) -> Interval:
        """
        Parse an interval name.

        Accepts short names ('M3'), long names ('Major 3rd'), and altered
        diatonic numbers ('A4', 'd5', 'augmented 4', 'diminished 5').

        Raises:
            NotFoundError: If the name matches no form, or the diatonic
                number is outside 1-8
        """
        if name in SHORT_INTERVAL_NAMES:
            return cls(SHORT_INTERVAL_NAMES.index(name))
        if name in LONG_INTERVAL_NAMES:
            return cls(LONG_INTERVAL_NAMES.index(name))

        match = _ALTERED_RE.fullmatch(name) or _ALTERED_WORD_RE.fullmatch(name)
        number = int(match.group(2)) if match else -1
        if match is None or not 1 <= number <= MAX_DIATONIC_NUMBER:
            raise NotFoundError(ErrorMessages.INTERVAL_NOT_FOUND.format(name=name))

        accidentals = _ALTERATIONS[match.group(1).lower()]
        family = MINOR_SEMITONES if accidentals < 0 else MAJOR_SEMITONES
        natural = family.get(number, PERFECT_SEMITONES.get(number))
        return cls(natural, accidentals)

    @classmethod
    def between(cls, a: Pitch | PitchClass | int, b: Pitch | PitchClass | int) -> Interval:
        """
        The ascending interval from `a` to `b`, reduced into one octave.

        Both operands must be the same kind: two Pitches, two PitchClasses,
        or two plain semitone numbers.

        Raises:
            IncompatibleOperandsError: If the operands are different kinds
        """
        match (a, b):
            case (Pitch(), Pitch()):
                semitones = b.midi_number - a.midi_number
            case (PitchClass(), PitchClass()):
                semitones = b.value - a.value
            case (int(), int()) if not isinstance(a, PitchClass | bool) and not isinstance(
                b, PitchClass | bool
            ):
                semitones = b - a
            case _:
                raise IncompatibleOperandsError(
                    ErrorMessages.INCOMPATIBLE_OPERANDS.format(a=a, b=b)
                )
        if not 0 <= semitones < SEMITONES_PER_OCTAVE:
            semitones %= SEMITONES_PER_OCTAVE
        return cls(semitones)

    @property
    def natural_semitones(self) -> int:
        """Semitones of the unaltered interval."""
        return self._natural_semitones

    @property
    def accidentals(self) -> int:
        """Signed alteration from the natural interval."""
        return self._accidentals

    @property
    def semitones(self) -> int:
        """Number of semitones. A1 and m2 both have one."""
        return self._natural_semitones + self._accidentals

    @property
    def number(self) -> int | None:
        """The diatonic number, e.g. 2 for M2, m2, d2 and A2. None for the tritone."""
        return DIATONIC_NUMBERS[self._natural_semitones]

    @property
    def quality(self) -> IntervalQuality | None:
        """
        Perfect, major, minor, or an augmented/diminished degree.

        None for the unaltered tritone and for alterations beyond doubly
        augmented or doubly diminished.
        """
        if self._accidentals == 0:
            return _QUALITY_PREFIXES.get(self.short_name[0])
        return ACCIDENTAL_QUALITIES.get(self._accidentals)

    @property
    def short_name(self) -> str:
        """Name of the natural interval, e.g. 'M3'."""
        return SHORT_INTERVAL_NAMES[self._natural_semitones]

    @property
    def long_name(self) -> str:
        """Long name of the natural interval, e.g. 'Major 3rd'."""
        return LONG_INTERVAL_NAMES[self._natural_semitones]

    @property
    def inverse(self) -> Interval:
        """
        The interval that adds to this one to make an octave.

        M3 <-> m6, m3 <-> M6, P4 <-> P5, TT <-> TT.
        """
        return Interval(SEMITONES_PER_OCTAVE - self._natural_semitones, -self._accidentals)

    @property
    def natural(self) -> Interval:
        """This interval without its accidentals."""
        return Interval(self._natural_semitones)

    def augment(self) -> Interval:
        """Raise by one accidental, keeping the natural size."""
        return Interval(self._natural_semitones, self._accidentals + 1)

    def diminish(self) -> Interval:
        """Lower by one accidental, keeping the natural size."""
        return Interval(self._natural_semitones, self._accidentals - 1)

    def add(self, other: Interval) -> Interval:
        """
        Combine the natural sizes of two intervals.

        Accidentals from both operands are dropped: A4 + P1 is P4.
        """
        return Interval(self._natural_semitones + other._natural_semitones)

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.add(other)

    def __repr__(self) -> str:
        if self._accidentals == 0:
            return f"Interval.{INTERVAL_CONSTANT_NAMES[self._natural_semitones]}"
        return f"Interval({self._natural_semitones}, {self._accidentals})"

    def __str__(self) -> str:
        """Short name, prefixed with accidental glyphs when altered."""
        return accidental_string(self._accidentals) + self.short_name


def as_interval(value: Interval | int) -> Interval:
    """Coerce a semitone count to its natural Interval."""
    return value if isinstance(value, Interval) else Interval(value)


def interval_class_difference(a: int, b: int) -> int:
    """The interval class (0-11) from pitch class number `a` up to `b`."""
    return (b - a) % SEMITONES_PER_OCTAVE


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE

# Natural intervals by short name
INTERVALS: dict[str, Interval] = {
    name: Interval(semitones) for semitones, name in enumerate(SHORT_INTERVAL_NAMES)
}
