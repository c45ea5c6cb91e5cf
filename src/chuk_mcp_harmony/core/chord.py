"""
Chord primitives - ChordQuality and Chord.

Chord qualities are named interval sets measured from an implicit root.
A Chord anchors a quality to a concrete root: a PitchClass or a Pitch.

The built-in qualities are loaded from the catalog and registered when this
module is imported.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import ClassVar

from chuk_mcp_harmony.catalog import load_catalog
from chuk_mcp_harmony.constants import (
    BASS_NUMBER_TO_INVERSION,
    DEFAULT_CHORD_QUALITY,
    INVERSION_LETTERS,
    MAX_DIATONIC_NUMBER,
    ErrorMessages,
)
from chuk_mcp_harmony.core.interval import Interval, as_interval
from chuk_mcp_harmony.core.pitch import Pitch, PitchClass, parse_pitch_like, pitch_prefixes
from chuk_mcp_harmony.core.registry import ChordQualityRegistry
from chuk_mcp_harmony.errors import MalformedError, NotFoundError, UnimplementedError
from chuk_mcp_harmony.models.catalog import ChordCatalog, ChordQualitySpec

logger = logging.getLogger(__name__)

_COMPOUND_NAME_RE = re.compile(r"([PMm])(\d+)")
_DIATONIC_STEPS = 7


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked.
    For example, a major triad is P1 + M3 + P5 (0, 4, 7 semitones).
    Major, Minor, and Dom 7th are chord qualities; E Major is a Chord.

    Immutable and hashable.
    """

    name: str
    intervals: tuple[Interval, ...]
    full_name: str | None = None
    abbrs: tuple[str, ...] = ()
    inversion: int | None = None

    # Common chord qualities (defined after the registry is built)
    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    DOMINANT_7: ClassVar[ChordQuality]
    MAJOR_7: ClassVar[ChordQuality]
    MINOR_7: ClassVar[ChordQuality]

    @property
    def abbr(self) -> str | None:
        """The default abbreviation ('' for Major), or None if there are none."""
        return self.abbrs[0] if self.abbrs else None

    @property
    def semitones(self) -> list[int]:
        """Semitones of each interval, in interval order."""
        return [interval.semitones for interval in self.intervals]

    @property
    def canonical_key(self) -> str:
        """Ascending comma-joined semitones, e.g. '0,4,7'."""
        return _canonical_key(self.intervals)

    @classmethod
    def from_string(cls, name: str) -> ChordQuality:
        """
        Look up a quality by name, full name or abbreviation, e.g. 'Major', 'm7'.

        Raises:
            NotFoundError: If no quality has that name
        """
        quality = REGISTRY.get(name)
        if quality is None:
            raise NotFoundError(ErrorMessages.CHORD_QUALITY_NOT_FOUND.format(name=name))
        return quality

    @classmethod
    def from_intervals(cls, items: Sequence[Interval | int]) -> ChordQuality:
        """
        Recognize the quality of a collection of intervals or semitone counts.

        Order matters: the first item is taken to be the bass. A third in
        the bass gives the first inversion, a fifth the second inversion.

        Raises:
            NotFoundError: If no quality has this interval set, or a
                semitone count is outside an octave
        """
        try:
            intervals = [as_interval(item) for item in items]
        except ValueError as e:
            raise NotFoundError(_no_match_message(items)) from e
        key = _canonical_key(intervals)
        quality = REGISTRY.get_by_key(key)
        if quality is None:
            raise NotFoundError(_no_match_message(intervals))

        # Sevenths and ninths in the bass are not detected
        bass_number = intervals[0].number if intervals else None
        inversion = BASS_NUMBER_TO_INVERSION.get(bass_number or 0)
        logger.debug(f"Recognized {quality.name} [{key}], inversion {inversion}")
        return quality.invert(inversion) if inversion else quality

    @classmethod
    def all(cls) -> list[ChordQuality]:
        """All built-in qualities, in catalog order."""
        return REGISTRY.all()

    def at(self, root: PitchClass | Pitch | str) -> Chord:
        """
        Anchor this quality to a root.

        Args:
            root: A PitchClass, a Pitch, or a name for either ('E', 'E4', "e'")
        """
        if isinstance(root, str):
            root = parse_pitch_like(root)
        return Chord(self, root)

    def invert(self, inversion: int) -> ChordQuality:
        """
        Return this quality tagged with an inversion.

        The interval set is unchanged; only the tag differs. Inversion 0
        is root position and returns this quality.

        Raises:
            UnimplementedError: If this quality is already inverted
        """
        if self.inversion is not None:
            raise UnimplementedError(ErrorMessages.ALREADY_INVERTED.format(name=self.name))
        if inversion == 0:
            return self
        return replace(self, inversion=inversion)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: a quality anchored to a root.

    Built with ChordQuality.at(), Chord.from_string() or Chord.from_pitches().
    Notes follow the quality's interval order; only invert() rotates them.
    """

    quality: ChordQuality
    root: PitchClass | Pitch
    rotation: int = field(default=0, repr=False)
    _notes: tuple[PitchClass | Pitch, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        notes = [self.root.add(interval) for interval in self.quality.intervals]
        n = self.rotation
        object.__setattr__(self, "_notes", tuple(notes[n:] + notes[:n]))

    @classmethod
    def from_string(cls, text: str) -> Chord:
        """
        Parse a chord name: a pitch name, then an optional quality.

        'E', 'Em', 'E7', 'E4 Major', "E' Major". The quality defaults to
        Major. The octave-free reading of the pitch is tried first, so 'E7'
        is E dominant seventh and 'E4' is E4 major.

        Raises:
            MalformedError: If the text doesn't start with a pitch name
            NotFoundError: If the rest of the text is not a chord quality
        """
        text = text.strip()
        readings = pitch_prefixes(text)
        if not readings:
            raise MalformedError(ErrorMessages.MALFORMED_CHORD.format(text=text))

        last_error: NotFoundError | None = None
        for root, rest in readings:
            try:
                quality = ChordQuality.from_string(rest.strip() or DEFAULT_CHORD_QUALITY)
            except NotFoundError as e:
                last_error = last_error or e
                continue
            return quality.at(root)
        raise last_error or MalformedError(ErrorMessages.MALFORMED_CHORD.format(text=text))

    @classmethod
    def from_pitches(cls, pitches: Sequence[PitchClass | Pitch]) -> Chord:
        """
        Identify the chord formed by a sequence of pitches.

        The first pitch is the presumed root and is also taken as the bass
        for inversion detection.

        Raises:
            IncompatibleOperandsError: If pitches and pitch classes are mixed
            NotFoundError: If no quality matches
        """
        if not pitches:
            raise ValueError(ErrorMessages.EMPTY_PITCHES)
        root = pitches[0]
        intervals = [Interval.between(root, pitch) for pitch in pitches]
        return ChordQuality.from_intervals(intervals).at(root)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """The quality's intervals from the root."""
        return self.quality.intervals

    @property
    def inversion(self) -> int:
        """0 for root position, 1 for first inversion, and so on."""
        return self.quality.inversion or 0

    @property
    def notes(self) -> list[PitchClass | Pitch]:
        """Chord tones in interval order, rotated left by invert()."""
        return list(self._notes)

    @property
    def pitches(self) -> list[PitchClass | Pitch]:
        """Alias for notes."""
        return self.notes

    @property
    def bass(self) -> PitchClass | Pitch:
        """The first chord tone."""
        return self._notes[0]

    @property
    def name(self) -> str:
        """Root and quality name, e.g. 'E Major'."""
        return f"{self.root} {self.quality.name}"

    @property
    def full_name(self) -> str:
        """Root and quality full name, e.g. 'E Dominant 7th'."""
        return f"{self.root} {self.quality.full_name or self.quality.name}"

    @property
    def abbr(self) -> str:
        """Root and default abbreviation, e.g. 'Em', or just 'E' for Major."""
        return f"{self.root}{self.quality.abbr or ''}"

    def invert(self, selector: int | str) -> Chord:
        """
        Invert this chord.

        Args:
            selector: Inversion number, or a figured-bass letter
                ('a' root position, 'b' first, 'c' second, 'd' third)

        Returns:
            A chord whose notes are rotated so that note `n` is in the bass

        Raises:
            MalformedError: If the letter is unknown
            UnimplementedError: If this chord is already inverted
        """
        n = _inversion_number(selector)
        if not 0 <= n < len(self.quality.intervals):
            raise ValueError(f"{self.name} has no inversion {n}")
        if n == 0 and self.quality.inversion is None:
            return self
        return Chord(self.quality.invert(n), self.root, rotation=n)

    def __str__(self) -> str:
        return self.name


def _canonical_key(intervals: Iterable[Interval]) -> str:
    return ",".join(str(s) for s in sorted(interval.semitones for interval in intervals))


def _no_match_message(items: Iterable[Interval | int]) -> str:
    return ErrorMessages.NO_MATCHING_INTERVALS.format(intervals=", ".join(str(i) for i in items))


def _inversion_number(selector: int | str) -> int:
    if isinstance(selector, bool):
        raise MalformedError(ErrorMessages.MALFORMED_INVERSION.format(selector=selector))
    if isinstance(selector, int):
        return selector
    letter = selector.strip().lower()
    if letter not in INVERSION_LETTERS:
        raise MalformedError(ErrorMessages.MALFORMED_INVERSION.format(selector=selector))
    return INVERSION_LETTERS[letter]


def _parse_catalog_interval(name: str) -> Interval:
    """Parse a catalog interval name, reducing ninths and above by an octave."""
    match = _COMPOUND_NAME_RE.fullmatch(name)
    if match and int(match.group(2)) > MAX_DIATONIC_NUMBER:
        name = f"{match.group(1)}{int(match.group(2)) - _DIATONIC_STEPS}"
    return Interval.from_string(name)


def build_quality(record: ChordQualitySpec) -> ChordQuality:
    """Expand a catalog record into a ChordQuality."""
    if record.is_compact:
        intervals = tuple(Interval(semitones) for semitones in record.semitone_offsets)
    else:
        intervals = tuple(_parse_catalog_interval(name) for name in record.interval_names)
    return ChordQuality(
        name=record.short_name,
        intervals=intervals,
        full_name=record.name,
        abbrs=tuple(record.abbrs),
    )


def build_registry(catalog: ChordCatalog) -> ChordQualityRegistry:
    """Build a registry holding every quality of a catalog."""
    registry = ChordQualityRegistry()
    for record in catalog.qualities:
        registry.register(build_quality(record))
    return registry


# The shared registry, populated once at import
REGISTRY = build_registry(load_catalog())

ChordQuality.MAJOR = ChordQuality.from_string("Major")
ChordQuality.MINOR = ChordQuality.from_string("Minor")
ChordQuality.AUGMENTED = ChordQuality.from_string("Augmented")
ChordQuality.DIMINISHED = ChordQuality.from_string("Diminished")
ChordQuality.DOMINANT_7 = ChordQuality.from_string("Dominant 7th")
ChordQuality.MAJOR_7 = ChordQuality.from_string("Major 7th")
ChordQuality.MINOR_7 = ChordQuality.from_string("Minor 7th")
