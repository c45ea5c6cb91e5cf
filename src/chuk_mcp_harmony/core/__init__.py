"""
Core harmony primitives.

These are the invariants everything else composes on:
- Interval: Interned signed distance within an octave (natural size + accidentals)
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: Octave-qualified pitch, MIDI numbered
- ChordQuality: Named interval sets, recognized from arbitrary intervals
- Chord: Concrete chord with root and quality
- ChordQualityRegistry: Name, abbreviation and interval-set indexes
"""

from chuk_mcp_harmony.core.chord import REGISTRY, Chord, ChordQuality
from chuk_mcp_harmony.core.interval import (
    INTERVALS,
    Interval,
    as_interval,
    interval_class_difference,
)
from chuk_mcp_harmony.core.pitch import Pitch, PitchClass, PitchLike, parse_pitch_like
from chuk_mcp_harmony.core.registry import ChordQualityRegistry

__all__ = [
    # Interval
    "Interval",
    "INTERVALS",
    "as_interval",
    "interval_class_difference",
    # Pitch
    "PitchClass",
    "Pitch",
    "PitchLike",
    "parse_pitch_like",
    # Chord
    "ChordQuality",
    "Chord",
    "ChordQualityRegistry",
    "REGISTRY",
]
