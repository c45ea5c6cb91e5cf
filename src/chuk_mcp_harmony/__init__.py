"""
chuk-mcp-harmony - interval arithmetic and chord-quality recognition.

Exposes the core engine directly and as MCP tools.
"""

from chuk_mcp_harmony.constants import IntervalQuality
from chuk_mcp_harmony.core import (
    INTERVALS,
    REGISTRY,
    Chord,
    ChordQuality,
    ChordQualityRegistry,
    Interval,
    Pitch,
    PitchClass,
    PitchLike,
    parse_pitch_like,
)
from chuk_mcp_harmony.errors import (
    CatalogError,
    HarmonyError,
    IncompatibleOperandsError,
    MalformedError,
    NotFoundError,
    UnimplementedError,
)

__all__ = [
    "Chord",
    "ChordQuality",
    "ChordQualityRegistry",
    "INTERVALS",
    "Interval",
    "IntervalQuality",
    "Pitch",
    "PitchClass",
    "PitchLike",
    "REGISTRY",
    "parse_pitch_like",
    # Errors
    "CatalogError",
    "HarmonyError",
    "IncompatibleOperandsError",
    "MalformedError",
    "NotFoundError",
    "UnimplementedError",
]
