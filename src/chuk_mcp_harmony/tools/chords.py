"""
Chord tools - MCP tools for chord quality lookup, recognition and building.

Tools for listing the built-in qualities, identifying a chord from pitches
or intervals, and spelling a named chord.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.core import (
    Chord,
    ChordQuality,
    ChordQualityRegistry,
    Interval,
    parse_pitch_like,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_quality(quality: ChordQuality) -> dict[str, Any]:
    """Serialize a chord quality for tool output."""
    return {
        "name": quality.name,
        "full_name": quality.full_name,
        "abbrs": list(quality.abbrs),
        "intervals": [str(i) for i in quality.intervals],
        "semitones": quality.semitones,
        "inversion": quality.inversion,
    }


def describe_chord(chord: Chord) -> dict[str, Any]:
    """Serialize a chord for tool output."""
    return {
        "name": chord.name,
        "full_name": chord.full_name,
        "abbr": chord.abbr,
        "root": str(chord.root),
        "bass": str(chord.bass),
        "notes": [str(note) for note in chord.notes],
        "inversion": chord.inversion,
        "quality": describe_quality(chord.quality),
    }


def register_chord_tools(
    mcp: ChukMCPServer,
    registry: ChordQualityRegistry,
) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        registry: The chord quality registry to list and describe

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_chord_qualities() -> str:
        """
        List the built-in chord qualities.

        Returns:
            JSON string with every quality's name, abbreviations and intervals

        Example:
            harmony_list_chord_qualities()
        """
        try:
            qualities = registry.all()
            return json.dumps(
                {
                    "status": "success",
                    "qualities": [describe_quality(q) for q in qualities],
                    "count": len(qualities),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chord qualities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_list_chord_qualities"] = harmony_list_chord_qualities

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_chord_quality(name: str) -> str:
        """
        Get a chord quality by name or abbreviation.

        Args:
            name: Quality name ("Major", "Dominant 7th") or abbreviation ("m7")

        Returns:
            JSON string with the quality's details

        Example:
            harmony_describe_chord_quality(name="m7b5")
        """
        try:
            quality = registry.get(name)
            if quality is None:
                return json.dumps(
                    {"status": "error", "message": f"Chord quality not found: {name}"}
                )
            return json.dumps({"status": "success", "quality": describe_quality(quality)})
        except Exception as e:
            logger.exception("Failed to describe chord quality")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_chord_quality"] = harmony_describe_chord_quality

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_identify_quality(intervals: list[str | int]) -> str:
        """
        Identify a chord quality from intervals above a root.

        The first interval is taken as the bass: a third first means first
        inversion, a fifth first means second inversion.

        Args:
            intervals: Interval names ("M3") or semitone counts (4)

        Returns:
            JSON string with the matched quality

        Example:
            harmony_identify_quality(intervals=["M3", "P1", "P5"])
        """
        try:
            items = [i if isinstance(i, int) else Interval.from_string(i) for i in intervals]
            quality = ChordQuality.from_intervals(items)
            return json.dumps({"status": "success", "quality": describe_quality(quality)})
        except Exception as e:
            logger.exception("Failed to identify chord quality")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_identify_quality"] = harmony_identify_quality

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_identify_chord(pitches: list[str]) -> str:
        """
        Identify a chord from its pitches.

        The first pitch is the presumed root. Use all pitch classes
        (A, C#, E) or all octave-qualified pitches (A3, C#4, E4).

        Args:
            pitches: Pitch names

        Returns:
            JSON string with the chord

        Example:
            harmony_identify_chord(pitches=["A", "C#", "E"])
        """
        try:
            chord = Chord.from_pitches([parse_pitch_like(p) for p in pitches])
            return json.dumps({"status": "success", "chord": describe_chord(chord)})
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_identify_chord"] = harmony_identify_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_build_chord(chord: str, inversion: int | str | None = None) -> str:
        """
        Spell a chord from its name.

        Args:
            chord: Chord name, e.g. "E", "Em", "E7", "E4 Major"
            inversion: Optional inversion number or letter (a, b, c, d)

        Returns:
            JSON string with the chord's notes

        Example:
            harmony_build_chord(chord="C Major", inversion="b")
        """
        try:
            result = Chord.from_string(chord)
            if inversion is not None:
                result = result.invert(inversion)
            return json.dumps({"status": "success", "chord": describe_chord(result)})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_build_chord"] = harmony_build_chord

    return tools
