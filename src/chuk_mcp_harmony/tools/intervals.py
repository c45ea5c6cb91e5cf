"""
Interval tools - MCP tools for naming and measuring intervals.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.core import Interval, parse_pitch_like

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_interval(interval: Interval) -> dict[str, Any]:
    """Serialize an interval for tool output."""
    return {
        "name": str(interval),
        "long_name": interval.long_name,
        "semitones": interval.semitones,
        "natural_semitones": interval.natural_semitones,
        "accidentals": interval.accidentals,
        "number": interval.number,
        "quality": interval.quality.name.lower() if interval.quality else None,
        "inverse": str(interval.inverse),
    }


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_interval(name: str) -> str:
        """
        Describe an interval by name.

        Accepts short names (M3), long names (Major 3rd), and altered
        diatonic numbers (A4, d5, augmented 4).

        Args:
            name: Interval name

        Returns:
            JSON string with the interval's size, number, quality and inverse

        Example:
            harmony_describe_interval(name="A4")
        """
        try:
            interval = Interval.from_string(name)
            return json.dumps({"status": "success", "interval": describe_interval(interval)})
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_interval"] = harmony_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_interval_between(a: str, b: str) -> str:
        """
        Measure the ascending interval between two pitches.

        Both must be pitch classes (E, G#) or both octave-qualified
        pitches (E4, G#4).

        Args:
            a: Lower pitch name
            b: Upper pitch name

        Returns:
            JSON string with the interval

        Example:
            harmony_interval_between(a="C", b="E")
        """
        try:
            interval = Interval.between(parse_pitch_like(a), parse_pitch_like(b))
            return json.dumps({"status": "success", "interval": describe_interval(interval)})
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_interval_between"] = harmony_interval_between

    return tools
