"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Interval naming and measurement
- chords - Chord quality lookup, recognition and spelling
"""

from chuk_mcp_harmony.tools.chords import register_chord_tools
from chuk_mcp_harmony.tools.intervals import register_interval_tools

__all__ = [
    "register_chord_tools",
    "register_interval_tools",
]
