#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server provides MCP tools for interval arithmetic and chord
recognition. Chord qualities come from the built-in catalog, registered
once at import.

The server provides tools for:
- Describing intervals and measuring the interval between pitches
- Listing and describing chord qualities
- Identifying chords from pitches or intervals, including inversions
- Spelling chords from their names
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.constants import CATALOG_PATH
from chuk_mcp_harmony.core import REGISTRY
from chuk_mcp_harmony.tools import register_chord_tools, register_interval_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Register all tools
interval_tools = register_interval_tools(mcp)
chord_tools = register_chord_tools(mcp, REGISTRY)

# Export tool functions for direct access
harmony_describe_interval = interval_tools["harmony_describe_interval"]
harmony_interval_between = interval_tools["harmony_interval_between"]

harmony_list_chord_qualities = chord_tools["harmony_list_chord_qualities"]
harmony_describe_chord_quality = chord_tools["harmony_describe_chord_quality"]
harmony_identify_quality = chord_tools["harmony_identify_quality"]
harmony_identify_chord = chord_tools["harmony_identify_chord"]
harmony_build_chord = chord_tools["harmony_build_chord"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info(f"  Catalog: {CATALOG_PATH}")
logger.info(f"  Chord qualities: {len(REGISTRY)}")
