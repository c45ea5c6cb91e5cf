"""
Pydantic models for the harmony engine.

This module provides:
- ChordQualitySpec: One built-in chord quality record
- ChordCatalog: The ordered list of records
"""

from chuk_mcp_harmony.models.catalog import ChordCatalog, ChordQualitySpec

__all__ = [
    "ChordCatalog",
    "ChordQualitySpec",
]
