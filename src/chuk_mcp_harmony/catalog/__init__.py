"""
Built-in chord catalog.

The catalog ships with the package as YAML and is validated on load.
"""

from chuk_mcp_harmony.catalog.loader import load_catalog

__all__ = ["load_catalog"]
