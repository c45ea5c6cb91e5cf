"""
Catalog loader - reads the built-in chord quality records.

The catalog is fixed at build time and shipped with the package; a missing
or invalid catalog is a packaging error, so failures are raised rather than
skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_harmony.constants import CATALOG_PATH
from chuk_mcp_harmony.errors import CatalogError
from chuk_mcp_harmony.models.catalog import ChordCatalog

logger = logging.getLogger(__name__)


def load_catalog(path: Path | None = None) -> ChordCatalog:
    """
    Load and validate a chord catalog from YAML.

    Args:
        path: Catalog file (defaults to the built-in catalog)

    Returns:
        The validated catalog, records in file order

    Raises:
        CatalogError: If the file is not a valid catalog
    """
    path = path or CATALOG_PATH
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    catalog = parse_catalog(data, source=str(path))
    logger.info(f"Loaded {len(catalog.qualities)} chord qualities from {path}")
    return catalog


def parse_catalog(data: Any, source: str = "<data>") -> ChordCatalog:
    """Validate already-parsed catalog data."""
    if not isinstance(data, dict):
        raise CatalogError(f"Chord catalog {source} must be a mapping")
    try:
        return ChordCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid chord catalog {source}: {e}") from e
