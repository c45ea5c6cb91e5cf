"""
Chord quality registry - the lookup tables behind chord recognition.

Three separate indexes keep the key spaces apart:
- names: each quality's name and full name
- abbreviations: each alternate spelling
- canonical keys: ascending comma-joined semitones, e.g. '0,4,7'

Name lookup consults names, then abbreviations. Interval lookup consults
only canonical keys.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from types import MappingProxyType
from typing import TYPE_CHECKING

from chuk_mcp_harmony.errors import CatalogError

if TYPE_CHECKING:
    from chuk_mcp_harmony.core.chord import ChordQuality

logger = logging.getLogger(__name__)


class ChordQualityRegistry:
    """
    Registry of chord qualities, indexed by name, abbreviation and interval set.

    Registration is locked; lookups read plain dicts. The shared registry is
    fully populated at import, before any reader exists.
    """

    def __init__(self) -> None:
        self._qualities: list[ChordQuality] = []
        self._by_name: dict[str, ChordQuality] = {}
        self._by_abbr: dict[str, ChordQuality] = {}
        self._by_key: dict[str, ChordQuality] = {}
        self._lock = threading.Lock()

    def register(self, quality: ChordQuality) -> None:
        """
        Index a root-position quality under all of its keys.

        Raises:
            CatalogError: If any key already belongs to a different quality,
                or the quality is an inversion
        """
        if quality.inversion is not None:
            raise CatalogError(f"Can't register inverted chord quality {quality.name}")

        names = [quality.name] + ([quality.full_name] if quality.full_name else [])
        with self._lock:
            self._check_free(self._by_name, names, quality, "name")
            self._check_free(self._by_abbr, quality.abbrs, quality, "abbreviation")
            self._check_free(self._by_key, [quality.canonical_key], quality, "interval set")

            for name in names:
                self._by_name[name] = quality
            for abbr in quality.abbrs:
                self._by_abbr[abbr] = quality
            self._by_key[quality.canonical_key] = quality
            self._qualities.append(quality)

        logger.debug(f"Registered chord quality {quality.name} [{quality.canonical_key}]")

    @staticmethod
    def _check_free(
        index: dict[str, ChordQuality],
        keys: list[str] | tuple[str, ...],
        quality: ChordQuality,
        kind: str,
    ) -> None:
        for key in keys:
            owner = index.get(key)
            if owner is not None and owner is not quality:
                raise CatalogError(
                    f"Chord {kind} '{key}' of {quality.name} already belongs to {owner.name}"
                )

    def get(self, name: str) -> ChordQuality | None:
        """Look up a quality by name or full name, then by abbreviation."""
        quality = self._by_name.get(name)
        if quality is None:
            quality = self._by_abbr.get(name)
        return quality

    def get_by_key(self, canonical_key: str) -> ChordQuality | None:
        """Look up a root-position quality by its canonical semitone key."""
        return self._by_key.get(canonical_key)

    @property
    def names(self) -> MappingProxyType[str, ChordQuality]:
        """Read-only view of the name index."""
        return MappingProxyType(self._by_name)

    @property
    def abbreviations(self) -> MappingProxyType[str, ChordQuality]:
        """Read-only view of the abbreviation index."""
        return MappingProxyType(self._by_abbr)

    @property
    def canonical_keys(self) -> MappingProxyType[str, ChordQuality]:
        """Read-only view of the canonical key index."""
        return MappingProxyType(self._by_key)

    def all(self) -> list[ChordQuality]:
        """All registered qualities, in registration order."""
        return list(self._qualities)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[ChordQuality]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._qualities)
