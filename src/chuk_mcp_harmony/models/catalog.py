"""
Catalog models - the built-in chord quality records.

Each record names a chord quality, lists its abbreviations, and gives its
intervals either as interval short names ('P1 M3 P5') or as a compact string
of semitone offsets from the root ('047', with 't' = 10 and 'e' = 11).
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_harmony.constants import COMPACT_SEMITONE_DIGITS

_COMPACT_RE = re.compile(r"[0-9te]+")
_INTERVAL_NAME_RE = re.compile(r"[PMmAd]\d+")


class ChordQualitySpec(BaseModel):
    """One record of the chord catalog."""

    name: str = Field(..., min_length=1, description="Full chord quality name")
    abbrs: list[str] = Field(
        default_factory=list,
        description="Alternate spellings; the first is the default abbreviation",
    )
    intervals: str = Field(..., description="Interval names or compact semitone string")

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: str) -> str:
        """Ensure intervals are either all interval names or a compact string."""
        v = v.strip()
        if _COMPACT_RE.fullmatch(v):
            return v
        names = v.split()
        if names and all(_INTERVAL_NAME_RE.fullmatch(name) for name in names):
            return " ".join(names)
        raise ValueError(f"Invalid chord intervals: {v!r}")

    @property
    def is_compact(self) -> bool:
        """Whether intervals are written as compact semitone digits."""
        return bool(_COMPACT_RE.fullmatch(self.intervals))

    @property
    def interval_names(self) -> list[str]:
        """Interval short names, for name-form records."""
        return [] if self.is_compact else self.intervals.split()

    @property
    def semitone_offsets(self) -> list[int]:
        """Semitone offsets from the root, for compact records."""
        if not self.is_compact:
            return []
        return [
            COMPACT_SEMITONE_DIGITS[c] if c in COMPACT_SEMITONE_DIGITS else int(c)
            for c in self.intervals
        ]

    @property
    def short_name(self) -> str:
        """
        Abbreviated display name.

        Non-final 'Major' and 'Minor' become 'Maj' and 'Min';
        'Dominant' and 'Diminished' become 'Dom' and 'Dim'.
        """
        name = re.sub(r"Major(?!$)", "Maj", self.name, count=1)
        name = re.sub(r"Minor(?!$)", "Min", name, count=1)
        return name.replace("Dominant", "Dom").replace("Diminished", "Dim")


class ChordCatalog(BaseModel):
    """The ordered list of built-in chord qualities."""

    version: str = Field(default="chords/v1")
    qualities: list[ChordQualitySpec] = Field(default_factory=list)

    model_config = {"frozen": True}
