"""
Accidental notation - rendering and parsing sharps and flats.
"""

from __future__ import annotations

SHARP = "♯"
FLAT = "♭"
DOUBLE_SHARP = "𝄪"
DOUBLE_FLAT = "𝄫"

# Glyph -> semitone offset, for both ASCII and Unicode spellings
_ACCIDENTAL_VALUES: dict[str, int] = {
    "#": 1,
    SHARP: 1,
    "b": -1,
    FLAT: -1,
    DOUBLE_SHARP: 2,
    DOUBLE_FLAT: -2,
}

ACCIDENTAL_CHARS = "".join(_ACCIDENTAL_VALUES)


def accidental_string(semitones: int) -> str:
    """
    Render a semitone offset as accidental glyphs.

    0 -> "", 1 -> "♯", -2 -> "♭♭".
    """
    if semitones > 0:
        return SHARP * semitones
    return FLAT * -semitones


def parse_accidentals(text: str) -> int:
    """Sum the offsets of a run of accidental characters."""
    total = 0
    for char in text:
        if char not in _ACCIDENTAL_VALUES:
            raise ValueError(f"Unknown accidental: {char!r}")
        total += _ACCIDENTAL_VALUES[char]
    return total
