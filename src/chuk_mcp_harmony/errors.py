"""
Exception hierarchy for the harmony engine.

Every error subclasses ValueError through HarmonyError, so callers that
already catch ValueError keep working.
"""

from __future__ import annotations


class HarmonyError(ValueError):
    """Base exception for all chuk-mcp-harmony errors."""


class NotFoundError(HarmonyError):
    """No interval or chord quality matches the given name or intervals."""


class IncompatibleOperandsError(HarmonyError, TypeError):
    """Operands are not the same kind (pitch, pitch class, or number)."""


class MalformedError(HarmonyError):
    """Pitch, chord, or inversion text that cannot be parsed."""


class UnimplementedError(HarmonyError, NotImplementedError):
    """An operation the engine deliberately refuses, such as re-inverting."""


class CatalogError(HarmonyError):
    """The built-in chord catalog is ambiguous or malformed."""
