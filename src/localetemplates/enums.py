"""Enumerations for localetemplates type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TemplateFlavor(StrEnum):
    """Kind of compiled template and the cache that holds it.

    StrEnum provides automatic string conversion: str(TemplateFlavor.MARKUP) == "markup"
    """

    MARKUP = "markup"
    """Autoescaping markup template (HTML/XML output)."""

    FRAME = "frame"
    """Markup page composed with the shared frame templates."""

    TEXT = "text"
    """Plain text template, no autoescaping."""


class FrameState(StrEnum):
    """Memoized result of the frame existence check.

    Only VALID is terminal. INVALID records that the last check failed;
    the next frame load checks the filesystem again.
    """

    UNKNOWN = "unknown"
    """Never checked (or reset after a configuration change)."""

    VALID = "valid"
    """All frame files exist in the default tier."""

    INVALID = "invalid"
    """At least one frame file was missing on the last check."""


class FallbackTier(StrEnum):
    """Tier of the language fallback chain that produced a template path.

    StrEnum provides automatic string conversion: str(FallbackTier.BASE) == "base"
    """

    EXACT = "exact"
    """{root}/{lang}/{name}.tmpl"""

    BASE = "base"
    """{root}/{base language}/{name}.tmpl"""

    DEFAULT = "default"
    """{root}/default/{name}.tmpl"""


__all__ = [
    "FallbackTier",
    "FrameState",
    "TemplateFlavor",
]
