"""Hypothesis strategies for localetemplates property-based testing.

Usage:
    from tests.strategies import language_tags, tier_layouts
    from tests.strategies.templates import write_template_file
"""

from .templates import (
    TierLayout,
    language_tags,
    template_names,
    tier_layouts,
    write_template_file,
)

__all__ = [
    "TierLayout",
    "language_tags",
    "template_names",
    "tier_layouts",
    "write_template_file",
]
