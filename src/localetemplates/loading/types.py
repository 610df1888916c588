"""Type aliases for the loading domain.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "LanguageTag",
    "TemplateName",
    "TemplateSource",
]

TemplateName: TypeAlias = str
"""Logical template name without extension (e.g., 'hello', '_main')."""

LanguageTag: TypeAlias = str
"""Requested language tag (e.g., 'en', 'zh-TW'). May be empty."""

TemplateSource: TypeAlias = str
"""Raw template source text."""
