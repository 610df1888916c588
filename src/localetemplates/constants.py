"""Shared constants for localetemplates.

This module provides centralized configuration constants used across the
loading and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Layout: On-disk template tree conventions
- Frames: Shared frame templates composed around pages
- Functions: Built-in template function names
- Environment: Debug toggle variable names
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Layout
    "DEFAULT_ROOT_PATH",
    "DEFAULT_LANGUAGE_DIR",
    "TEMPLATE_EXTENSION",
    "REGION_SEPARATOR",
    "TEMPLATE_ENCODING",
    # Frames
    "DEFAULT_FRAMES",
    # Functions
    "TRANSLATE_FUNCTION",
    "TRANSLATE_ALIAS",
    # Environment
    "DEBUG_ENV_VARS",
    "DEBUG_ENABLED_VALUE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LAYOUT
# ============================================================================
#
# Templates live at {root}/{language}/{name}.tmpl. The "default" directory is
# the last tier of every fallback chain.
#
#   resources/template/
#       zh-TW/hello.tmpl      <- exact language tag
#       zh/hello.tmpl         <- base language (text before the first "-")
#       default/hello.tmpl    <- language-independent fallback
#
# ============================================================================

DEFAULT_ROOT_PATH: str = "./resources/template"

DEFAULT_LANGUAGE_DIR: str = "default"

TEMPLATE_EXTENSION: str = ".tmpl"

# Separates base language from region/script subtags ("zh-TW" -> "zh").
REGION_SEPARATOR: str = "-"

TEMPLATE_ENCODING: str = "utf-8"

# ============================================================================
# FRAMES
# ============================================================================

# Shared frame templates composed around every frame page.
# All of them must exist in the default tier before any frame page loads.
DEFAULT_FRAMES: tuple[str, ...] = (
    "_main",
    "_header_content",
    "_header_claim",
    "_footer_content",
    "_footer_claim",
)

# ============================================================================
# FUNCTIONS
# ============================================================================

# Built-in translation function exposed in every template's function table.
TRANSLATE_FUNCTION: str = "translate"

# Short alias kept for templates written as {{ T("key") }}.
TRANSLATE_ALIAS: str = "T"

# ============================================================================
# ENVIRONMENT
# ============================================================================

# Candidate debug toggle variables, newest first. First non-empty value wins.
DEBUG_ENV_VARS: tuple[str, ...] = ("LOCALETEMPLATES_DEBUG", "KKAPP_DEBUG")

# Compared case-insensitively.
DEBUG_ENABLED_VALUE: str = "TRUE"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached gettext catalogs (one per language tag).
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
