"""Language tag utilities.

Template directories are named with BCP-47 style tags ("zh-TW"), while
gettext catalogs and Babel use POSIX identifiers ("zh_TW"). This module
holds the small conversions both sides need.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from localetemplates.constants import MAX_LOCALE_CACHE_SIZE, REGION_SEPARATOR

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "base_language",
    "get_babel_locale",
    "normalize_locale",
]


def base_language(lang: str) -> str | None:
    """Return the base language of a tag that carries a region subtag.

    Only tags that contain the region separator have a base language.
    A bare tag ("fr") is already a base language and returns None, so
    callers never probe the same directory twice.

    Args:
        lang: Language tag (e.g., "zh-TW")

    Returns:
        Text before the first separator, or None

    Example:
        >>> base_language("zh-TW")
        'zh'
        >>> base_language("sr-Latn-RS")
        'sr'
        >>> base_language("fr") is None
        True
    """
    if REGION_SEPARATOR not in lang:
        return None
    return lang.split(REGION_SEPARATOR, 1)[0]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace(REGION_SEPARATOR, "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_babel_locale("en-US").territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
