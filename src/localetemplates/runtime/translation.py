"""Translation collaborators for the built-in translate function.

Templates call {{ translate("key") }} (or {{ T("key") }}); the function
table binds that call to the template's language and forwards it to a
Translator. String lookup itself is not this package's concern, so the
Translator is a protocol and two small implementations are provided.

Components:
    Translator - Protocol: translate(lang, key) -> str
    KeyTranslator - Returns keys unchanged (default)
    GettextTranslator - Babel gettext catalogs from a locale directory

Python 3.13+. Uses Babel for catalog loading.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING, Protocol

from babel.core import UnknownLocaleError
from babel.support import NullTranslations, Translations

from localetemplates.constants import MAX_LOCALE_CACHE_SIZE
from localetemplates.locale_utils import base_language, get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from localetemplates.loading.types import LanguageTag

__all__ = ["GettextTranslator", "KeyTranslator", "Translator"]

logger = logging.getLogger(__name__)


class Translator(Protocol):
    """Protocol for translation services used by templates.

    Example:
        >>> class UpperTranslator:
        ...     def translate(self, lang: str, key: str) -> str:
        ...         return key.upper()
        >>> engine = TemplateEngine(translator=UpperTranslator())
    """

    def translate(self, lang: LanguageTag, key: str) -> str:
        """Translate key into lang.

        Args:
            lang: Language tag of the template being rendered
            key: Translation key as written in the template

        Returns:
            Translated string (implementations decide the fallback)
        """


class KeyTranslator:
    """Translator that returns every key unchanged."""

    __slots__ = ()

    def translate(self, lang: LanguageTag, key: str) -> str:  # noqa: ARG002
        """Return key as-is."""
        return key


class GettextTranslator:
    """Translator backed by compiled gettext catalogs.

    Catalogs are looked up as {directory}/{locale}/LC_MESSAGES/{domain}.mo,
    trying the full locale first and then its base language. A language
    without any catalog translates every key to itself.

    Loaded catalogs are cached per language tag. Thread-safe via
    lru_cache internal locking.

    Example:
        >>> translator = GettextTranslator("locale")
        >>> translator.translate("de-AT", "Hello")
        'Hallo'

    Attributes:
        directory: Root directory of the gettext catalogs
        domain: Catalog domain (file name without .mo)
    """

    __slots__ = ("_catalog", "directory", "domain")

    def __init__(self, directory: str | os.PathLike[str], domain: str = "messages") -> None:
        """Initialize GettextTranslator.

        Args:
            directory: Root directory containing per-locale catalogs
            domain: Catalog domain (default: "messages")
        """
        self.directory = os.fspath(directory)
        self.domain = domain
        self._catalog = functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)(self._load_catalog)

    @staticmethod
    def _catalog_locales(lang: LanguageTag) -> list[str]:
        """Return catalog directory names to try for lang, most specific first."""
        candidates = [normalize_locale(lang)]
        try:
            locale = get_babel_locale(lang)
        except (UnknownLocaleError, ValueError):
            logger.debug("Babel does not know locale '%s'", lang)
        else:
            # Babel may add likely subtags ("zh_TW" -> "zh_Hant_TW").
            candidates.extend([str(locale), locale.language])
        base = base_language(lang)
        if base:
            candidates.append(base)
        return list(dict.fromkeys(candidates))

    def _load_catalog(self, lang: LanguageTag) -> NullTranslations:
        if not lang:
            return NullTranslations()
        catalog = Translations.load(
            self.directory, locales=self._catalog_locales(lang), domain=self.domain
        )
        if not isinstance(catalog, Translations):
            logger.debug("No gettext catalog for '%s' in %s", lang, self.directory)
        return catalog

    def translate(self, lang: LanguageTag, key: str) -> str:
        """Translate key using the catalog for lang."""
        return self._catalog(lang).gettext(key)

    def clear(self) -> None:
        """Drop cached catalogs so edited .mo files are reloaded."""
        self._catalog.cache_clear()
