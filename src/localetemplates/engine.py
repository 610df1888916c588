"""Template engine façade.

TemplateEngine owns the configuration (root path, frame set, function
overrides, translator, debug toggle) and the mutable runtime state (three
template caches and the frame validator). All load operations run against
one instance, so independent engines are fully isolated from each other.

A process-wide default engine backs the module-level convenience functions
(load_markup, load_frame, load_text and the configuration setters).

Load flow:
    load_*(name, lang)
        -> TemplateCache.get_or_load        (hit: return, miss: continue)
        -> resolve_template                 (exact -> base -> default)
        -> build_function_table             (translate bound to lang + overrides)
        -> compiler.parse / parse_multi     (Jinja2)
        -> TemplateCache commit             (first committer wins)

Thread Safety:
    Load calls are safe from any number of threads. Configuration fields are
    plain attributes without synchronization: settle configuration before
    concurrent load traffic begins.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from jinja2 import Template

from localetemplates.config import is_debug_enabled
from localetemplates.constants import DEFAULT_FRAMES, DEFAULT_ROOT_PATH
from localetemplates.diagnostics import InvalidEngineError, TemplateNotFoundError
from localetemplates.enums import FallbackTier, FrameState, TemplateFlavor
from localetemplates.loading.resolver import (
    FallbackInfo,
    resolve_template,
    resolve_template_path,
)
from localetemplates.loading.types import LanguageTag, TemplateName
from localetemplates.runtime.cache import CacheKey, TemplateCache
from localetemplates.runtime.compiler import parse, parse_multi, read_source
from localetemplates.runtime.frames import FrameValidator
from localetemplates.runtime.functions import FunctionRegistry, build_function_table
from localetemplates.runtime.translation import KeyTranslator, Translator

__all__ = [
    "TemplateEngine",
    "get_default_engine",
    "load_frame",
    "load_markup",
    "load_text",
    "register_function",
    "set_default_engine",
    "set_frames",
    "set_functions",
    "set_root_path",
]

logger = logging.getLogger(__name__)


class TemplateEngine:
    """Language-aware template loader with per-flavor caches.

    Example - Markup page with language fallback:
        >>> engine = TemplateEngine("resources/template")
        >>> tmpl = engine.load_markup("hello", "zh-TW")
        # Tries zh-TW/hello.tmpl, then zh/hello.tmpl, then default/hello.tmpl
        >>> tmpl.render(name="Anna")

    Example - Page composed with the shared frames:
        >>> tmpl = engine.load_frame("account", "de-AT")
        # account.tmpl can {% include "_header_content" %} etc.

    Example - Custom functions:
        >>> engine.register_function(lambda n: f"{n:,}", name="grouped")
        >>> engine.load_text("receipt", "en")   # {{ grouped(total) }}

    Attributes:
        root_path: Base directory of the template tree
        frames: Logical names of the shared frame templates
        functions: Caller-supplied template functions
        translator: Translation service behind translate/T
        debug: Explicit debug override; None reads the environment per call
    """

    __slots__ = (
        "_debug",
        "_frame_cache",
        "_frame_validator",
        "_frames",
        "_functions",
        "_markup_cache",
        "_on_fallback",
        "_root_path",
        "_text_cache",
        "_translator",
    )

    def __init__(
        self,
        root_path: str | os.PathLike[str] = DEFAULT_ROOT_PATH,
        *,
        frames: Iterable[str] = DEFAULT_FRAMES,
        functions: Mapping[str, Callable[..., Any]] | FunctionRegistry | None = None,
        translator: Translator | None = None,
        debug: bool | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize a template engine with isolated caches.

        Args:
            root_path: Base directory of the template tree
            frames: Frame template names composed around frame pages
            functions: Template function overrides (mapping or registry)
            translator: Translation service (default: KeyTranslator)
            debug: True/False forces debug mode on/off; None (default) reads
                   the environment toggle on every load call
            on_fallback: Optional callback invoked when a template is served
                         from the base language or default tier. Called on
                         cache misses only.
        """
        self._root_path = os.fspath(root_path)
        self._frames: tuple[str, ...] = tuple(frames)
        self._functions = self._as_registry(functions)
        self._translator: Translator = translator if translator is not None else KeyTranslator()
        self._debug = debug
        self._on_fallback = on_fallback

        self._markup_cache = TemplateCache()
        self._frame_cache = TemplateCache()
        self._text_cache = TemplateCache()
        self._frame_validator = FrameValidator()

    @staticmethod
    def _as_registry(
        functions: Mapping[str, Callable[..., Any]] | FunctionRegistry | None,
    ) -> FunctionRegistry:
        if isinstance(functions, FunctionRegistry):
            return functions
        return FunctionRegistry(functions)

    def __repr__(self) -> str:
        root_path = getattr(self, "_root_path", None)
        frames = getattr(self, "_frames", None)
        return f"{type(self).__name__}(root_path={root_path!r}, frames={frames!r})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def root_path(self) -> str:
        """Base directory of the template tree."""
        return self._require_state()._root_path

    def set_root_path(self, root_path: str | os.PathLike[str]) -> None:
        """Replace the root path. Cached templates are kept."""
        self._require_state()
        self._root_path = os.fspath(root_path)

    @property
    def frames(self) -> tuple[str, ...]:
        """Logical names of the shared frame templates."""
        return self._require_state()._frames

    def set_frames(self, frames: Iterable[str]) -> None:
        """Replace the frame set. Validation is deferred to the next frame load."""
        self._require_state()
        self._frames = tuple(frames)

    @property
    def functions(self) -> FunctionRegistry:
        """Caller-supplied template functions."""
        return self._require_state()._functions

    def set_functions(
        self, functions: Mapping[str, Callable[..., Any]] | FunctionRegistry | None
    ) -> None:
        """Replace the function overrides. Applies to templates parsed from now on."""
        self._require_state()
        self._functions = self._as_registry(functions)

    def register_function(self, func: Callable[..., Any], *, name: str | None = None) -> None:
        """Add one function override."""
        self._require_state()
        self._functions.register(func, name=name)

    @property
    def translator(self) -> Translator:
        """Translation service behind translate/T."""
        return self._require_state()._translator

    def set_translator(self, translator: Translator) -> None:
        """Replace the translation service."""
        self._require_state()
        self._translator = translator

    @property
    def debug(self) -> bool:
        """Whether the next load runs in debug (always-reparse) mode."""
        if self._require_state()._debug is not None:
            return self._debug
        return is_debug_enabled()

    def set_debug(self, debug: bool | None) -> None:
        """Force debug mode on/off, or None to follow the environment."""
        self._require_state()
        self._debug = debug

    @property
    def frame_state(self) -> FrameState:
        """Memoized result of the frame existence check."""
        return self._require_state()._frame_validator.state

    def reset_frame_validation(self) -> None:
        """Re-check frame files on the next frame load."""
        self._require_state()._frame_validator.reset()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_markup(self, name: TemplateName, lang: LanguageTag) -> Template:
        """Load an autoescaping markup template.

        Args:
            name: Logical template name
            lang: Requested language tag

        Returns:
            Compiled template (the same instance on every non-debug call)

        Raises:
            TemplateNotFoundError: If no tier of the fallback chain exists
            jinja2.TemplateSyntaxError: If the file does not compile
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        self._require_state()
        key = CacheKey(name, lang)
        return self._markup_cache.get_or_load(
            key,
            lambda: self._compile_single(key, TemplateFlavor.MARKUP),
            debug=self.debug,
        )

    def load_text(self, name: TemplateName, lang: LanguageTag) -> Template:
        """Load a plain text template (no autoescaping).

        Same resolution and caching as load_markup, with its own cache.
        """
        self._require_state()
        key = CacheKey(name, lang)
        return self._text_cache.get_or_load(
            key,
            lambda: self._compile_single(key, TemplateFlavor.TEXT),
            debug=self.debug,
        )

    def load_frame(self, name: TemplateName, lang: LanguageTag) -> Template:
        """Load a markup page composed with the shared frame templates.

        The frame set must exist in the default tier. Each frame is then
        resolved with the requested language's fallback chain, so
        translated frames are picked up when present.

        Args:
            name: Logical page name
            lang: Requested language tag

        Returns:
            Compiled unit whose default execution target is the page

        Raises:
            TemplateNotFoundError: If the frame set is incomplete or the page
                                   does not exist
            jinja2.TemplateSyntaxError: If the page or any frame does not compile
            UnicodeDecodeError: If the page or any frame is not valid UTF-8
        """
        self._require_state()
        if not self._frame_validator.ensure_frames_exist(self._root_path, self._frames):
            raise TemplateNotFoundError(name, lang)

        key = CacheKey(name, lang)
        return self._frame_cache.get_or_load(
            key,
            lambda: self._compile_frame(key),
            debug=self.debug,
        )

    def _resolve(self, name: TemplateName, lang: LanguageTag) -> Path | None:
        resolved = resolve_template(self._root_path, name, lang)
        if resolved is None:
            return None
        if resolved.tier is not FallbackTier.EXACT:
            logger.debug("Template '%s' for '%s' served from %s", name, lang, resolved.path)
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(
                        name=name,
                        requested_lang=lang,
                        tier=resolved.tier,
                        path=resolved.path,
                    )
                )
        return resolved.path

    def _compile_single(self, key: CacheKey, flavor: TemplateFlavor) -> Template:
        path = self._resolve(key.name, key.lang)
        if path is None:
            raise TemplateNotFoundError(key.name, key.lang)
        try:
            source = read_source(path)
        except FileNotFoundError as e:
            raise TemplateNotFoundError(key.name, key.lang) from e

        funcs = build_function_table(key.lang, self._functions, self._translator)
        logger.debug("Parsing %s template '%s' from %s", flavor, key, path)
        return parse(str(key), source, funcs, flavor=flavor)

    def _compile_frame(self, key: CacheKey) -> Template:
        page_path = self._resolve(key.name, key.lang)
        if page_path is None:
            raise TemplateNotFoundError(key.name, key.lang)

        paths = [page_path]
        for frame in self._frames:
            frame_path = resolve_template_path(self._root_path, frame, key.lang)
            if frame_path is None:
                logger.error("frame file %s disappeared after validation", frame)
                raise TemplateNotFoundError(key.name, key.lang)
            paths.append(frame_path)

        funcs = build_function_table(key.lang, self._functions, self._translator)
        logger.debug("Parsing frame template '%s' from %s", key, page_path)
        try:
            return parse_multi(str(key), paths, funcs, flavor=TemplateFlavor.FRAME)
        except FileNotFoundError as e:
            raise TemplateNotFoundError(key.name, key.lang) from e

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def _caches(self) -> dict[TemplateFlavor, TemplateCache]:
        self._require_state()
        return {
            TemplateFlavor.MARKUP: self._markup_cache,
            TemplateFlavor.FRAME: self._frame_cache,
            TemplateFlavor.TEXT: self._text_cache,
        }

    def clear_cache(self, flavor: TemplateFlavor | None = None) -> None:
        """Drop cached templates of one flavor, or of all flavors."""
        for cache_flavor, cache in self._caches().items():
            if flavor is None or flavor is cache_flavor:
                cache.clear()
        logger.debug("Template cache cleared (%s)", flavor or "all")

    def get_cache_stats(self) -> dict[str, dict[str, int]]:
        """Get statistics of every cache, keyed by flavor name."""
        return {str(flavor): cache.get_stats() for flavor, cache in self._caches().items()}

    def _require_state(self) -> TemplateEngine:
        if getattr(self, "_markup_cache", None) is None:
            msg = (
                f"{type(self).__name__} used without initialized state; "
                "call TemplateEngine.__init__"
            )
            raise InvalidEngineError(msg)
        return self


# ----------------------------------------------------------------------
# Process-wide default engine
# ----------------------------------------------------------------------

_default_engine: TemplateEngine | None = TemplateEngine()


def get_default_engine() -> TemplateEngine:
    """Return the process-wide default engine.

    Raises:
        InvalidEngineError: If the default engine was set to None
    """
    engine = _default_engine
    if engine is None:
        msg = "default template engine is not set"
        raise InvalidEngineError(msg)
    return engine


def set_default_engine(engine: TemplateEngine | None) -> TemplateEngine | None:
    """Replace the process-wide default engine.

    Returns:
        The previous default engine
    """
    global _default_engine  # noqa: PLW0603
    previous = _default_engine
    _default_engine = engine
    return previous


def load_markup(name: TemplateName, lang: LanguageTag) -> Template:
    """Load a markup template with the default engine."""
    return get_default_engine().load_markup(name, lang)


def load_frame(name: TemplateName, lang: LanguageTag) -> Template:
    """Load a frame-composed page with the default engine."""
    return get_default_engine().load_frame(name, lang)


def load_text(name: TemplateName, lang: LanguageTag) -> Template:
    """Load a text template with the default engine."""
    return get_default_engine().load_text(name, lang)


def set_root_path(root_path: str | os.PathLike[str]) -> None:
    """Set the default engine's root path."""
    get_default_engine().set_root_path(root_path)


def set_frames(frames: Iterable[str]) -> None:
    """Set the default engine's frame set."""
    get_default_engine().set_frames(frames)


def set_functions(
    functions: Mapping[str, Callable[..., Any]] | FunctionRegistry | None,
) -> None:
    """Set the default engine's function overrides."""
    get_default_engine().set_functions(functions)


def register_function(func: Callable[..., Any], *, name: str | None = None) -> None:
    """Add a function override to the default engine."""
    get_default_engine().register_function(func, name=name)
