"""localetemplates - Language-aware template loading and caching.

Resolves a logical template name and a requested language tag to a template
file (exact language -> base language -> default), compiles it with Jinja2
and a per-language function table, and caches the result per
(name, language). Frame pages are composed with a shared set of frame
templates into one unit.

Public API:
    TemplateEngine - Engine instance with isolated caches and configuration
    load_markup - Load an autoescaping template with the default engine
    load_frame - Load a frame-composed page with the default engine
    load_text - Load a plain text template with the default engine
    execute - Render a loaded template (optionally a frame member)

Exceptions:
    TemplateError - Base exception class
    TemplateNotFoundError - No file in the fallback chain / incomplete frames
    TemplateSyntaxError - Template does not compile (from Jinja2)
    InvalidEngineError - Engine used without its internal state

Submodules:
    localetemplates.loading - Path resolution and fallback observability
    localetemplates.runtime - Caches, compiler, function tables, translators
    localetemplates.config - Debug toggle from the environment
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    InvalidEngineError,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)
from .engine import (
    TemplateEngine,
    get_default_engine,
    load_frame,
    load_markup,
    load_text,
    register_function,
    set_default_engine,
    set_frames,
    set_functions,
    set_root_path,
)
from .enums import TemplateFlavor
from .loading import FallbackInfo
from .runtime import FunctionRegistry, GettextTranslator, KeyTranslator, Translator, execute

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localetemplates")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FallbackInfo",
    "FunctionRegistry",
    "GettextTranslator",
    "InvalidEngineError",
    "KeyTranslator",
    "TemplateEngine",
    "TemplateError",
    "TemplateFlavor",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
    "Translator",
    "__version__",
    "execute",
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
