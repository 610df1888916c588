"""Template runtime package.

Provides compilation, caching, function tables, translation collaborators
and frame validation. Depends on the loading package for path resolution.

Python 3.13+.
"""

from .cache import CacheKey, TemplateCache
from .compiler import execute, parse, parse_multi
from .frames import FrameValidator
from .functions import FunctionRegistry, FunctionTable, build_function_table
from .translation import GettextTranslator, KeyTranslator, Translator

__all__ = [
    "CacheKey",
    "FrameValidator",
    "FunctionRegistry",
    "FunctionTable",
    "GettextTranslator",
    "KeyTranslator",
    "TemplateCache",
    "Translator",
    "build_function_table",
    "execute",
    "parse",
    "parse_multi",
]
