"""Template function tables.

Every template is compiled with a function table: a plain mapping from the
name used inside the template to a Python callable. The table merges two
sources:

    - Built-in translation functions (translate, T) bound to the
      template's language
    - Caller-supplied overrides held in a FunctionRegistry

Overrides are applied last, so a caller can replace the built-ins. The
table is rebuilt on every load, never cached, so registry changes take
effect on the next template that is parsed.

Tables are flavor-neutral: the same callables serve markup and text
templates.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

from localetemplates.constants import TRANSLATE_ALIAS, TRANSLATE_FUNCTION

if TYPE_CHECKING:
    from localetemplates.loading.types import LanguageTag
    from localetemplates.runtime.translation import Translator

__all__ = ["FunctionRegistry", "FunctionTable", "build_function_table"]

logger = logging.getLogger(__name__)

FunctionTable: TypeAlias = dict[str, Callable[..., Any]]
"""Function name -> callable, as exposed to a compiled template."""


class FunctionRegistry:
    """Caller-supplied template functions.

    Supports dict-like introspection:
        - __iter__: Iterate over function names
        - __len__: Count registered functions
        - __contains__: Check if function exists (supports 'in' operator)

    Example:
        >>> registry = FunctionRegistry()
        >>> registry.register(str.upper, name="upper")
        >>> "upper" in registry
        True
        >>> len(registry)
        1
    """

    __slots__ = ("_functions",)

    def __init__(self, functions: Mapping[str, Callable[..., Any]] | None = None) -> None:
        """Initialize registry, optionally seeded with functions.

        Args:
            functions: Initial name -> callable mapping
        """
        self._functions: FunctionTable = dict(functions or {})

    def register(self, func: Callable[..., Any], *, name: str | None = None) -> None:
        """Register a function for template use.

        Args:
            func: Callable to expose
            name: Name used in templates (default: func.__name__)

        Raises:
            ValueError: If no name is given and func has no __name__
        """
        if name is None:
            name = getattr(func, "__name__", None)
            if not name:
                msg = "name is required for callables without __name__"
                raise ValueError(msg)
        self._functions[name] = func
        logger.debug("Registered template function: %s", name)

    def unregister(self, name: str) -> None:
        """Remove a function. Missing names are ignored."""
        self._functions.pop(name, None)

    def snapshot(self) -> FunctionTable:
        """Return a shallow copy of the registered functions."""
        return dict(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._functions))

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"FunctionRegistry({sorted(self._functions)!r})"


def build_function_table(
    lang: LanguageTag,
    overrides: Mapping[str, Callable[..., Any]] | FunctionRegistry,
    translator: Translator,
) -> FunctionTable:
    """Build the function table for one template compilation.

    Args:
        lang: Language the built-in translate function is bound to
        overrides: Caller functions applied on top of the built-ins
        translator: Translation service behind translate/T

    Returns:
        Fresh name -> callable mapping

    Example:
        >>> table = build_function_table("de", {}, KeyTranslator())
        >>> table["translate"]("Hello")
        'Hello'
    """

    def translate(key: str) -> str:
        return translator.translate(lang, key)

    table: FunctionTable = {
        TRANSLATE_FUNCTION: translate,
        TRANSLATE_ALIAS: translate,
    }
    if isinstance(overrides, FunctionRegistry):
        table.update(overrides.snapshot())
    else:
        table.update(overrides)
    return table
