"""Template loading exception hierarchy.

Parse and render errors belong to the template engine and propagate
unchanged as jinja2 exceptions. This module only defines the conditions
owned by the loading layer itself.

Python 3.13+.
"""

from jinja2 import TemplateSyntaxError

__all__ = [
    "InvalidEngineError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
]


class TemplateError(Exception):
    """Base exception for all localetemplates errors."""


class TemplateNotFoundError(TemplateError, LookupError):
    """No template file exists anywhere in the fallback chain.

    Also raised by frame loads when the shared frame set is incomplete.
    This is an expected, recoverable condition: callers typically render
    something else or skip the section.

    Attributes:
        name: Logical template name that was requested
        lang: Language tag that was requested
    """

    def __init__(self, name: str = "", lang: str = "") -> None:
        """Initialize TemplateNotFoundError.

        Args:
            name: Logical template name
            lang: Requested language tag
        """
        self.name = name
        self.lang = lang
        if name:
            super().__init__(f"template file not found: {name!r} (lang={lang!r})")
        else:
            super().__init__("template file not found")


class InvalidEngineError(TemplateError, RuntimeError):
    """Engine used without its internal state.

    Signals a programming error: a subclass that skipped
    TemplateEngine.__init__, or a default engine replaced with None.
    """
