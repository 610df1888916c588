"""Error types for template loading.

Python 3.13+.
"""

from .errors import (
    InvalidEngineError,
    TemplateError,
    TemplateNotFoundError,
    TemplateSyntaxError,
)

__all__ = [
    "InvalidEngineError",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateSyntaxError",
]
