"""Template file lookup.

Submodules:
    types    - PEP 695 type aliases (TemplateName, LanguageTag, TemplateSource)
    resolver - Language fallback resolution, ResolvedTemplate, FallbackInfo

Python 3.13+. Zero external dependencies.
"""

from localetemplates.enums import FallbackTier
from localetemplates.loading.resolver import (
    FallbackInfo,
    ResolvedTemplate,
    describe_path,
    resolve_template,
    resolve_template_path,
    template_candidates,
)
from localetemplates.loading.types import LanguageTag, TemplateName, TemplateSource

__all__ = [
    "FallbackInfo",
    "FallbackTier",
    "LanguageTag",
    "ResolvedTemplate",
    "TemplateName",
    "TemplateSource",
    "describe_path",
    "resolve_template",
    "resolve_template_path",
    "template_candidates",
]
