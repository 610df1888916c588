"""Template path resolution with language fallback.

Maps a logical template name and a requested language tag to the first
template file that exists on disk. Stateless: every call probes the
filesystem against the root directory it is given.

Fallback chain (first existing file wins):
    1. {root}/{lang}/{name}.tmpl       exact language tag
    2. {root}/{base}/{name}.tmpl       base language, only if lang has a region
    3. {root}/default/{name}.tmpl      language-independent default

Absence is a normal outcome and is reported as None, never as an exception.

Security:
    Candidates whose normalized path escapes the root directory are skipped,
    so a language tag like ".." or a name containing "../" cannot reach
    files outside the template tree. Symlinks are not followed by the check,
    so a tier directory that links elsewhere is served like any other.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from localetemplates.constants import DEFAULT_LANGUAGE_DIR, TEMPLATE_EXTENSION
from localetemplates.enums import FallbackTier
from localetemplates.loading.types import LanguageTag, TemplateName
from localetemplates.locale_utils import base_language

__all__ = [
    "FallbackInfo",
    "ResolvedTemplate",
    "describe_path",
    "resolve_template",
    "resolve_template_path",
    "template_candidates",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedTemplate:
    """A template file located by the fallback chain.

    Attributes:
        path: Path of the existing template file
        tier: Fallback tier that produced the path
    """

    path: Path
    tier: FallbackTier


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a language fallback event.

    Provided to the on_fallback callback when a template is served from the
    base language or default tier instead of the exact language requested.

    Attributes:
        name: Logical template name
        requested_lang: The language tag the caller asked for
        tier: Tier that actually contained the template
        path: Path of the file that was used

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.name} served from {info.tier} "
        ...           f"(requested {info.requested_lang})")
        >>> engine = TemplateEngine(on_fallback=log_fallback)
    """

    name: TemplateName
    requested_lang: LanguageTag
    tier: FallbackTier
    path: Path


def template_candidates(
    root: str | os.PathLike[str],
    name: TemplateName,
    lang: LanguageTag,
) -> list[tuple[FallbackTier, Path]]:
    """Build the ordered candidate list for a lookup.

    An empty language tag yields only the default candidate. A tag without
    a region separator skips the base tier because the exact tier already
    covered it.

    Args:
        root: Template root directory
        name: Logical template name
        lang: Requested language tag

    Returns:
        (tier, path) pairs in fallback order
    """
    root_path = Path(root)
    filename = f"{name}{TEMPLATE_EXTENSION}"
    candidates: list[tuple[FallbackTier, Path]] = []

    if lang:
        candidates.append((FallbackTier.EXACT, root_path / lang / filename))
        base = base_language(lang)
        if base:
            candidates.append((FallbackTier.BASE, root_path / base / filename))

    candidates.append((FallbackTier.DEFAULT, root_path / DEFAULT_LANGUAGE_DIR / filename))
    return candidates


def _is_within(base_dir: Path, full_path: Path) -> bool:
    """Check if full_path lies lexically inside base_dir.

    ".." segments are collapsed without touching the filesystem, so
    symlinked tiers inside the tree (root/default -> ../shared) still
    resolve while ".." in a tag or name cannot climb out of the root.
    """
    base = Path(os.path.normpath(os.path.abspath(base_dir)))
    full = Path(os.path.normpath(os.path.abspath(full_path)))
    return full.is_relative_to(base)


def resolve_template(
    root: str | os.PathLike[str],
    name: TemplateName,
    lang: LanguageTag,
) -> ResolvedTemplate | None:
    """Find the first existing template file in the fallback chain.

    Args:
        root: Template root directory
        name: Logical template name
        lang: Requested language tag

    Returns:
        ResolvedTemplate for the first existing file, or None if no tier exists
    """
    root_path = Path(root)
    for tier, candidate in template_candidates(root_path, name, lang):
        if not _is_within(root_path, candidate):
            logger.warning("Skipping template path outside root: %s", candidate)
            continue
        if candidate.is_file():
            return ResolvedTemplate(path=candidate, tier=tier)
    return None


def resolve_template_path(
    root: str | os.PathLike[str],
    name: TemplateName,
    lang: LanguageTag,
) -> Path | None:
    """Find the first existing template path in the fallback chain.

    Example:
        >>> resolve_template_path("resources/template", "hello", "zh-TW")
        PosixPath('resources/template/zh/hello.tmpl')
    """
    resolved = resolve_template(root, name, lang)
    return resolved.path if resolved else None


def describe_path(root: str | os.PathLike[str], name: TemplateName) -> str:
    """Return the default-tier path of a template for diagnostics."""
    return str(Path(root) / DEFAULT_LANGUAGE_DIR / f"{name}{TEMPLATE_EXTENSION}")
