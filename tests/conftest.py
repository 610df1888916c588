"""Pytest configuration for the localetemplates test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Shared fixtures build throwaway template trees under tmp_path laid out the
way the engine expects: <root>/<lang>/<name>.tmpl
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from localetemplates import TemplateEngine
from localetemplates.constants import DEBUG_ENV_VARS
from tests.strategies import write_template_file

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# TEMPLATE TREE FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_debug_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with the debug toggle unset."""
    for name in DEBUG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Empty template root: <tmp>/resources/template."""
    root = tmp_path / "resources" / "template"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def write_template(template_root: Path) -> Callable[[str, str, str], Path]:
    """Writer bound to template_root: write_template(lang, name, content)."""

    def _write(lang: str, name: str, content: str) -> Path:
        return write_template_file(template_root, lang, name, content)

    return _write


@pytest.fixture
def engine(template_root: Path) -> TemplateEngine:
    """Isolated engine over template_root that follows the environment toggle."""
    return TemplateEngine(template_root)
