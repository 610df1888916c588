"""Tests for the localetemplates package entry point.

Covers:
- __all__ integrity: every exported name is accessible
- Fallback version when package metadata is unavailable
- Module-level convenience functions backed by the default engine
- Replacing and unsetting the default engine
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from importlib.metadata import PackageNotFoundError
from pathlib import Path
from typing import TypeAlias
from unittest.mock import MagicMock, patch

import pytest

import localetemplates
from localetemplates import (
    InvalidEngineError,
    TemplateEngine,
    TemplateNotFoundError,
    execute,
    get_default_engine,
    set_default_engine,
)
from localetemplates.constants import DEFAULT_FRAMES

WriteTemplate: TypeAlias = Callable[[str, str, str], Path]


@pytest.fixture
def default_engine(template_root: Path) -> Iterator[TemplateEngine]:
    """Install a fresh default engine over template_root; restore afterwards."""
    engine = TemplateEngine(template_root)
    previous = set_default_engine(engine)
    try:
        yield engine
    finally:
        set_default_engine(previous)


class TestInitModuleExports:
    """__all__ integrity."""

    def test_all_exports_are_accessible(self) -> None:
        """Every name in localetemplates.__all__ resolves without error."""
        for name in localetemplates.__all__:
            assert hasattr(localetemplates, name), (
                f"localetemplates.__all__ contains {name!r} but "
                f"localetemplates.{name} raises AttributeError"
            )

    def test_version_is_string(self) -> None:
        """__version__ is always populated."""
        assert isinstance(localetemplates.__version__, str)
        assert localetemplates.__version__


def test_package_not_found_error() -> None:
    """PackageNotFoundError during metadata lookup sets __version__ to the dev fallback."""
    saved_modules = {
        name: module
        for name, module in sys.modules.items()
        if name == "localetemplates" or name.startswith("localetemplates.")
    }

    try:
        for module_name in saved_modules:
            del sys.modules[module_name]

        mock_version = MagicMock(side_effect=PackageNotFoundError("localetemplates"))

        with patch("importlib.metadata.version", mock_version):
            import localetemplates as fresh

            assert fresh.__version__ == "0.0.0+dev"
    finally:
        for module_name in [
            name
            for name in sys.modules
            if name == "localetemplates" or name.startswith("localetemplates.")
        ]:
            del sys.modules[module_name]

        sys.modules.update(saved_modules)


class TestDefaultEngine:
    """Module-level functions delegate to the process-wide engine."""

    def test_default_engine_exists(self) -> None:
        """A default engine is available without construction."""
        assert isinstance(get_default_engine(), TemplateEngine)

    def test_load_markup(
        self, default_engine: TemplateEngine, write_template: WriteTemplate
    ) -> None:
        """load_markup uses the default engine and its cache."""
        write_template("default", "hello", "D")

        template = localetemplates.load_markup("hello", "fr-FR")

        assert execute(template) == "D"
        assert default_engine.load_markup("hello", "fr-FR") is template

    def test_load_text(self, default_engine: TemplateEngine, write_template: WriteTemplate) -> None:
        """load_text uses the default engine."""
        write_template("zh", "hello", "Z")

        assert execute(localetemplates.load_text("hello", "zh-TW")) == "Z"

    def test_load_frame(
        self, default_engine: TemplateEngine, write_template: WriteTemplate
    ) -> None:
        """load_frame uses the default engine."""
        for frame in DEFAULT_FRAMES:
            write_template("default", frame, frame)
        write_template("default", "_main", "F")
        write_template("default", "page", 'page->{% include "_main" %}')

        assert execute(localetemplates.load_frame("page", "en")) == "page->F"

    def test_not_found(self, default_engine: TemplateEngine) -> None:
        """The not-found sentinel surfaces through the module functions."""
        with pytest.raises(TemplateNotFoundError):
            localetemplates.load_markup("missing", "en-US")

    def test_configuration_setters(self, default_engine: TemplateEngine, tmp_path: Path) -> None:
        """Module-level setters configure the default engine."""
        localetemplates.set_root_path(tmp_path)
        localetemplates.set_frames(["_layout"])
        localetemplates.set_functions({"X": lambda: "OK"})
        localetemplates.register_function(lambda: "Y", name="Y")

        assert default_engine.root_path == str(tmp_path)
        assert default_engine.frames == ("_layout",)
        assert "X" in default_engine.functions
        assert "Y" in default_engine.functions

    def test_unset_default_engine(self) -> None:
        """With no default engine the module functions raise InvalidEngineError."""
        previous = set_default_engine(None)
        try:
            with pytest.raises(InvalidEngineError):
                localetemplates.load_markup("hello", "en")
            with pytest.raises(InvalidEngineError):
                localetemplates.set_root_path("x")
        finally:
            set_default_engine(previous)
