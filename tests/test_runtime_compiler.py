"""Tests for the Jinja2 compile/execute adapter."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, TemplateSyntaxError

from localetemplates.enums import TemplateFlavor
from localetemplates.runtime.compiler import execute, parse, parse_multi
from tests.strategies import write_template_file


class TestParse:
    """Single-source compilation."""

    def test_markup_flavor_escapes(self) -> None:
        """MARKUP autoescapes variables."""
        template = parse("t", "{{ value }}", {}, flavor=TemplateFlavor.MARKUP)

        assert execute(template, {"value": "<b>"}) == "&lt;b&gt;"

    def test_text_flavor_does_not_escape(self) -> None:
        """TEXT renders variables verbatim."""
        template = parse("t", "{{ value }}", {}, flavor=TemplateFlavor.TEXT)

        assert execute(template, {"value": "<b>"}) == "<b>"

    def test_functions_are_globals(self) -> None:
        """Function table entries are callable from the template."""
        template = parse("t", "{{ X() }}", {"X": lambda: "OK"})

        assert execute(template) == "OK"

    def test_trailing_newline_kept(self) -> None:
        """Output matches the file byte for byte, including the final newline."""
        assert execute(parse("t", "line\n", {})) == "line\n"

    def test_syntax_error_propagates(self) -> None:
        """Compile errors surface as jinja2.TemplateSyntaxError with the identifier."""
        with pytest.raises(TemplateSyntaxError) as excinfo:
            parse("broken-en", "{% if %}", {})

        assert excinfo.value.name == "broken-en"


class TestParseMulti:
    """Page plus frame members in one unit."""

    def test_page_includes_member_by_stem(self, tmp_path: Path) -> None:
        """{% include "_main" %} resolves to the _main member."""
        page = write_template_file(tmp_path, "default", "page", 'page->{% include "_main" %}')
        main = write_template_file(tmp_path, "default", "_main", "F")

        template = parse_multi("page-en", [page, main], {})

        assert execute(template) == "page->F"

    def test_member_reachable_by_file_name(self, tmp_path: Path) -> None:
        """Members are also registered under their file name."""
        page = write_template_file(tmp_path, "default", "page", '{% include "_main.tmpl" %}')
        main = write_template_file(tmp_path, "default", "_main", "F")

        assert execute(parse_multi("page-en", [page, main], {})) == "F"

    def test_page_extends_member(self, tmp_path: Path) -> None:
        """Frames can act as layouts through {% extends %}."""
        page = write_template_file(
            tmp_path, "default", "page", '{% extends "_main" %}{% block body %}P{% endblock %}'
        )
        main = write_template_file(tmp_path, "default", "_main", "[{% block body %}{% endblock %}]")

        assert execute(parse_multi("page-en", [page, main], {})) == "[P]"

    def test_execute_target_member(self, tmp_path: Path) -> None:
        """execute(target=...) renders a member instead of the page."""
        page = write_template_file(tmp_path, "default", "page", "P")
        header = write_template_file(tmp_path, "default", "_header_content", "H {{ who }}")

        template = parse_multi("page-en", [page, header], {})

        assert execute(template, {"who": "me"}, target="_header_content") == "H me"

    def test_execute_unknown_target(self, tmp_path: Path) -> None:
        """Unknown targets raise jinja2.TemplateNotFound."""
        page = write_template_file(tmp_path, "default", "page", "P")

        with pytest.raises(TemplateNotFound):
            execute(parse_multi("page-en", [page], {}), target="_nope")

    def test_members_compiled_eagerly(self, tmp_path: Path) -> None:
        """A syntax error in a member fails the parse, not a later render."""
        page = write_template_file(tmp_path, "default", "page", "P")
        broken = write_template_file(tmp_path, "default", "_footer_claim", "{% for %}")

        with pytest.raises(TemplateSyntaxError):
            parse_multi("page-en", [page, broken], {})

    def test_members_share_function_table(self, tmp_path: Path) -> None:
        """Included members see the same globals as the page."""
        page = write_template_file(tmp_path, "default", "page", '{% include "_main" %}')
        main = write_template_file(tmp_path, "default", "_main", "{{ X() }}")

        assert execute(parse_multi("page-en", [page, main], {"X": lambda: "OK"})) == "OK"

    def test_frame_flavor_escapes(self, tmp_path: Path) -> None:
        """FRAME units autoescape like MARKUP."""
        page = write_template_file(tmp_path, "default", "page", "{{ v }}")

        assert execute(parse_multi("page-en", [page], {}), {"v": "<i>"}) == "&lt;i&gt;"

    def test_requires_a_path(self) -> None:
        """An empty path list is a programming error."""
        with pytest.raises(ValueError, match="at least one path"):
            parse_multi("page-en", [], {})

    def test_vanished_file(self, tmp_path: Path) -> None:
        """A member deleted after resolution raises FileNotFoundError."""
        page = write_template_file(tmp_path, "default", "page", "P")

        with pytest.raises(FileNotFoundError):
            parse_multi("page-en", [page, tmp_path / "default" / "_gone.tmpl"], {})
