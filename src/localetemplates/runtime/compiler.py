"""Jinja2 adapter: compile and execute template sources.

Two flavors share one code path and differ only in autoescaping:
    - MARKUP / FRAME: autoescape=True (HTML/XML output)
    - TEXT: autoescape=False

Every compilation gets its own Environment so each template carries exactly
the function table it was built with (the translate function is bound to a
language). Sources are read once and held in a DictLoader, which makes the
compiled unit an immutable snapshot of the files at load time.

Frame-composed units register every member file under its logical name (the
file stem, plus the full file name as an alias), so the page can write
{% include "_main" %} or {% extends "_main" %}. The page itself is the
default execution target.

Parse errors (jinja2.TemplateSyntaxError) propagate unchanged.

Python 3.13+. Uses Jinja2 as the template engine.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, Template

from localetemplates.constants import TEMPLATE_ENCODING
from localetemplates.enums import TemplateFlavor
from localetemplates.loading.types import TemplateSource
from localetemplates.runtime.functions import FunctionTable

__all__ = ["execute", "parse", "parse_multi", "read_source"]

logger = logging.getLogger(__name__)


def read_source(path: Path) -> TemplateSource:
    """Read a template file.

    Raises:
        FileNotFoundError: If the file vanished after resolution
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    return path.read_text(encoding=TEMPLATE_ENCODING)


def _make_environment(
    flavor: TemplateFlavor,
    sources: Mapping[str, TemplateSource],
    funcs: FunctionTable,
) -> Environment:
    env = Environment(
        loader=DictLoader(dict(sources)),
        autoescape=flavor is not TemplateFlavor.TEXT,
        keep_trailing_newline=True,
        auto_reload=False,
    )
    env.globals.update(funcs)
    return env


def parse(
    identifier: str,
    source: TemplateSource,
    funcs: FunctionTable,
    *,
    flavor: TemplateFlavor = TemplateFlavor.MARKUP,
) -> Template:
    """Compile a single template source.

    Args:
        identifier: Template name used in error messages
        source: Template source text
        funcs: Function table exposed as template globals
        flavor: MARKUP (autoescaping) or TEXT

    Returns:
        Compiled jinja2 Template

    Raises:
        jinja2.TemplateSyntaxError: If the source does not compile
    """
    env = _make_environment(flavor, {identifier: source}, funcs)
    return env.get_template(identifier)


def parse_multi(
    identifier: str,
    paths: Sequence[Path],
    funcs: FunctionTable,
    *,
    flavor: TemplateFlavor = TemplateFlavor.FRAME,
) -> Template:
    """Compile several files into one unit whose default target is the first.

    The first path is the page and is registered under identifier. Every
    other path is registered under its stem ("_main") and its file name
    ("_main.tmpl"). All members are compiled eagerly so a syntax error in
    any of them fails the load, not a later render.

    Args:
        identifier: Name of the page within the unit
        paths: Page path followed by the member paths
        funcs: Function table exposed as template globals
        flavor: Escaping flavor (default: FRAME, autoescaping)

    Returns:
        Compiled page Template; its environment holds the members

    Raises:
        ValueError: If paths is empty
        FileNotFoundError: If a file vanished after resolution
        UnicodeDecodeError: If a file is not valid UTF-8
        jinja2.TemplateSyntaxError: If any member does not compile
    """
    if not paths:
        msg = "parse_multi requires at least one path"
        raise ValueError(msg)

    page_path, *member_paths = paths
    sources: dict[str, TemplateSource] = {identifier: read_source(page_path)}
    for member_path in member_paths:
        member_source = read_source(member_path)
        sources.setdefault(member_path.stem, member_source)
        sources.setdefault(member_path.name, member_source)

    env = _make_environment(flavor, sources, funcs)
    for member in sources:
        env.get_template(member)
    logger.debug("Compiled %d files into '%s'", len(paths), identifier)
    return env.get_template(identifier)


def execute(
    template: Template,
    data: Mapping[str, Any] | None = None,
    *,
    target: str | None = None,
) -> str:
    """Render a compiled template.

    Args:
        template: Template returned by a load call
        data: Render context
        target: Member of a frame-composed unit to render instead of the page

    Returns:
        Rendered output

    Raises:
        jinja2.TemplateNotFound: If target is not a member of the unit
        jinja2.TemplateError: If rendering fails
    """
    context = dict(data or {})
    if target is None:
        return template.render(context)
    return template.environment.get_template(target).render(context)
