"""Render the Go test template.

Takes a TestRenderContext from context_builder and produces the text of a
_test.go file. Writing it to disk is left to railgen.files.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

import jinja2

from .errors import RenderError
from .models import TestRenderContext

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "go_test.go.j2"


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )


def render(context: TestRenderContext, template_name: str = TEMPLATE_NAME) -> str:
    """Render the test template for one operation."""
    try:
        template = _environment().get_template(template_name)
        return template.render(**asdict(context))
    except jinja2.TemplateError as exc:
        raise RenderError(f"cannot render template {template_name}: {exc}") from exc
