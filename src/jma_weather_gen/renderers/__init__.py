"""Pure rendering functions: domain models -> text documents.

All renderers follow the same pattern:
  - Input: list of models (from analysis/)
  - Output: str (the full document)
  - No side effects, no I/O, no Prefect decorators

Used by flows/generate.py which orchestrates the pipeline.

Public API:
  - ical: render_calendar, escape_text
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers.  Output is iCalendar, not
# HTML, so values are escaped by the renderer rather than by Jinja.
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
