"""Pure rendering functions: structured data -> report text.

Renderers follow the same pattern:
  - Input: ``UnifiedRecord`` rows (from the store join)
  - Output: str
  - No network, no Prefect decorators; ``write_report`` is the only
    function that touches the filesystem

Used by flows/report.py, which orchestrates the pipeline.

Public API:
  - report: build_report_text, paginate, wrap_value, report_filename, write_report
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=jinja2.select_autoescape(["html", "htm", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
