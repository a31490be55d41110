"""Paginated plain-text gene report.

Each joined record becomes one ``Label: value`` line per field. Long
exon start lists are split into fixed-width chunks, one ``Exon Starts:``
line per chunk. The text is then cut into pages of a fixed number of
lines, each with a header, separated by form feeds.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from gene_report.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gene_report.schemas import UnifiedRecord

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 100
DEFAULT_LINES_PER_PAGE = 60
REPORT_SUFFIX = "_gene_data.txt"
PAGE_BREAK = "\f"

#: Fields split across several lines when longer than the wrap width.
WRAPPED_LABELS = frozenset({"Exon Starts"})

# Header line plus the blank line under it
_HEADER_LINES = 2


def report_filename(gene_symbol: str) -> str:
    """``"ABC-G2"`` -> ``"ABCG2_gene_data.txt"``."""
    return re.sub(r"[^a-zA-Z0-9]", "", gene_symbol) + REPORT_SUFFIX


def wrap_value(value: str, width: int = DEFAULT_WIDTH) -> list[str]:
    """Split ``value`` into chunks of at most ``width`` characters."""
    if not value:
        return [value]
    return [value[i : i + width] for i in range(0, len(value), width)]


def record_lines(record: UnifiedRecord, width: int = DEFAULT_WIDTH) -> list[tuple[str, str]]:
    """``(label, text)`` pairs for one record, with wrapped fields expanded."""
    lines: list[tuple[str, str]] = []
    for label, text in record.display_fields():
        if label in WRAPPED_LABELS:
            lines.extend((label, chunk) for chunk in wrap_value(text, width))
        else:
            lines.append((label, text))
    return lines


def paginate(lines: list[str], lines_per_page: int, title: str) -> list[str]:
    """Group ``lines`` into pages, each starting with a ``title - Page n of N`` header."""
    body = max(lines_per_page - _HEADER_LINES, 1)
    chunks = [lines[i : i + body] for i in range(0, len(lines), body)] or [[]]
    total = len(chunks)
    return [
        "\n".join([f"{title} - Page {n} of {total}", "", *chunk]) + "\n"
        for n, chunk in enumerate(chunks, start=1)
    ]


def build_report_text(
    records: Iterable[UnifiedRecord],
    gene_symbol: str,
    width: int = DEFAULT_WIDTH,
    lines_per_page: int = DEFAULT_LINES_PER_PAGE,
) -> str:
    """Render joined records as paginated text."""
    body = render_template(
        "gene_report.txt.j2",
        records=[record_lines(r, width) for r in records],
    )
    pages = paginate(body.rstrip("\n").split("\n"), lines_per_page, f"Gene Report: {gene_symbol}")
    return PAGE_BREAK.join(pages)


def write_report(
    records: Iterable[UnifiedRecord],
    gene_symbol: str,
    output_dir: Path,
    width: int = DEFAULT_WIDTH,
    lines_per_page: int = DEFAULT_LINES_PER_PAGE,
) -> Path:
    """Write the report for ``gene_symbol`` into ``output_dir`` and return its path."""
    text = build_report_text(records, gene_symbol, width=width, lines_per_page=lines_per_page)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / report_filename(gene_symbol)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote report %s", path)
    return path
