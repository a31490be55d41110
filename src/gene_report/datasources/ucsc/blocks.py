"""Exon block field normalization.

UCSC returns ``blockSizes`` / ``chromStarts`` either as a comma-delimited
string with a trailing comma (``"10,20,30,"``) or as a list of integers.
Both shapes are parsed into the same ``list[int]``; text is produced only
when storing or rendering.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from gene_report.errors import SourceDataError


def parse_blocks(value: str | Sequence[int | str]) -> list[int]:
    """
    Parse a block field into an ordered list of integers.

    >>> parse_blocks("10,20,30,")
    [10, 20, 30]
    >>> parse_blocks([10, 20, 30])
    [10, 20, 30]
    """
    if isinstance(value, str):
        items: Iterable[int | str] = (part for part in value.split(",") if part.strip())
    elif isinstance(value, Sequence):
        items = value
    else:
        msg = f"block field must be a string or list, got {type(value).__name__}"
        raise SourceDataError(msg)

    try:
        return [int(str(item).strip()) for item in items]
    except ValueError as exc:
        msg = f"non-integer block value in {value!r}"
        raise SourceDataError(msg) from exc


def format_blocks(values: Iterable[int] | None) -> str | None:
    """Join block values with commas, no trailing delimiter. ``None`` stays ``None``."""
    if values is None:
        return None
    return ",".join(str(v) for v in values)


def normalize_blocks(value: str | Sequence[int | str]) -> str:
    """Canonical text form of either input shape: ``"10,20,30,"`` -> ``"10,20,30"``."""
    return format_blocks(parse_blocks(value)) or ""
