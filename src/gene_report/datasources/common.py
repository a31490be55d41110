"""Failure handling shared by all datasource fetchers."""

from __future__ import annotations

import logging
from typing import Any
from xml.etree.ElementTree import ParseError

import requests

from gene_report.errors import SourceDataError
from gene_report.schemas import FetchOutcome, RecordT

#: Everything a fetcher converts into defaulted data. ``ValueError`` covers
#: JSON decoding and pydantic validation of partial records.
SOURCE_ERRORS: tuple[type[Exception], ...] = (
    requests.RequestException,
    SourceDataError,
    ParseError,
    ValueError,
)


def defaulted(
    source: str,
    record: RecordT,
    reason: Exception | str,
    logger: logging.Logger,
) -> FetchOutcome[RecordT]:
    """Log a warning for ``source`` and wrap the empty ``record`` as a defaulted outcome."""
    text = reason if isinstance(reason, str) else f"{type(reason).__name__}: {reason}"
    logger.warning("Error fetching %s data for %s: %s", source, record.gene_symbol, text)
    return FetchOutcome.defaulted(source, record, text)


def require(payload: dict[str, Any], key: str, source: str) -> Any:
    """Return ``payload[key]`` or raise ``SourceDataError`` naming the missing field."""
    value = payload.get(key)
    if value is None:
        msg = f"{source} response missing '{key}'"
        raise SourceDataError(msg)
    return value
