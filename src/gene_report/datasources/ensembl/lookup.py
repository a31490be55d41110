"""Gene coordinates from the Ensembl symbol lookup endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from gene_report.datasources.common import SOURCE_ERRORS, defaulted, require
from gene_report.datasources.ensembl.client import JSON_HEADERS, LOOKUP_SYMBOL_URL, SOURCE
from gene_report.errors import SourceDataError
from gene_report.schemas import CoordinateRecord, FetchOutcome
from gene_report.services.http import get

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


def parse_lookup(payload: dict[str, Any], gene_symbol: str) -> CoordinateRecord:
    """
    Extract ``seq_region_name``, ``start`` and ``end`` from a lookup response.

    Raises:
        SourceDataError: if any of the three fields is missing or malformed.
    """
    if not isinstance(payload, dict):
        msg = f"{SOURCE} lookup returned {type(payload).__name__}, expected an object"
        raise SourceDataError(msg)

    chromosome = str(require(payload, "seq_region_name", SOURCE))
    try:
        start = int(require(payload, "start", SOURCE))
        end = int(require(payload, "end", SOURCE))
    except (TypeError, ValueError) as exc:
        msg = f"{SOURCE} coordinates are not integers: {exc}"
        raise SourceDataError(msg) from exc

    return CoordinateRecord(gene_symbol=gene_symbol, chromosome=chromosome, start=start, end=end)


def fetch_coordinates(
    session: requests.Session,
    gene_symbol: str,
    species: str = "homo_sapiens",
) -> FetchOutcome[CoordinateRecord]:
    """
    Look up where a gene sits on the genome.

    The chromosome/start/end triple is defaulted as a unit on any failure.

    Args:
        session: HTTP session for this run.
        gene_symbol: Validated gene symbol.
        species: Ensembl species name or alias.
    """
    url = LOOKUP_SYMBOL_URL.format(species=species, symbol=gene_symbol)
    try:
        resp = get(session, url, headers=JSON_HEADERS)
        record = parse_lookup(resp.json(), gene_symbol)
    except SOURCE_ERRORS as exc:
        return defaulted(SOURCE, CoordinateRecord(gene_symbol=gene_symbol), exc, logger)
    return FetchOutcome.populated(SOURCE, record)
