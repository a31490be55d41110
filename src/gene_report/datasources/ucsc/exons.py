"""Exon structure from the UCSC ``getData/track`` endpoint.

Queries the gene's Ensembl region and keeps the first transcript whose
``geneName`` equals the symbol exactly. When several isoforms match, the
first one returned wins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from gene_report.datasources.common import SOURCE_ERRORS, defaulted, require
from gene_report.datasources.ucsc.blocks import parse_blocks
from gene_report.datasources.ucsc.client import (
    DEFAULT_GENOME,
    DEFAULT_TRACK,
    SOURCE,
    TRACK_URL,
    ucsc_chrom,
)
from gene_report.errors import SourceDataError
from gene_report.schemas import CoordinateRecord, ExonRecord, FetchOutcome
from gene_report.services.http import get

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


def track_items(payload: dict[str, Any], track: str = DEFAULT_TRACK) -> list[dict[str, Any]]:
    """Return the transcript list stored under ``track`` in a getData response.

    Region queries return a list; whole-genome queries group items by
    chromosome, which is flattened in response order.
    """
    if not isinstance(payload, dict):
        msg = f"{SOURCE} returned {type(payload).__name__}, expected an object"
        raise SourceDataError(msg)
    items = require(payload, track, SOURCE)
    if isinstance(items, dict):
        return [item for group in items.values() if isinstance(group, list) for item in group]
    if not isinstance(items, list):
        msg = f"{SOURCE} '{track}' is {type(items).__name__}, expected a list"
        raise SourceDataError(msg)
    return items


def select_transcript(
    transcripts: list[dict[str, Any]], gene_symbol: str
) -> dict[str, Any] | None:
    """First transcript whose ``geneName`` is exactly ``gene_symbol`` (case-sensitive)."""
    for transcript in transcripts:
        if isinstance(transcript, dict) and transcript.get("geneName") == gene_symbol:
            return transcript
    return None


def parse_transcript(transcript: dict[str, Any], gene_symbol: str) -> ExonRecord:
    """Build an ``ExonRecord`` from one knownGene transcript.

    Raises:
        SourceDataError: if a field is missing, or the block lists are empty or
            disagree with ``blockCount``.
    """
    try:
        exon_count = int(require(transcript, "blockCount", SOURCE))
    except (TypeError, ValueError) as exc:
        msg = f"{SOURCE} blockCount is not an integer: {exc}"
        raise SourceDataError(msg) from exc

    blocks: dict[str, list[int]] = {}
    for key in ("blockSizes", "chromStarts"):
        values = parse_blocks(require(transcript, key, SOURCE))
        if not values or len(values) != exon_count:
            msg = f"{SOURCE} {key} has {len(values)} value(s), blockCount is {exon_count}"
            raise SourceDataError(msg)
        blocks[key] = values

    return ExonRecord(
        gene_symbol=gene_symbol,
        exon_count=exon_count,
        exon_sizes=blocks["blockSizes"],
        exon_starts=blocks["chromStarts"],
        gene_type=str(require(transcript, "geneType", SOURCE)),
    )


def parse_track(
    payload: dict[str, Any], gene_symbol: str, track: str = DEFAULT_TRACK
) -> ExonRecord | None:
    """Decode a track response; None when no transcript matches the symbol."""
    transcript = select_transcript(track_items(payload, track), gene_symbol)
    if transcript is None:
        return None
    return parse_transcript(transcript, gene_symbol)


def fetch_exons(
    session: requests.Session,
    coordinates: CoordinateRecord,
    genome: str = DEFAULT_GENOME,
    track: str = DEFAULT_TRACK,
) -> FetchOutcome[ExonRecord]:
    """
    Fetch exon count, sizes, starts and gene type for the gene's region.

    Unresolved coordinates short-circuit to defaults without a request. A
    region with no transcript for this symbol is defaulted, not an error.

    Args:
        session: HTTP session for this run.
        coordinates: Ensembl result for the gene (carries the symbol).
        genome: UCSC assembly name.
        track: UCSC track name.
    """
    gene_symbol = coordinates.gene_symbol
    empty = ExonRecord(gene_symbol=gene_symbol)
    if not coordinates.is_resolved:
        logger.info("Skipping %s query for %s: no coordinates", SOURCE, gene_symbol)
        return FetchOutcome.defaulted(SOURCE, empty, "No coordinates to query")

    params: dict[str, str | int] = {
        "genome": genome,
        "track": track,
        "chrom": ucsc_chrom(coordinates.chromosome or ""),
        "start": coordinates.start or 0,
        "end": coordinates.end or 0,
    }
    try:
        resp = get(session, TRACK_URL, params=params)
        record = parse_track(resp.json(), gene_symbol, track)
    except SOURCE_ERRORS as exc:
        return defaulted(SOURCE, empty, exc, logger)

    if record is None:
        return defaulted(
            SOURCE, empty, f"No {track} transcript named {gene_symbol} in region", logger
        )
    return FetchOutcome.populated(SOURCE, record)
