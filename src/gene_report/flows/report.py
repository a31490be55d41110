"""
Prefect flow for building one gene report.

Fetches the NCBI description, the Ensembl coordinates and the UCSC exon
structure in that order, stores each partial record as soon as it arrives,
then joins the three tables and writes the text report.

Run locally:
    python -m gene_report.flows.report ABCG2
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from gene_report.config import get_settings
from gene_report.datasources.ensembl import fetch_coordinates
from gene_report.datasources.ncbi import fetch_description
from gene_report.datasources.ucsc import fetch_exons
from gene_report.errors import EmptyJoinError, InvalidGeneSymbolError
from gene_report.renderers.report import write_report
from gene_report.schemas import (
    CoordinateRecord,
    DescriptionRecord,
    ExonRecord,
    FetchOutcome,
    UnifiedRecord,
    validate_gene_symbol,
)
from gene_report.services.http import create_session
from gene_report.store import GeneStore

# Tasks take the run's session and store as arguments, so input hashing is off.
# No retries: each source gets exactly one attempt.


@task(name="fetch-description", cache_policy=NO_CACHE)
def fetch_description_task(
    session: Any, gene_symbol: str, organism: str = "human"
) -> FetchOutcome[DescriptionRecord]:
    """Fetch the gene description from NCBI."""
    return fetch_description(session, gene_symbol, organism=organism)


@task(name="fetch-coordinates", cache_policy=NO_CACHE)
def fetch_coordinates_task(
    session: Any, gene_symbol: str, species: str = "homo_sapiens"
) -> FetchOutcome[CoordinateRecord]:
    """Fetch chromosome/start/end from Ensembl."""
    return fetch_coordinates(session, gene_symbol, species=species)


@task(name="fetch-exons", cache_policy=NO_CACHE)
def fetch_exons_task(
    session: Any,
    coordinates: CoordinateRecord,
    genome: str = "hg38",
    track: str = "knownGene",
) -> FetchOutcome[ExonRecord]:
    """Fetch exon structure from UCSC for the Ensembl region."""
    return fetch_exons(session, coordinates, genome=genome, track=track)


@task(name="save-description", cache_policy=NO_CACHE)
def save_description(store: GeneStore, record: DescriptionRecord) -> None:
    """Upsert the description row."""
    store.upsert_description(record)


@task(name="save-coordinates", cache_policy=NO_CACHE)
def save_coordinates(store: GeneStore, record: CoordinateRecord) -> None:
    """Upsert the coordinates row."""
    store.upsert_coordinates(record)


@task(name="save-exons", cache_policy=NO_CACHE)
def save_exons(store: GeneStore, record: ExonRecord) -> None:
    """Upsert the exons row."""
    store.upsert_exons(record)


@task(name="load-unified", cache_policy=NO_CACHE)
def load_unified(store: GeneStore, gene_symbol: str) -> list[UnifiedRecord]:
    """Read the joined record back; an empty join is fatal."""
    rows = store.read_unified(gene_symbol)
    if not rows:
        raise EmptyJoinError(gene_symbol)
    return rows


def _report_outcome(outcome: FetchOutcome[Any]) -> str:
    if outcome.ok:
        print(f"{outcome.source}: ok")
    else:
        symbol = outcome.record.gene_symbol
        print(f"Warning: {outcome.source} data unavailable for {symbol} ({outcome.reason})")
    return outcome.status.value


@flow(name="gene-report", log_prints=True)
def build_gene_report(
    gene_symbol: str,
    database_url: str | None = None,
    output_dir: str | None = None,
) -> dict[str, Any]:
    """
    Fetch, store, join and render the report for one gene.

    Per-source failures only produce warnings and ``N/A`` fields. An invalid
    symbol, an unreachable store or an empty join stop the run.

    Args:
        gene_symbol: Gene symbol such as ``ABCG2``; validated before anything else.
        database_url: SQLAlchemy URL (default: settings.database_url).
        output_dir: Report directory (default: settings.output_dir).

    Returns:
        Dict with the symbol, per-source status and the report path.
    """
    symbol = validate_gene_symbol(gene_symbol)
    settings = get_settings()
    results: dict[str, Any] = {"gene_symbol": symbol}

    with (
        GeneStore(database_url or settings.database_url) as store,
        create_session(timeout=settings.request_timeout) as session,
    ):
        # --- NCBI ---
        print(f"Fetching NCBI description for {symbol}...")
        description = fetch_description_task(session, symbol, organism=settings.ncbi_organism)
        save_description(store, description.record)
        results["ncbi"] = _report_outcome(description)

        # --- Ensembl ---
        print(f"Fetching Ensembl coordinates for {symbol}...")
        coordinates = fetch_coordinates_task(session, symbol, species=settings.ensembl_species)
        save_coordinates(store, coordinates.record)
        results["ensembl"] = _report_outcome(coordinates)

        # --- UCSC (needs the Ensembl region) ---
        print(f"Fetching UCSC exons for {symbol}...")
        exons = fetch_exons_task(
            session,
            coordinates.record,
            genome=settings.ucsc_genome,
            track=settings.ucsc_track,
        )
        save_exons(store, exons.record)
        results["ucsc"] = _report_outcome(exons)

        # --- Join + render ---
        rows = load_unified(store, symbol)

    report_path = write_report(
        rows,
        symbol,
        Path(output_dir) if output_dir else settings.output_dir,
        width=settings.report_width,
        lines_per_page=settings.lines_per_page,
    )
    print(f"Data has been exported to {report_path}.")
    results["report"] = str(report_path)
    return results


if __name__ == "__main__":
    # Reject bad input before a flow run is created
    try:
        symbol = validate_gene_symbol(sys.argv[1] if len(sys.argv) > 1 else "ABCG2")
    except InvalidGeneSymbolError as exc:
        sys.exit(f"Error: {exc}")
    result = build_gene_report(symbol)
    print(f"Flow complete: {result}")
