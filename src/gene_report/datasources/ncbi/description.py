"""Gene description from NCBI Entrez (esearch -> efetch, XML)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from gene_report.datasources.common import SOURCE_ERRORS, defaulted
from gene_report.datasources.ncbi.client import (
    DATABASE,
    DESCRIPTION_PATH,
    EFETCH_URL,
    ESEARCH_URL,
    SOURCE,
)
from gene_report.errors import SourceDataError
from gene_report.schemas import DescriptionRecord, FetchOutcome
from gene_report.services.http import get

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


def search_term(gene_symbol: str, organism: str = "human") -> str:
    """Entrez query restricting the gene name and organism."""
    return f"{gene_symbol}[Gene Name] AND {organism}[Organism]"


def parse_esearch_ids(xml_text: str | bytes) -> list[str]:
    """Return the gene IDs from an esearch ``eSearchResult`` document, in order."""
    root = ET.fromstring(xml_text)
    if root.tag != "eSearchResult":
        msg = f"unexpected esearch root element <{root.tag}>"
        raise SourceDataError(msg)
    return [el.text.strip() for el in root.iterfind("IdList/Id") if el.text and el.text.strip()]


def parse_gene_description(xml_text: str | bytes) -> str | None:
    """Return ``Gene-ref_desc`` from an efetch ``Entrezgene-Set`` document, or None."""
    root = ET.fromstring(xml_text)
    node = root.find(DESCRIPTION_PATH)
    if node is None or node.text is None or not node.text.strip():
        return None
    return node.text.strip()


def fetch_description(
    session: requests.Session,
    gene_symbol: str,
    organism: str = "human",
) -> FetchOutcome[DescriptionRecord]:
    """
    Look up a human gene's description.

    Two round-trips: esearch to resolve the gene ID, efetch for the record.
    Any failure (network, status, XML, missing ID or field) yields a
    defaulted outcome instead of raising.

    Args:
        session: HTTP session for this run.
        gene_symbol: Validated gene symbol.
        organism: Entrez organism filter.
    """
    empty = DescriptionRecord(gene_symbol=gene_symbol)
    try:
        resp = get(
            session,
            ESEARCH_URL,
            params={"db": DATABASE, "term": search_term(gene_symbol, organism), "retmode": "xml"},
        )
        ids = parse_esearch_ids(resp.content)
        if not ids:
            return defaulted(SOURCE, empty, f"No gene ID found for {gene_symbol}", logger)

        resp = get(session, EFETCH_URL, params={"db": DATABASE, "id": ids[0], "retmode": "xml"})
        description = parse_gene_description(resp.content)
    except SOURCE_ERRORS as exc:
        return defaulted(SOURCE, empty, exc, logger)

    if description is None:
        return defaulted(SOURCE, empty, f"No description in gene record {ids[0]}", logger)
    return FetchOutcome.populated(
        SOURCE, DescriptionRecord(gene_symbol=gene_symbol, description=description)
    )
