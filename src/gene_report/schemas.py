"""
Domain models for gene report.

Pydantic models for the partial records each source produces, the tagged
outcome a fetcher returns, and the joined record the report is built from.
Services normalize API responses to these.

Missing values are ``None`` in the models and ``NULL`` in the store; they are
displayed as ``NOT_AVAILABLE``.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_validator

from gene_report.errors import InvalidGeneSymbolError

#: Placeholder shown for any value a source could not provide.
NOT_AVAILABLE = "N/A"

_SYMBOL_RE = re.compile(r"\w+")


def validate_gene_symbol(raw: str | None) -> str:
    """Strip surrounding whitespace and check the symbol is one or more word characters.

    Raises:
        InvalidGeneSymbolError: if the symbol is empty or contains anything else.
    """
    symbol = (raw or "").strip()
    if not _SYMBOL_RE.fullmatch(symbol):
        raise InvalidGeneSymbolError(raw or "")
    return symbol


def display(value: Any) -> str:
    """Render a stored value, substituting the placeholder for missing data."""
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


# =============================================================================
# Partial records (one per source)
# =============================================================================


class DescriptionRecord(BaseModel):
    """Gene description from NCBI Entrez."""

    gene_symbol: str
    description: str | None = None


class CoordinateRecord(BaseModel):
    """Genomic location from Ensembl. All three fields are set, or none are."""

    gene_symbol: str
    chromosome: str | None = None
    start: int | None = None
    end: int | None = None

    @model_validator(mode="after")
    def _all_or_nothing(self) -> CoordinateRecord:
        values = (self.chromosome, self.start, self.end)
        if any(v is None for v in values) and any(v is not None for v in values):
            msg = f"Partial coordinates for {self.gene_symbol}: {values}"
            raise ValueError(msg)
        return self

    @property
    def is_resolved(self) -> bool:
        """Whether a real location is known (gates the exon query)."""
        return self.chromosome is not None and self.chromosome != NOT_AVAILABLE


class ExonRecord(BaseModel):
    """Exon structure of the first matching UCSC transcript.

    ``exon_sizes`` and ``exon_starts`` are ordered integer lists here; they are
    only turned into comma-joined text when stored or rendered.
    """

    gene_symbol: str
    exon_count: int | None = None
    exon_sizes: list[int] | None = None
    exon_starts: list[int] | None = None
    gene_type: str | None = None

    @model_validator(mode="after")
    def _all_or_nothing(self) -> ExonRecord:
        values = (self.exon_count, self.exon_sizes, self.exon_starts, self.gene_type)
        if any(v is None for v in values) and any(v is not None for v in values):
            msg = f"Partial exon data for {self.gene_symbol}"
            raise ValueError(msg)
        return self


# =============================================================================
# Fetch outcomes
# =============================================================================


class FetchStatus(StrEnum):
    """Whether a fetcher produced real data or fell back to defaults."""

    POPULATED = "populated"
    DEFAULTED = "defaulted"


RecordT = TypeVar("RecordT", DescriptionRecord, CoordinateRecord, ExonRecord)


class FetchOutcome(BaseModel, Generic[RecordT]):
    """Tagged result of one source fetch.

    A defaulted outcome still carries a (fully empty) record so the caller can
    store it without branching on exceptions.
    """

    source: str
    status: FetchStatus
    record: RecordT
    reason: str | None = None

    @classmethod
    def populated(cls, source: str, record: RecordT) -> FetchOutcome[RecordT]:
        return cls(source=source, status=FetchStatus.POPULATED, record=record)

    @classmethod
    def defaulted(cls, source: str, record: RecordT, reason: str) -> FetchOutcome[RecordT]:
        return cls(source=source, status=FetchStatus.DEFAULTED, record=record, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status == FetchStatus.POPULATED


# =============================================================================
# Joined record
# =============================================================================


class UnifiedRecord(BaseModel):
    """One row of the description/coordinates/exons join, as read from the store.

    Exon block fields are already serialized (``"10,20,30"``) at this point.
    """

    gene_symbol: str
    description: str | None = None
    chromosome: str | None = None
    start: int | None = None
    end: int | None = None
    exon_count: int | None = None
    exon_sizes: str | None = None
    exon_starts: str | None = None
    gene_type: str | None = None

    def display_fields(self) -> list[tuple[str, str]]:
        """Return ``(label, text)`` pairs in report order, missing values shown as ``N/A``."""
        return [(label, display(getattr(self, name))) for name, label in REPORT_LABELS.items()]


#: Report labels in output order, keyed by ``UnifiedRecord`` field.
REPORT_LABELS: dict[str, str] = {
    "gene_symbol": "Gene Symbol",
    "description": "Description",
    "chromosome": "Chromosome",
    "start": "Start Position",
    "end": "End Position",
    "exon_count": "Exon Count",
    "exon_sizes": "Exon Sizes",
    "exon_starts": "Exon Starts",
    "gene_type": "Gene Type",
}
