"""Record store for per-source gene data.

Three tables share ``gene_symbol`` as their primary key:
  - description: NCBI description text
  - coordinates: Ensembl chromosome / start / end
  - exons:       UCSC exon count, sizes, starts, gene type

Each run replaces the row for its symbol in every table (insert-or-replace),
then reads the three back through an equality join. Missing values are
stored as the ``"N/A"`` sentinel in every column, INTEGER ones included
(SQLite keeps the text as-is), and come back as ``None`` from the join.
Exon block lists are stored as comma-joined text.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import Column, Integer, Text, create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session

from gene_report.datasources.ucsc.blocks import format_blocks
from gene_report.errors import StoreConnectionError
from gene_report.schemas import (
    NOT_AVAILABLE,
    CoordinateRecord,
    DescriptionRecord,
    ExonRecord,
    UnifiedRecord,
)

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _stored(value: Any) -> Any:
    return NOT_AVAILABLE if value is None else value


def _loaded(value: Any) -> Any:
    return None if value == NOT_AVAILABLE else value


class Base(DeclarativeBase):
    pass


class DescriptionRow(Base):
    __tablename__ = "description"

    gene_symbol = Column(Text, primary_key=True)
    text = Column(Text)


class CoordinateRow(Base):
    __tablename__ = "coordinates"

    gene_symbol = Column(Text, primary_key=True)
    chromosome = Column(Text)
    start = Column(Integer)
    end = Column(Integer)


class ExonRow(Base):
    __tablename__ = "exons"

    gene_symbol = Column(Text, primary_key=True)
    exon_count = Column(Integer)
    exon_sizes = Column(Text)
    exon_starts = Column(Text)
    gene_type = Column(Text)


class GeneStore:
    """Keyed upsert/read over the three partial-record tables.

    Usable as a context manager; the engine is disposed on exit.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        try:
            self.engine: Engine = create_engine(url)
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            msg = f"Failed to connect to database {url}: {exc}"
            raise StoreConnectionError(msg) from exc

    def __enter__(self) -> GeneStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.engine.dispose()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _upsert(self, row: Base) -> None:
        # merge() issues an UPDATE when the primary key exists, INSERT otherwise
        with Session(self.engine) as session:
            session.merge(row)
            session.commit()

    def upsert_description(self, record: DescriptionRecord) -> None:
        self._upsert(
            DescriptionRow(gene_symbol=record.gene_symbol, text=_stored(record.description))
        )

    def upsert_coordinates(self, record: CoordinateRecord) -> None:
        self._upsert(
            CoordinateRow(
                gene_symbol=record.gene_symbol,
                chromosome=_stored(record.chromosome),
                start=_stored(record.start),
                end=_stored(record.end),
            )
        )

    def upsert_exons(self, record: ExonRecord) -> None:
        self._upsert(
            ExonRow(
                gene_symbol=record.gene_symbol,
                exon_count=_stored(record.exon_count),
                exon_sizes=_stored(format_blocks(record.exon_sizes)),
                exon_starts=_stored(format_blocks(record.exon_starts)),
                gene_type=_stored(record.gene_type),
            )
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def read_row(self, table: str, gene_symbol: str) -> dict[str, Any] | None:
        """Keyed read of one table; returns the row as stored (sentinels included) or None."""
        model = _MODELS[table]
        with Session(self.engine) as session:
            row = session.get(model, gene_symbol)
            if row is None:
                return None
            return {col.name: getattr(row, col.key) for col in model.__table__.columns}

    def read_unified(self, gene_symbol: str) -> list[UnifiedRecord]:
        """Equality-join description, coordinates and exons on ``gene_symbol``."""
        stmt = (
            select(
                DescriptionRow.gene_symbol,
                DescriptionRow.text.label("description"),
                CoordinateRow.chromosome,
                CoordinateRow.start,
                CoordinateRow.end,
                ExonRow.exon_count,
                ExonRow.exon_sizes,
                ExonRow.exon_starts,
                ExonRow.gene_type,
            )
            .join(CoordinateRow, CoordinateRow.gene_symbol == DescriptionRow.gene_symbol)
            .join(ExonRow, ExonRow.gene_symbol == DescriptionRow.gene_symbol)
            .where(DescriptionRow.gene_symbol == gene_symbol)
        )
        with Session(self.engine) as session:
            rows = session.execute(stmt).mappings().all()
        logger.debug("Joined %d row(s) for %s", len(rows), gene_symbol)
        return [UnifiedRecord(**{k: _loaded(v) for k, v in row.items()}) for row in rows]


_MODELS: dict[str, type[Base]] = {
    "description": DescriptionRow,
    "coordinates": CoordinateRow,
    "exons": ExonRow,
}
