"""Tests for the GeneStore record store."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import inspect, text

from gene_report.errors import StoreConnectionError
from gene_report.schemas import CoordinateRecord, DescriptionRecord, ExonRecord
from gene_report.store import GeneStore


def _store(tmp_path: Path) -> GeneStore:
    return GeneStore(f"sqlite:///{tmp_path / 'gene_data.db'}")


def _populate(store: GeneStore, symbol: str = "ABCG2") -> None:
    store.upsert_description(DescriptionRecord(gene_symbol=symbol, description="ATP binding"))
    store.upsert_coordinates(
        CoordinateRecord(gene_symbol=symbol, chromosome="4", start=88090150, end=88231628)
    )
    store.upsert_exons(
        ExonRecord(
            gene_symbol=symbol,
            exon_count=3,
            exon_sizes=[10, 20, 30],
            exon_starts=[0, 1000, 2000],
            gene_type="protein_coding",
        )
    )


class TestGeneStoreInit:
    """Schema creation and connection failures."""

    def test_creates_tables(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            tables = set(inspect(store.engine).get_table_names())
        assert tables == {"description", "coordinates", "exons"}

    def test_table_columns(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            insp = inspect(store.engine)
            columns = {t: [c["name"] for c in insp.get_columns(t)] for t in insp.get_table_names()}
            pks = {t: insp.get_pk_constraint(t)["constrained_columns"] for t in columns}
        assert columns["coordinates"] == ["gene_symbol", "chromosome", "start", "end"]
        assert columns["description"] == ["gene_symbol", "text"]
        assert columns["exons"] == [
            "gene_symbol",
            "exon_count",
            "exon_sizes",
            "exon_starts",
            "gene_type",
        ]
        assert all(pk == ["gene_symbol"] for pk in pks.values())

    def test_unreachable_database_raises(self, tmp_path: Path) -> None:
        with pytest.raises(StoreConnectionError):
            GeneStore(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'gene.db'}")

    def test_bad_url_raises(self) -> None:
        with pytest.raises(StoreConnectionError):
            GeneStore("not a database url")


class TestGeneStoreUpsert:
    """Insert-or-replace semantics."""

    def test_insert_and_read(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            _populate(store)
            row = store.read_row("exons", "ABCG2")
        assert row == {
            "gene_symbol": "ABCG2",
            "exon_count": 3,
            "exon_sizes": "10,20,30",
            "exon_starts": "0,1000,2000",
            "gene_type": "protein_coding",
        }

    def test_replace_overwrites(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            store.upsert_description(DescriptionRecord(gene_symbol="ABCG2", description="old"))
            store.upsert_description(DescriptionRecord(gene_symbol="ABCG2", description="new"))
            row = store.read_row("description", "ABCG2")
            with store.engine.connect() as conn:
                count = conn.execute(text("SELECT COUNT(*) FROM description")).scalar_one()
        assert row == {"gene_symbol": "ABCG2", "text": "new"}
        assert count == 1

    def test_replace_with_defaults_clears_values(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            _populate(store)
            store.upsert_coordinates(CoordinateRecord(gene_symbol="ABCG2"))
            row = store.read_row("coordinates", "ABCG2")
        assert row == {"gene_symbol": "ABCG2", "chromosome": "N/A", "start": "N/A", "end": "N/A"}

    def test_defaults_stored_as_sentinel(self, tmp_path: Path) -> None:
        """Defaulted fields hold the literal "N/A" in the database, never NULL."""
        with _store(tmp_path) as store:
            store.upsert_description(DescriptionRecord(gene_symbol="NOTAGENE"))
            store.upsert_coordinates(CoordinateRecord(gene_symbol="NOTAGENE"))
            store.upsert_exons(ExonRecord(gene_symbol="NOTAGENE"))
            assert store.read_row("description", "NOTAGENE") == {
                "gene_symbol": "NOTAGENE",
                "text": "N/A",
            }
            with store.engine.connect() as conn:
                coords = conn.execute(
                    text('SELECT chromosome, start, "end" FROM coordinates')
                ).one()
                exons = conn.execute(
                    text("SELECT exon_count, exon_sizes, exon_starts, gene_type FROM exons")
                ).one()
                nulls = conn.execute(
                    text("SELECT COUNT(*) FROM coordinates WHERE start IS NULL")
                ).scalar_one()
        assert tuple(coords) == ("N/A", "N/A", "N/A")
        assert tuple(exons) == ("N/A", "N/A", "N/A", "N/A")
        assert nulls == 0

    def test_upsert_is_idempotent(self, tmp_path: Path) -> None:
        query = text(
            "SELECT quote(gene_symbol), quote(exon_count), quote(exon_sizes),"
            " quote(exon_starts), quote(gene_type) FROM exons"
        )
        with _store(tmp_path) as store:
            _populate(store)
            with store.engine.connect() as conn:
                before = conn.execute(query).all()
            _populate(store)
            with store.engine.connect() as conn:
                after = conn.execute(query).all()
        assert before == after
        assert len(after) == 1

    def test_read_row_missing(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            assert store.read_row("coordinates", "NOPE") is None


class TestGeneStoreJoin:
    """Equality join across the three tables."""

    def test_join_returns_one_record(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            _populate(store)
            _populate(store, "TP53")
            rows = store.read_unified("ABCG2")
        assert len(rows) == 1
        record = rows[0]
        assert record.gene_symbol == "ABCG2"
        assert record.description == "ATP binding"
        assert record.chromosome == "4"
        assert record.start == 88090150
        assert record.end == 88231628
        assert record.exon_count == 3
        assert record.exon_sizes == "10,20,30"
        assert record.exon_starts == "0,1000,2000"
        assert record.gene_type == "protein_coding"

    def test_join_requires_all_three(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            store.upsert_description(DescriptionRecord(gene_symbol="ABCG2", description="x"))
            store.upsert_coordinates(CoordinateRecord(gene_symbol="ABCG2"))
            assert store.read_unified("ABCG2") == []

    def test_join_of_defaulted_rows(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            store.upsert_description(DescriptionRecord(gene_symbol="NOTAGENE"))
            store.upsert_coordinates(CoordinateRecord(gene_symbol="NOTAGENE"))
            store.upsert_exons(ExonRecord(gene_symbol="NOTAGENE"))
            rows = store.read_unified("NOTAGENE")
        assert len(rows) == 1
        assert rows[0].model_dump(exclude={"gene_symbol"}) == dict.fromkeys(
            [
                "description",
                "chromosome",
                "start",
                "end",
                "exon_count",
                "exon_sizes",
                "exon_starts",
                "gene_type",
            ]
        )

    def test_data_survives_reopen(self, tmp_path: Path) -> None:
        with _store(tmp_path) as store:
            _populate(store)
        with _store(tmp_path) as store:
            assert len(store.read_unified("ABCG2")) == 1
