"""
Application settings.

Values come from ``GENE_REPORT_*`` environment variables or a local ``.env``
file, falling back to the defaults below.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the gene report pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="GENE_REPORT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "gene-report"
    app_env: str = "development"
    debug: bool = False
    log_level: str = Field(default="INFO", description="Logging level")

    # Storage / output
    database_url: str = Field(default="sqlite:///gene_data.db", description="SQLAlchemy URL")
    output_dir: Path = Field(default=Path("."), description="Directory for report files")

    # Remote sources
    request_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout (s)")
    ncbi_organism: str = "human"
    ensembl_species: str = "homo_sapiens"
    ucsc_genome: str = "hg38"
    ucsc_track: str = "knownGene"

    # Report layout
    report_width: int = Field(default=100, ge=10, description="Wrap width for long fields")
    lines_per_page: int = Field(default=60, ge=5, description="Lines per report page")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (parsed once)."""
    return Settings()
