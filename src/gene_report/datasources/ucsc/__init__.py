"""UCSC Genome Browser exon data source.

Public API:
  - exons: fetch_exons, parse_track, select_transcript
  - blocks: parse_blocks, format_blocks, normalize_blocks
  - client: API URL, default assembly/track, ucsc_chrom
"""

from gene_report.datasources.ucsc.blocks import format_blocks, normalize_blocks, parse_blocks
from gene_report.datasources.ucsc.client import TRACK_URL, ucsc_chrom
from gene_report.datasources.ucsc.exons import fetch_exons, parse_track, select_transcript

__all__ = [
    "TRACK_URL",
    "fetch_exons",
    "format_blocks",
    "normalize_blocks",
    "parse_blocks",
    "parse_track",
    "select_transcript",
    "ucsc_chrom",
]
