"""Ensembl gene coordinate data source.

Public API:
  - lookup: parse_lookup, fetch_coordinates
  - client: REST URLs and headers
"""

from gene_report.datasources.ensembl.client import LOOKUP_SYMBOL_URL
from gene_report.datasources.ensembl.lookup import fetch_coordinates, parse_lookup

__all__ = ["LOOKUP_SYMBOL_URL", "fetch_coordinates", "parse_lookup"]
