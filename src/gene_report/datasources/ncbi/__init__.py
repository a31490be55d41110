"""NCBI Entrez gene data source.

Public API:
  - description: parse_esearch_ids, parse_gene_description, fetch_description
  - client: E-utilities URLs and the description element path
"""

from gene_report.datasources.ncbi.client import EFETCH_URL, ESEARCH_URL
from gene_report.datasources.ncbi.description import (
    fetch_description,
    parse_esearch_ids,
    parse_gene_description,
    search_term,
)

__all__ = [
    "EFETCH_URL",
    "ESEARCH_URL",
    "fetch_description",
    "parse_esearch_ids",
    "parse_gene_description",
    "search_term",
]
