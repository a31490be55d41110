"""Gene Report - gene metadata from NCBI, Ensembl and UCSC in one record.

Architecture::

    datasources/   External APIs (NCBI description, Ensembl coordinates, UCSC exons)
    store.py       SQLite record store (keyed upsert, keyed read, equality join)
    renderers/     Pure data -> text (paginated gene report)
    flows/         Prefect orchestration (fetch -> store -> join -> render)
    services/      Shared utilities (HTTP session with fixed timeout)

Data flow: symbol -> datasources -> store -> join -> renderers -> <SYMBOL>_gene_data.txt

Extension points - see each package's docstring:
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from gene_report.config import Settings
from gene_report.schemas import UnifiedRecord

__all__ = ["Settings", "UnifiedRecord", "__version__"]
