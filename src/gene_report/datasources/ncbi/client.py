"""NCBI Entrez E-utilities constants.

API docs: https://www.ncbi.nlm.nih.gov/books/NBK25499/
"""

EUTILS_BASE = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
ESEARCH_URL = f"{EUTILS_BASE}/esearch.fcgi"
EFETCH_URL = f"{EUTILS_BASE}/efetch.fcgi"

DATABASE = "gene"

#: Element path from the efetch root (``Entrezgene-Set``) to the description text.
DESCRIPTION_PATH = "Entrezgene/Entrezgene_gene/Gene-ref/Gene-ref_desc"

SOURCE = "NCBI"
