"""Ensembl REST API constants.

API docs: https://rest.ensembl.org/documentation/info/symbol_lookup
"""

ENSEMBL_REST = "https://rest.ensembl.org"
LOOKUP_SYMBOL_URL = f"{ENSEMBL_REST}/lookup/symbol/{{species}}/{{symbol}}"

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

SOURCE = "Ensembl"
