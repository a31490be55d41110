"""UCSC Genome Browser REST API constants.

API docs: https://genome.ucsc.edu/goldenPath/help/api.html
"""

UCSC_API = "https://api.genome.ucsc.edu"
TRACK_URL = f"{UCSC_API}/getData/track"

DEFAULT_GENOME = "hg38"
DEFAULT_TRACK = "knownGene"

# Ensembl seq_region names that differ from UCSC beyond the "chr" prefix
_CHROM_ALIASES = {"MT": "M"}

SOURCE = "UCSC"


def ucsc_chrom(chromosome: str) -> str:
    """Convert an Ensembl chromosome name (``4``, ``X``, ``MT``) to UCSC style (``chr4``)."""
    if chromosome.startswith("chr"):
        return chromosome
    return "chr" + _CHROM_ALIASES.get(chromosome, chromosome)
