"""Shared fixtures: canned NCBI / Ensembl / UCSC payloads and response builders."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

ESEARCH_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE eSearchResult PUBLIC "-//NLM//DTD esearch 20060628//EN" "https://eutils.ncbi.nlm.nih.gov/eutils/dtd/20060628/esearch.dtd">
<eSearchResult>
  <Count>1</Count>
  <RetMax>1</RetMax>
  <RetStart>0</RetStart>
  <IdList>
    <Id>9429</Id>
  </IdList>
  <TranslationSet/>
  <QueryTranslation>ABCG2[Gene Name] AND "Homo sapiens"[Organism]</QueryTranslation>
</eSearchResult>
"""

ESEARCH_EMPTY_XML = b"""<?xml version="1.0" encoding="UTF-8" ?>
<eSearchResult>
  <Count>0</Count>
  <RetMax>0</RetMax>
  <RetStart>0</RetStart>
  <IdList/>
</eSearchResult>
"""

EFETCH_XML = b"""<?xml version="1.0" ?>
<Entrezgene-Set>
  <Entrezgene>
    <Entrezgene_track-info>
      <Gene-track>
        <Gene-track_geneid>9429</Gene-track_geneid>
      </Gene-track>
    </Entrezgene_track-info>
    <Entrezgene_gene>
      <Gene-ref>
        <Gene-ref_locus>ABCG2</Gene-ref_locus>
        <Gene-ref_desc>ATP binding cassette subfamily G member 2 (JR blood group)</Gene-ref_desc>
      </Gene-ref>
    </Entrezgene_gene>
  </Entrezgene>
</Entrezgene-Set>
"""

EFETCH_NO_DESC_XML = b"""<?xml version="1.0" ?>
<Entrezgene-Set>
  <Entrezgene>
    <Entrezgene_gene>
      <Gene-ref>
        <Gene-ref_locus>ABCG2</Gene-ref_locus>
      </Gene-ref>
    </Entrezgene_gene>
  </Entrezgene>
</Entrezgene-Set>
"""

ENSEMBL_LOOKUP: dict[str, Any] = {
    "id": "ENSG00000118777",
    "display_name": "ABCG2",
    "species": "homo_sapiens",
    "assembly_name": "GRCh38",
    "biotype": "protein_coding",
    "seq_region_name": "4",
    "start": 88090150,
    "end": 88231628,
    "strand": -1,
}

UCSC_TRACK: dict[str, Any] = {
    "genome": "hg38",
    "track": "knownGene",
    "chrom": "chr4",
    "start": 88090150,
    "end": 88231628,
    "knownGene": [
        {
            "chrom": "chr4",
            "chromStart": 88090149,
            "chromEnd": 88231628,
            "name": "ENST00000650821.1",
            "geneName": "ABCG2-AS1",
            "geneType": "lncRNA",
            "blockCount": 1,
            "blockSizes": "500,",
            "chromStarts": "0,",
        },
        {
            "chrom": "chr4",
            "chromStart": 88090149,
            "chromEnd": 88231628,
            "name": "ENST00000237612.8",
            "geneName": "ABCG2",
            "geneType": "protein_coding",
            "blockCount": 3,
            "blockSizes": "10,20,30,",
            "chromStarts": "0,1000,2000,",
        },
        {
            "chrom": "chr4",
            "chromStart": 88090149,
            "chromEnd": 88200000,
            "name": "ENST00000515655.5",
            "geneName": "ABCG2",
            "geneType": "protein_coding",
            "blockCount": 2,
            "blockSizes": "40,50,",
            "chromStarts": "0,500,",
        },
    ],
}


def make_response(
    body: bytes | str | dict[str, Any] | list[Any], status: int = 200
) -> requests.Response:
    """Build a real ``requests.Response`` with the given body and status."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = "https://example.test/"
    if isinstance(body, bytes):
        resp._content = body
    elif isinstance(body, str):
        resp._content = body.encode()
    else:
        resp._content = json.dumps(body).encode()
    return resp


@pytest.fixture
def response() -> Any:
    """Factory fixture for ``requests.Response`` objects."""
    return make_response


@pytest.fixture
def session() -> MagicMock:
    """A stand-in ``requests.Session``; set ``session.get`` behaviour per test."""
    s = MagicMock(spec=requests.Session)
    s.__enter__.return_value = s
    return s
