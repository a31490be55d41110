"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs and constants
    └── {feature}.py      # parse_* (pure decoders) and fetch_* (network + defaulting)

Every ``fetch_*`` function takes an explicit ``requests.Session`` and returns
a ``FetchOutcome``: populated, or defaulted with a reason. Nothing raises past
a fetcher; see ``common.SOURCE_ERRORS`` for what is caught.

Sources, in pipeline order:
  - ncbi:    gene description (Entrez esearch + efetch, XML)
  - ensembl: chromosome / start / end (REST lookup, JSON)
  - ucsc:    exon structure for the Ensembl region (getData/track, JSON)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with the files above.

2. Write a pure ``parse_*`` function that raises ``SourceDataError`` on bad
   payloads, and a ``fetch_*`` wrapper::

       from gene_report.services.http import get

       def fetch_something(session, symbol) -> FetchOutcome[SomeRecord]:
           try:
               resp = get(session, API_URL, params={...})
               record = parse_something(resp.json(), symbol)
           except SOURCE_ERRORS as exc:
               return defaulted(SOURCE, SomeRecord(gene_symbol=symbol), exc, logger)
           return FetchOutcome.populated(SOURCE, record)

3. Add a table and an ``upsert_*`` method in ``store.py``.

4. Wire into ``flows/report.py``: a ``@task`` for the fetch and a call in
   ``build_gene_report()`` followed by the upsert.

5. Add tests in ``tests/test_{name}.py``.
"""
