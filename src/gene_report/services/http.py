"""
Shared HTTP client with a fixed timeout and no retries.

Provides a pre-configured ``requests.Session``: every request gets the
default timeout and is attempted exactly once. A timeout or non-success
status surfaces as a ``requests.RequestException`` that the datasource
fetchers turn into defaulted data.

Sessions are created per run and closed by the caller::

    from gene_report.services.http import create_session, get

    with create_session(timeout=10) as session:
        resp = get(session, "https://rest.ensembl.org/lookup/symbol/homo_sapiens/ABCG2")
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

#: One attempt per request; failures are reported, never retried.
NO_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = "gene-report/0.1"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with a single-attempt adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject the default timeout so fetchers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


def get(
    session: requests.Session,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    """GET ``url`` once and raise ``requests.HTTPError`` on a non-success status."""
    logger.debug("GET %s params=%s", url, params)
    resp = session.get(url, params=params, headers=headers)
    resp.raise_for_status()
    return resp
