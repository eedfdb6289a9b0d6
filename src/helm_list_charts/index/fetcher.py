"""Retrieval of a repository index over HTTP."""

from __future__ import annotations

import logging

import httpx

from helm_list_charts.config import DEFAULT_TIMEOUT
from helm_list_charts.errors import FetchError
from helm_list_charts.index.parser import parse_index
from helm_list_charts.models import IndexFile

LOGGER = logging.getLogger(__name__)


def index_url(source: str) -> str:
    """Return the ``index.yaml`` URL for a repository base URL."""
    return f"{source.rstrip('/')}/index.yaml"


def download_index(source: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download the raw index text for ``source``."""
    url = index_url(source)
    LOGGER.debug("Fetching %s", url)
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(url, str(exc) or type(exc).__name__) from exc

    LOGGER.debug("Received %d bytes from %s", len(response.content), url)
    return response.text


def fetch_index(source: str, *, timeout: float = DEFAULT_TIMEOUT) -> IndexFile:
    """Download and parse the index published at ``source``."""
    return parse_index(download_index(source, timeout=timeout))
