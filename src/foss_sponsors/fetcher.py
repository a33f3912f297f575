"""Fetch source documents from the web or from local files."""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlsplit

import httpx

from foss_sponsors import config

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": config.USER_AGENT,
    "Accept": "text/html, application/xhtml+xml, application/yaml, text/plain, */*",
}


def build_client(timeout: Optional[float] = None) -> httpx.Client:
    """Create the HTTP client shared by all fetches of a run."""
    return httpx.Client(
        timeout=config.HTTP_TIMEOUT if timeout is None else timeout,
        follow_redirects=True,
        headers=DEFAULT_HEADERS,
    )


def _local_path(url: str) -> Optional[Path]:
    """
    Return the filesystem path for file:// URLs and bare paths, else None.
    file://fixture.html is read relative to the working directory.
    """
    parts = urlsplit(url)
    if parts.scheme == "file":
        return Path(unquote(parts.netloc + parts.path))
    if not parts.scheme:
        return Path(url)
    return None


def fetch_document(url: str, client: Optional[httpx.Client] = None) -> str:
    """
    Return the text of the document at url.
    Raises httpx.HTTPError or OSError on failure; callers decide how to record it.
    """
    path = _local_path(url)
    if path is not None:
        logger.debug("Reading %s from disk", path)
        return path.read_text(encoding="utf-8")

    owns_client = client is None
    client = client or build_client()
    try:
        logger.debug("GET %s", url)
        resp = client.get(url)
        resp.raise_for_status()
        return resp.text
    finally:
        if owns_client:
            client.close()
