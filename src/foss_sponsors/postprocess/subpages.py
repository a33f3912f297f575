"""Resolve sponsors listed as links to separate per-sponsor pages.

Some foundations list each sponsor as a relative link to a detail page
(e.g. drupal.org's /node/123); the sponsor's own site is linked from there.
"""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from foss_sponsors.fetcher import build_client, fetch_document
from foss_sponsors.models.report import ExtractionError, SponsorEntry, SponsorReport
from foss_sponsors.normalize import normalize_href

logger = logging.getLogger(__name__)


def is_absolute_url(entry: str) -> bool:
    return entry.lower().startswith("http")


def resolve_subpage(
    identifier: str,
    root: str,
    selector: str,
    client: httpx.Client,
    attr: str = "href",
) -> SponsorEntry:
    """
    Fetch root + identifier and return the normalized link found by selector.
    Keeps the identifier if nothing matches; returns an error entry on failure.
    """
    url = f"{root}{identifier}"
    try:
        html = fetch_document(url, client)
        node = BeautifulSoup(html, "html.parser", multi_valued_attributes=None).select_one(selector)
        if node is None:
            return identifier
        return normalize_href(node[attr])
    except Exception as e:
        logger.warning("Subpage lookup failed for %s: %s", url, e)
        return ExtractionError.from_exception("parse_subpages", f"...{identifier}", e)


def parse_subpages(
    report: SponsorReport,
    root: str,
    selector: str,
    *,
    attr: str = "href",
    client: Optional[httpx.Client] = None,
) -> SponsorReport:
    """Return a new report with relative sponsor ids replaced by their linked domains."""
    owns_client = client is None
    client = client or build_client()
    try:
        levels: dict[str, list[SponsorEntry]] = {}
        for level, entries in report.levels.items():
            resolved: list[SponsorEntry] = []
            for entry in entries:
                if not isinstance(entry, str) or is_absolute_url(entry):
                    resolved.append(entry)
                else:
                    resolved.append(resolve_subpage(entry, root, selector, client, attr))
            levels[level] = resolved
    finally:
        if owns_client:
            client.close()
    return report.model_copy(update={"levels": levels})
