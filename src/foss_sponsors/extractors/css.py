"""Scrape HTML sponsor listings defined by per-level CSS selectors."""

import logging

from bs4 import BeautifulSoup

from foss_sponsors.extractors.base import BaseExtractor
from foss_sponsors.models.levels import SponsorLevel
from foss_sponsors.models.report import ExtractionError, SponsorEntry, SponsorReport
from foss_sponsors.models.sponsorship import CssSource, LevelSpec
from foss_sponsors.normalize import normalize_href

logger = logging.getLogger(__name__)


def _scrape_level(body, spec: LevelSpec, normalize: bool, into: list[SponsorEntry]) -> None:
    """Append attribute values of every node matching spec.selector, in document order."""
    for node in body.select(spec.selector):
        value = node[spec.attr]
        if spec.attr == "href" and normalize:
            value = normalize_href(value)
        into.append(value)


def scrape_by_css(html: str, source: CssSource) -> SponsorReport:
    """
    Scrape each configured level independently.
    A failing level keeps what it read so far plus one error entry; other levels are unaffected.
    """
    soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
    body = soup.body or soup
    report = SponsorReport()
    for level, spec in source.levels.items():
        key = SponsorLevel(level).value
        entries: list[SponsorEntry] = []
        report.levels[key] = entries
        try:
            if not spec.selector:
                raise ValueError(f"no selector configured for level {key}")
            _scrape_level(body, spec, source.normalize, entries)
        except Exception as e:
            logger.warning("CSS scrape failed for level %s: %s", key, e)
            entries.append(ExtractionError.from_exception("scrape_by_css", f"...{key}", e))
    return report


class CssExtractor(BaseExtractor):
    """Extractor for HTML pages scraped with CSS selectors."""

    kind = "css"

    def __init__(self, source: CssSource):
        self.source = source

    def extract(self, document: str) -> SponsorReport:
        return scrape_by_css(document, self.source)
