"""Parse a CNCF style landscape.yml for a sponsor list.

A landscape document is a top-level 'landscape' sequence of categories, each
with a 'name' and 'subcategories'; each subcategory has a 'name' and 'items'.
One category holds the sponsors, and its subcategories are the sponsor tiers.
"""

import logging
from typing import Any, Optional

import yaml

from foss_sponsors.extractors.base import BaseExtractor
from foss_sponsors.models.levels import SponsorLevel
from foss_sponsors.models.report import ExtractionError, SponsorReport
from foss_sponsors.models.sponsorship import LandscapeSource
from foss_sponsors.normalize import normalize_href

logger = logging.getLogger(__name__)


def _find_category(landscape: Any, category: str) -> Optional[dict]:
    if not isinstance(landscape, dict):
        return None
    for entry in landscape.get("landscape") or []:
        if isinstance(entry, dict) and entry.get("name", "") == category:
            return entry
    return None


def level_for_subcategory(name: str, source: LandscapeSource) -> str:
    """Level whose configured display name matches a subcategory, else 'unmapped'."""
    for level, spec in source.levels.items():
        if spec.name is not None and spec.name == name:
            return SponsorLevel(level).value
    return SponsorLevel.UNMAPPED.value


def item_domain(item: dict) -> str:
    """Sponsor homepage, falling back to its display name."""
    return normalize_href(item.get("homepage_url") or item["name"])


def parse_landscape(document: str, source: LandscapeSource) -> SponsorReport:
    """Return sponsors of source.category by level, or a report carrying an error."""
    category = source.category
    try:
        landscape = yaml.safe_load(document)
    except yaml.YAMLError as e:
        logger.warning("Landscape YAML did not parse: %s", e)
        return SponsorReport.failed(ExtractionError.from_exception("parse_landscape", category, e))

    found = _find_category(landscape, category)
    if found is None:
        logger.warning("Landscape category %r not found", category)
        return SponsorReport.failed(
            ExtractionError(step="parse_landscape", context=f"... {category}", message="not found")
        )

    groups = found.get("subcategories")
    if not groups:
        logger.warning("Landscape category %r has no subcategories", category)
        return SponsorReport.failed(
            ExtractionError(step="parse_landscape", context=f"... {category}", message="not found")
        )

    report = SponsorReport()
    for group in groups:
        group_name = group.get("name", "")
        level = level_for_subcategory(group_name, source)
        if level == SponsorLevel.UNMAPPED.value:
            logger.warning("Landscape subcategory %r has no configured level", group_name)
        entries = report.levels.setdefault(level, [])
        for item in group.get("items") or []:
            try:
                entries.append(item_domain(item))
            except (KeyError, TypeError, AttributeError) as e:
                entries.append(ExtractionError.from_exception("parse_landscape", group_name, e))
    return report


class LandscapeExtractor(BaseExtractor):
    """Extractor for landscape.yml manifests."""

    kind = "landscape"

    def __init__(self, source: LandscapeSource):
        self.source = source

    def extract(self, document: str) -> SponsorReport:
        return parse_landscape(document, self.source)
