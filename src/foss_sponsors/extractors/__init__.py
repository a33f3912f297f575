"""Extraction strategies for sponsor source documents."""

from foss_sponsors.extractors.base import BaseExtractor
from foss_sponsors.extractors.css import CssExtractor, scrape_by_css
from foss_sponsors.extractors.landscape import LandscapeExtractor, parse_landscape
from foss_sponsors.extractors.registry import ExtractorRegistry

__all__ = [
    "BaseExtractor",
    "CssExtractor",
    "ExtractorRegistry",
    "LandscapeExtractor",
    "parse_landscape",
    "scrape_by_css",
]
