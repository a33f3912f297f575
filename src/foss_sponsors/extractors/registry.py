"""Registry mapping descriptor source kinds to extractors."""

from typing import Type, Union

from foss_sponsors.extractors.base import BaseExtractor
from foss_sponsors.extractors.css import CssExtractor
from foss_sponsors.extractors.landscape import LandscapeExtractor
from foss_sponsors.models.sponsorship import CssSource, LandscapeSource


class ExtractorRegistry:
    """Provides the extractor for a descriptor's source configuration."""

    _extractors: dict[str, Type[BaseExtractor]] = {
        "css": CssExtractor,
        "landscape": LandscapeExtractor,
    }

    @classmethod
    def for_source(cls, source: Union[CssSource, LandscapeSource]) -> BaseExtractor:
        """Get an extractor instance bound to the given source config."""
        extractor_cls = cls._extractors.get(source.kind)
        if not extractor_cls:
            raise ValueError(f"Unknown source kind: {source.kind}. Available: {list(cls._extractors.keys())}")
        return extractor_cls(source)

    @classmethod
    def available_kinds(cls) -> list[str]:
        """Return list of supported source kinds."""
        return list(cls._extractors.keys())
