"""Data models for sponsorship descriptors and sponsor reports."""

from foss_sponsors.models.levels import SponsorLevel
from foss_sponsors.models.report import (
    AggregateReport,
    ExtractionError,
    SponsorEntry,
    SponsorReport,
    aggregate_to_output,
    is_error_marker,
)
from foss_sponsors.models.sponsorship import (
    CssSource,
    LandscapeSource,
    LevelSpec,
    SponsorshipDescriptor,
)

__all__ = [
    "AggregateReport",
    "CssSource",
    "ExtractionError",
    "LandscapeSource",
    "LevelSpec",
    "SponsorEntry",
    "SponsorLevel",
    "SponsorReport",
    "SponsorshipDescriptor",
    "aggregate_to_output",
    "is_error_marker",
]
