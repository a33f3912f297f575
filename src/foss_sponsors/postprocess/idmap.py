"""Clean up sponsor lists that hold site-specific ids rather than domains."""

import json
from pathlib import Path

from foss_sponsors.models.report import SponsorEntry, SponsorReport
from foss_sponsors.normalize import normalize_href


def load_id_map(path: str | Path) -> dict[str, str]:
    """Load a JSON object mapping scraped ids to sponsor domains."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Sponsor map {path} must be a JSON object, got {type(data).__name__}")
    return {str(k): str(v) for k, v in data.items()}


def map_entry(entry: SponsorEntry, mapping: dict[str, str]) -> SponsorEntry:
    """Mapped domain if known, else the entry normalized as a URL. Errors pass through."""
    if not isinstance(entry, str):
        return entry
    mapped = mapping.get(entry)
    return mapped if mapped is not None else normalize_href(entry)


def cleanup_with_map(report: SponsorReport, mapping: dict[str, str]) -> SponsorReport:
    """Return a new report with every level's entries mapped to domains."""
    levels = {
        level: [map_entry(e, mapping) for e in entries]
        for level, entries in report.levels.items()
    }
    return report.model_copy(update={"levels": levels})
