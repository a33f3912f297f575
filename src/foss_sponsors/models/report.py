"""Sponsor report models and their external JSON shape.

Failures are carried as ExtractionError values inside a report and rendered to
"ERROR: ..." marker strings only when the report is serialized.
"""

import traceback
from typing import Optional, Union

from pydantic import BaseModel, Field

ERROR_PREFIX = "ERROR: "


class ExtractionError(BaseModel):
    """A captured failure at item, level, or whole-report granularity."""

    step: str = Field(..., description="Pipeline step that failed, e.g. scrape_by_css")
    context: str = ""
    message: str
    trace: str = ""

    @classmethod
    def from_exception(cls, step: str, context: str, exc: BaseException) -> "ExtractionError":
        """Capture an exception with its traceback frames."""
        frames = traceback.format_tb(exc.__traceback__)
        return cls(
            step=step,
            context=context,
            message=str(exc) or type(exc).__name__,
            trace="\n\t".join(f.rstrip() for f in frames),
        )

    def marker(self) -> str:
        """Render as the marker string consumers look for in output."""
        text = f"{ERROR_PREFIX}{self.step}({self.context}): {self.message}"
        if self.trace:
            text += f"\n\n{self.trace}"
        return text


SponsorEntry = Union[str, ExtractionError]


def is_error_marker(value: object) -> bool:
    """True for serialized error markers in report output."""
    return isinstance(value, str) and value.startswith(ERROR_PREFIX)


class SponsorReport(BaseModel):
    """Sponsors of one organization, by level, in document order."""

    levels: dict[str, list[SponsorEntry]] = Field(default_factory=dict)
    error: Optional[ExtractionError] = None
    parse_date: Optional[str] = None

    @classmethod
    def failed(cls, error: ExtractionError) -> "SponsorReport":
        """Report for a source that could not be processed at all."""
        return cls(error=error)

    def entries(self) -> list[SponsorEntry]:
        """All entries across levels, in level order."""
        return [e for lvl in self.levels.values() for e in lvl]

    def errors(self) -> list[ExtractionError]:
        """Whole-report and per-entry errors."""
        found = [self.error] if self.error else []
        found.extend(e for e in self.entries() if isinstance(e, ExtractionError))
        return found

    def to_output(self) -> dict:
        """External JSON shape: level keys, then 'error' if any, then 'parseDate'."""
        out: dict = {
            level: [e.marker() if isinstance(e, ExtractionError) else e for e in items]
            for level, items in self.levels.items()
        }
        if self.error:
            out["error"] = self.error.marker()
        if self.parse_date:
            out["parseDate"] = self.parse_date
        return out


AggregateReport = dict[str, SponsorReport]


def aggregate_to_output(reports: AggregateReport) -> dict:
    """Serialize an org -> report mapping for writing to disk."""
    return {org: report.to_output() for org, report in reports.items()}
