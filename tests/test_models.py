"""Unit tests for descriptor and report models."""

import pytest
from pydantic import ValidationError

from foss_sponsors.models import (
    CssSource,
    ExtractionError,
    LandscapeSource,
    SponsorLevel,
    SponsorReport,
    SponsorshipDescriptor,
    aggregate_to_output,
    is_error_marker,
)


class TestSponsorshipDescriptor:
    """Tests for SponsorshipDescriptor.from_config."""

    def test_css_source_when_no_landscape(self) -> None:
        d = SponsorshipDescriptor.from_config(
            {
                "sponsorurl": "https://example.org/sponsors",
                "normalize": True,
                "levels": {"first": {"selector": ".gold a", "attr": "href"}},
            }
        )
        assert isinstance(d.source, CssSource)
        assert d.kind == "css"
        assert d.source.normalize is True
        assert d.source.levels[SponsorLevel.FIRST].selector == ".gold a"
        assert d.id_map_file is None
        assert d.subpage_selector is None

    def test_landscape_source_when_category_present(self) -> None:
        d = SponsorshipDescriptor.from_config(
            {
                "sponsorurl": "https://example.org/landscape.yml",
                "landscape": "CNCF Members",
                "levels": {"first": {"name": "Platinum"}},
            }
        )
        assert isinstance(d.source, LandscapeSource)
        assert d.source.category == "CNCF Members"
        assert d.source.levels[SponsorLevel.FIRST].name == "Platinum"

    def test_post_processing_keys(self) -> None:
        d = SponsorshipDescriptor.from_config(
            {
                "sponsorurl": "https://example.org/",
                "levels": {},
                "sponsormap": "_sponsorships/example-map.json",
                "sponsorroot": "https://example.org",
                "sponsorselector": ".org-link a",
            }
        )
        assert d.id_map_file == "_sponsorships/example-map.json"
        assert d.subpage_root == "https://example.org"
        assert d.subpage_selector == ".org-link a"
        assert d.subpage_attr == "href"

    def test_default_attr_is_href(self) -> None:
        d = SponsorshipDescriptor.from_config(
            {"sponsorurl": "https://example.org/", "levels": {"first": {"selector": "a"}}}
        )
        assert d.source.levels[SponsorLevel.FIRST].attr == "href"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SponsorshipDescriptor.from_config(
                {"sponsorurl": "https://example.org/", "levels": {"diamond": {"selector": "a"}}}
            )

    def test_missing_url_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SponsorshipDescriptor.from_config({"levels": {}})

    def test_descriptor_is_immutable(self) -> None:
        d = SponsorshipDescriptor.from_config({"sponsorurl": "https://example.org/"})
        with pytest.raises(ValidationError):
            d.source_url = "https://other.org/"


class TestSponsorReport:
    """Tests for report serialization."""

    def test_output_shape(self) -> None:
        report = SponsorReport(
            levels={"first": ["acme.com"], "second": []},
            parse_date="20240101",
        )
        assert report.to_output() == {"first": ["acme.com"], "second": [], "parseDate": "20240101"}

    def test_errors_rendered_as_markers(self) -> None:
        err = ExtractionError(step="scrape_by_css", context="...first", message="boom")
        report = SponsorReport(levels={"first": ["acme.com", err]})
        out = report.to_output()
        assert out["first"][0] == "acme.com"
        assert out["first"][1] == "ERROR: scrape_by_css(...first): boom"
        assert is_error_marker(out["first"][1])
        assert not is_error_marker(out["first"][0])

    def test_whole_report_error(self) -> None:
        report = SponsorReport.failed(ExtractionError(step="parse_sponsorship", context="x", message="down"))
        report.parse_date = "20240101"
        out = report.to_output()
        assert list(out) == ["error", "parseDate"]
        assert out["error"].startswith("ERROR: parse_sponsorship(x): down")

    def test_errors_collects_all_granularities(self) -> None:
        item_err = ExtractionError(step="parse_subpages", message="404")
        report = SponsorReport(
            levels={"first": ["a.com", item_err]},
            error=ExtractionError(step="cleanup_with_map", message="missing"),
        )
        assert [e.step for e in report.errors()] == ["cleanup_with_map", "parse_subpages"]

    def test_from_exception_keeps_trace(self) -> None:
        try:
            raise RuntimeError("kaput")
        except RuntimeError as e:
            err = ExtractionError.from_exception("parse_sponsorship", "https://x", e)
        assert err.message == "kaput"
        assert "test_from_exception_keeps_trace" in err.trace
        assert err.marker().startswith("ERROR: parse_sponsorship(https://x): kaput\n\n")

    def test_aggregate_to_output(self) -> None:
        reports = {
            "asf": SponsorReport(levels={"first": ["acme.com"]}, parse_date="20240101"),
            "psf": SponsorReport(levels={}, parse_date="20240101"),
        }
        assert aggregate_to_output(reports) == {
            "asf": {"first": ["acme.com"], "parseDate": "20240101"},
            "psf": {"parseDate": "20240101"},
        }


class TestSponsorLevel:
    """Tests for the level vocabulary."""

    def test_keys_in_order(self) -> None:
        keys = SponsorLevel.keys()
        assert keys[:3] == ["first", "second", "third"]
        assert "firstinkind" in keys
        assert "enduser" in keys
        assert keys[-1] == "unmapped"
