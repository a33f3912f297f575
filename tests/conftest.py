"""Pytest fixtures for foss-sponsors tests."""

from pathlib import Path
from typing import Callable

import httpx
import pytest

from foss_sponsors.models.sponsorship import CssSource, LandscapeSource, SponsorshipDescriptor

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sponsors_html() -> str:
    """Sample foundation sponsor page."""
    return (FIXTURES / "sponsors.html").read_text(encoding="utf-8")


@pytest.fixture
def landscape_yml() -> str:
    """Sample CNCF style landscape.yml with a members category."""
    return (FIXTURES / "landscape.yml").read_text(encoding="utf-8")


@pytest.fixture
def css_source() -> CssSource:
    """CSS levels matching sponsors.html."""
    return CssSource(
        normalize=True,
        levels={
            "first": {"selector": ".platinum a", "attr": "href"},
            "second": {"selector": ".gold a", "attr": "href"},
            "third": {"selector": ".silver img", "attr": "alt"},
        },
    )


@pytest.fixture
def landscape_source() -> LandscapeSource:
    """Landscape levels matching landscape.yml."""
    return LandscapeSource(
        category="CNCF Members",
        levels={
            "first": {"name": "Platinum"},
            "second": {"name": "Gold"},
            "enduser": {"name": "End User Supporter"},
        },
    )


@pytest.fixture
def html_descriptor(tmp_path: Path, sponsors_html: str) -> SponsorshipDescriptor:
    """Descriptor pointing at sponsors.html on disk."""
    page = tmp_path / "sponsors.html"
    page.write_text(sponsors_html, encoding="utf-8")
    return SponsorshipDescriptor.from_config(
        {
            "sponsorurl": page.as_uri(),
            "normalize": True,
            "levels": {"second": {"selector": ".gold a", "attr": "href"}},
        }
    )


@pytest.fixture
def make_client() -> Callable[[dict[str, str]], httpx.Client]:
    """Build an httpx client serving url -> html; other urls return 404."""

    def _make(pages: dict[str, str]) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            body = pages.get(str(request.url))
            if body is None:
                return httpx.Response(404, text="not found")
            return httpx.Response(200, text=body)

        return httpx.Client(transport=httpx.MockTransport(handler))

    return _make
