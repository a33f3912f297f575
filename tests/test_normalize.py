"""Tests for domain normalization."""

import pytest

from foss_sponsors.normalize import apply_aliases, normalize_href


class TestNormalizeHref:
    """Tests for normalize_href."""

    def test_strips_scheme_path_and_www(self) -> None:
        assert normalize_href("https://WWW.Example.com/sponsor") == "example.com"

    def test_repeated_www_stripped_only_at_host_start(self) -> None:
        assert normalize_href("https://www.www.example.com/") == "example.com"
        assert normalize_href("https://awww.com") == "awww.com"

    def test_trims_whitespace(self) -> None:
        assert normalize_href("  https://acme.com/about \n") == "acme.com"

    def test_keeps_port(self) -> None:
        assert normalize_href("http://initech.io:8080/about") == "initech.io:8080"

    @pytest.mark.parametrize(
        "href,expected",
        [
            ("https://opensource.google/foo", "google.com"),
            ("https://www.techatbloomberg.com/opensource", "bloomberg.com"),
            ("https://opensource.twosigma.com/", "twosigma.com"),
            ("https://opensource.salesforce.com/projects", "salesforce.com"),
        ],
    )
    def test_known_aliases_map_to_parent_domain(self, href: str, expected: str) -> None:
        assert normalize_href(href) == expected

    def test_bare_host_is_treated_as_domain(self) -> None:
        assert normalize_href("Example.com") == "example.com"
        assert normalize_href("example.com:8080") == "example.com:8080"

    def test_relative_path_returned_unchanged(self) -> None:
        """No authority to extract: value is kept (post-alias)."""
        assert normalize_href("/node/123") == "/node/123"

    def test_malformed_url_returned_unchanged(self) -> None:
        """Parse failures must not raise."""
        assert normalize_href("http://[not-an-ipv6") == "http://[not-an-ipv6"

    @pytest.mark.parametrize(
        "href",
        [
            "https://WWW.Example.com/sponsor",
            "https://opensource.google/foo",
            "http://initech.io:8080/about",
            "example.com",
            "/node/123",
            "http://[not-an-ipv6",
            "https://www.www.example.com/",
            "https://awww.com",
            "Linux Professional Institute",
            "",
        ],
    )
    def test_idempotent(self, href: str) -> None:
        once = normalize_href(href)
        assert normalize_href(once) == once


class TestApplyAliases:
    """Tests for apply_aliases."""

    def test_every_leading_www_removed(self) -> None:
        assert apply_aliases("https://www.www.example.com/") == "https://example.com/"
        assert apply_aliases("www.www.example.com") == "example.com"

    def test_www_inside_host_kept(self) -> None:
        assert apply_aliases("https://awww.com") == "https://awww.com"
        assert apply_aliases("https://example.com/www.html") == "https://example.com/www.html"

    def test_lowercases(self) -> None:
        assert apply_aliases("HTTPS://OpenSource.Google") == "https://google.com"
