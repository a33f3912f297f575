"""Domain normalization for mapping scraped links to a single sponsor org."""

import re
from urllib.parse import urlsplit

# Subdomain -> parent org domain, applied in order as literal substitutions
DOMAIN_ALIASES: list[tuple[str, str]] = [
    ("opensource.google", "google.com"),
    ("techatbloomberg.com", "bloomberg.com"),
    ("opensource.twosigma.com", "twosigma.com"),
    ("opensource.salesforce.com", "salesforce.com"),
    # TODO: strip cloud./aws./azure. prefixes once the affected foundations are re-checked
]

# Any run of "www." at the start of the host, with or without a scheme
_LEADING_WWW = re.compile(r"^((?:[a-z][a-z0-9+.-]*:)?//)?(?:www\.)+")


def apply_aliases(value: str) -> str:
    """Lowercase, trim, drop leading 'www.' labels and rewrite known alias domains."""
    value = _LEADING_WWW.sub(r"\1", value.strip().lower())
    for alias, canonical in DOMAIN_ALIASES:
        value = value.replace(alias, canonical, 1)
    return value


def normalize_href(href: str) -> str:
    """
    Return a good-enough normalized hostname for a sponsor link.

    Bare hosts ("example.com", "example.com:8080") are treated as network
    locations so normalizing twice gives the same answer. Values with no
    authority, or that fail to parse, come back unchanged after alias rewriting.
    """
    value = apply_aliases(href)
    try:
        netloc = urlsplit(value).netloc
        if not netloc and "//" not in value:
            netloc = urlsplit("//" + value).netloc
    except ValueError:
        return value
    return netloc or value
