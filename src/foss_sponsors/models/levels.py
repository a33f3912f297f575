"""Common sponsorship levels that every foundation's tiers are mapped onto.

- Ordinals are cash sponsorships, in order
- '*inkind' levels are service donations rather than cash
- community is widely used as a separate level
- grants covers government/institution grants
"""

from enum import Enum


class SponsorLevel(str, Enum):
    """Closed set of sponsor level keys used in every report."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"
    FIFTH = "fifth"
    SIXTH = "sixth"
    SEVENTH = "seventh"
    EIGHTH = "eighth"
    COMMUNITY = "community"
    FIRST_INKIND = "firstinkind"
    SECOND_INKIND = "secondinkind"
    THIRD_INKIND = "thirdinkind"
    FOURTH_INKIND = "fourthinkind"
    STARTUP_PARTNERS = "startuppartners"
    ACADEMIC = "academic"
    END_USER = "enduser"
    GRANTS = "grants"
    # Landscape subcategories that no configured level claims
    UNMAPPED = "unmapped"

    @classmethod
    def keys(cls) -> list[str]:
        """Return all level keys in declaration order."""
        return [level.value for level in cls]
