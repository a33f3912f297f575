"""Sponsorship descriptor: how to fetch and parse one organization's sponsor list."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from foss_sponsors.models.levels import SponsorLevel


class LevelSpec(BaseModel):
    """Where to find one level's sponsors: a CSS selector + attribute, or a landscape subcategory name."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    selector: Optional[str] = None
    attr: str = "href"
    name: Optional[str] = None


class CssSource(BaseModel):
    """HTML page scraped level by level with CSS selectors."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["css"] = "css"
    levels: dict[SponsorLevel, LevelSpec] = Field(default_factory=dict)
    normalize: bool = False


class LandscapeSource(BaseModel):
    """CNCF style landscape.yml; one category's subcategories become levels."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["landscape"] = "landscape"
    category: str
    levels: dict[SponsorLevel, LevelSpec] = Field(default_factory=dict)


SourceConfig = Annotated[Union[CssSource, LandscapeSource], Field(discriminator="kind")]


class SponsorshipDescriptor(BaseModel):
    """One organization's sponsorship source plus optional post-processing."""

    model_config = ConfigDict(frozen=True)

    source_url: str = Field(..., description="Page or landscape.yml listing sponsors")
    source: SourceConfig
    id_map_file: Optional[str] = Field(
        default=None,
        description="JSON file mapping scraped ids to sponsor domains",
    )
    subpage_root: str = ""
    subpage_selector: Optional[str] = Field(
        default=None,
        description="CSS selector for the sponsor link on each per-sponsor page",
    )
    subpage_attr: str = "href"

    @property
    def kind(self) -> str:
        return self.source.kind

    @classmethod
    def from_config(cls, data: dict[str, Any]) -> "SponsorshipDescriptor":
        """
        Build from a descriptor record as stored in _sponsorships/*.json.
        Presence of 'landscape' selects landscape parsing; otherwise CSS scraping.
        """
        levels = data.get("levels") or {}
        category = data.get("landscape")
        if category:
            source: dict[str, Any] = {"kind": "landscape", "category": category, "levels": levels}
        else:
            source = {"kind": "css", "levels": levels, "normalize": bool(data.get("normalize", False))}
        flat: dict[str, Any] = {
            "source_url": data.get("sponsorurl"),
            "source": source,
            "id_map_file": data.get("sponsormap"),
            "subpage_root": data.get("sponsorroot") or "",
            "subpage_selector": data.get("sponsorselector"),
            "subpage_attr": data.get("sponsorattr") or "href",
        }
        return cls.model_validate(flat)
