"""Foundation directory and per-organization sponsorship descriptor files."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from foss_sponsors import config

logger = logging.getLogger(__name__)

_FRONT_MATTER = "---"


def _front_matter(text: str) -> dict[str, Any]:
    """YAML front matter of a markdown record, or {} if it has none."""
    lines = text.splitlines()
    if not lines or lines[0].strip() != _FRONT_MATTER:
        return {}
    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == _FRONT_MATTER:
            return yaml.safe_load("\n".join(lines[1:end])) or {}
    return {}


def _read_record(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".md":
        return _front_matter(text)
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text) or {}


def get_foundations(directory: str | Path = config.FOUNDATIONS_DIR) -> dict[str, dict[str, Any]]:
    """
    Load foundation records keyed by org id (file stem).
    Supports markdown with YAML front matter, plain YAML, and JSON records.
    """
    directory = Path(directory)
    foundations: dict[str, dict[str, Any]] = {}
    for path in sorted(directory.iterdir()):
        if path.suffix not in (".md", ".yml", ".yaml", ".json"):
            continue
        try:
            record = _read_record(path)
        except (ValueError, yaml.YAMLError) as e:
            logger.warning("Skipping %s: %s", path, e)
            continue
        if not isinstance(record, dict):
            logger.warning("Skipping %s: not a mapping", path)
            continue
        foundations[path.stem] = record
    return foundations


def get_sponsorship_file(org: str, directory: str | Path = config.SPONSORSHIPS_DIR) -> dict[str, Any]:
    """Read an org's versioned sponsorship descriptors. Raises FileNotFoundError if absent."""
    return json.loads((Path(directory) / f"{org}.json").read_text(encoding="utf-8"))


def get_current_sponsorship(versions: dict[str, Any]) -> dict[str, Any]:
    """Select the current dated descriptor from an org's sponsorship file."""
    if not isinstance(versions, dict):
        raise TypeError(f"Sponsorship file must map versions to descriptors, got {type(versions).__name__}")
    try:
        current = versions[config.CURRENT_SPONSORSHIP]
    except KeyError:
        raise KeyError(
            f"No sponsorship version {config.CURRENT_SPONSORSHIP}. Available: {list(versions.keys())}"
        ) from None
    if not isinstance(current, dict):
        raise TypeError(f"Sponsorship {config.CURRENT_SPONSORSHIP} must be an object, got {type(current).__name__}")
    return current


def get_sponsorship_refs(foundations_dir: str | Path = config.FOUNDATIONS_DIR) -> dict[str, str]:
    """
    Org id -> sponsorship file name for every foundation that declares a
    'sponsorship', plus the held-out test subject org.
    """
    refs = {
        org: str(foundation["sponsorship"])
        for org, foundation in get_foundations(foundations_dir).items()
        if foundation.get("sponsorship")
    }
    refs[config.TEST_SUBJECT_ORG] = config.TEST_SUBJECT_ORG
    return refs
