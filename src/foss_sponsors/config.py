"""Runtime configuration: fixed paths and version keys, with env overrides.

Environment variables:
  SPONSORS_FOUNDATIONS_DIR   Directory of foundation records (default: _foundations)
  SPONSORS_SPONSORSHIPS_DIR  Directory of per-org descriptor files (default: _sponsorships)
  SPONSORS_DATA_DIR          Directory for JSON reports (default: _data)
  SPONSORS_HTTP_TIMEOUT      Seconds before a fetch is abandoned (default: 30)
  SPONSORS_USER_AGENT        User-Agent header for HTTP fetches
  SPONSORS_LOG_LEVEL         Logging level for the CLI (default: INFO)
"""

import os
from pathlib import Path

FOUNDATIONS_DIR = Path(os.environ.get("SPONSORS_FOUNDATIONS_DIR", "_foundations"))
SPONSORSHIPS_DIR = Path(os.environ.get("SPONSORS_SPONSORSHIPS_DIR", "_sponsorships"))
DATA_DIR = Path(os.environ.get("SPONSORS_DATA_DIR", "_data"))

# Only one dated version of each descriptor is consulted for now
CURRENT_SPONSORSHIP = "20240101"

# Not a separate foundation, but always parsed as a held-out check
TEST_SUBJECT_ORG = "cncf"

DEFAULT_OUTFILE = DATA_DIR / "allsponsorships-new.json"
PARSE_DATE_FORMAT = "%Y%m%d"

HTTP_TIMEOUT = float(os.environ.get("SPONSORS_HTTP_TIMEOUT", "30"))
USER_AGENT = os.environ.get(
    "SPONSORS_USER_AGENT",
    "Mozilla/5.0 (compatible; foss-sponsors/0.1; open source sponsor survey)",
)
LOG_LEVEL = os.environ.get("SPONSORS_LOG_LEVEL", "INFO").upper()


def default_outfile_for(org: str) -> Path:
    """Default report path when parsing a single organization."""
    return DATA_DIR / f"{org}-new.json"
