"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from foss_sponsors import config

DESCRIPTION = """\
Good-enough scrapers and detectors of FOSS sponsors.
Run from the project root; by default finds and parses every configured
foundation sponsorship, or a single org with --one."""


class _ArgumentParser(argparse.ArgumentParser):
    """Exit 1 (not argparse's 2) on bad arguments."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="foss-sponsors", description=DESCRIPTION)
    parser.add_argument(
        "-o",
        "--out",
        type=Path,
        default=None,
        help=f"Output filename (default: {config.DEFAULT_OUTFILE}, or {config.DATA_DIR}/ORGID-new.json with --one)",
    )
    parser.add_argument(
        "--one",
        metavar="ORGID",
        default=None,
        help="Org id (asf, python, etc.) to parse alone",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args, run the batch or a single org, and write the JSON report."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.one:
        parsed = _run_one(args.one)
        outfile = args.out or config.default_outfile_for(args.one)
    else:
        parsed = _run_all()
        outfile = args.out or config.DEFAULT_OUTFILE

    outfile.parent.mkdir(parents=True, exist_ok=True)
    outfile.write_text(json.dumps(parsed, indent=2), encoding="utf-8")
    count = 1 if args.one else len(parsed)
    print(f"Wrote sponsors of {count} org(s) to {outfile}")


def _run_one(org: str) -> dict:
    """Parse a single org's current sponsorship descriptor."""
    from foss_sponsors.foundations import get_sponsorship_file
    from foss_sponsors.pipeline import load_descriptor, parse_sponsorship

    try:
        descriptor = load_descriptor(get_sponsorship_file(org))
    except FileNotFoundError as e:
        raise SystemExit(f"No sponsorship file for {org}: {e}")
    except (KeyError, TypeError, ValueError) as e:
        raise SystemExit(f"Invalid sponsorship file for {org}: {e}")
    return parse_sponsorship(descriptor).to_output()


def _run_all() -> dict:
    """Parse every configured org."""
    from foss_sponsors.models.report import aggregate_to_output
    from foss_sponsors.pipeline import parse_all_sponsorships

    try:
        reports = parse_all_sponsorships()
    except FileNotFoundError as e:
        raise SystemExit(f"Missing configuration: {e}")
    return aggregate_to_output(reports)


if __name__ == "__main__":
    main()
