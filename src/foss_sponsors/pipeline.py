"""Pipeline orchestration: fetch → extract → post-process, per org and in batch."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import httpx

from foss_sponsors import config
from foss_sponsors.extractors import ExtractorRegistry
from foss_sponsors.fetcher import build_client, fetch_document
from foss_sponsors.foundations import get_current_sponsorship, get_sponsorship_file, get_sponsorship_refs
from foss_sponsors.models.report import AggregateReport, ExtractionError, SponsorReport
from foss_sponsors.models.sponsorship import SponsorshipDescriptor
from foss_sponsors.postprocess import cleanup_with_map, load_id_map, parse_subpages

logger = logging.getLogger(__name__)


def today_stamp() -> str:
    """Parse date stamp for reports (YYYYMMDD)."""
    return datetime.now().strftime(config.PARSE_DATE_FORMAT)


def parse_sponsorship(
    descriptor: SponsorshipDescriptor,
    *,
    client: Optional[httpx.Client] = None,
    parse_date: Optional[str] = None,
) -> SponsorReport:
    """
    Run one organization's source through fetch, extraction, and post-processing.
    Subpage resolution runs before id mapping when both are configured.
    Never raises for fetch or content problems; they are recorded in the report.
    """
    url = descriptor.source_url
    stamp = parse_date or today_stamp()
    try:
        document = fetch_document(url, client)
    except Exception as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        report = SponsorReport.failed(ExtractionError.from_exception("parse_sponsorship", url, e))
        report.parse_date = stamp
        return report

    try:
        report = ExtractorRegistry.for_source(descriptor.source).extract(document)
    except Exception as e:
        logger.warning("Extraction failed for %s: %s", url, e)
        report = SponsorReport.failed(ExtractionError.from_exception(descriptor.kind, url, e))
        report.parse_date = stamp
        return report

    if descriptor.subpage_selector:
        report = parse_subpages(
            report,
            descriptor.subpage_root,
            descriptor.subpage_selector,
            attr=descriptor.subpage_attr,
            client=client,
        )

    if descriptor.id_map_file:
        try:
            mapping = load_id_map(descriptor.id_map_file)
        except (OSError, ValueError) as e:
            logger.warning("Sponsor map %s unusable: %s", descriptor.id_map_file, e)
            # An earlier whole-report error stays the reported cause
            if report.error is None:
                report.error = ExtractionError.from_exception("cleanup_with_map", descriptor.id_map_file, e)
        else:
            report = cleanup_with_map(report, mapping)

    report.parse_date = stamp
    return report


def parse_sponsorships(
    descriptors: dict[str, SponsorshipDescriptor],
    *,
    client: Optional[httpx.Client] = None,
    parse_date: Optional[str] = None,
) -> AggregateReport:
    """
    Parse every org in order, stamping all reports with the same date.
    One org's failure only shows up as that org's error entry.
    """
    stamp = parse_date or today_stamp()
    owns_client = client is None
    client = client or build_client()
    all_sponsors: AggregateReport = {}
    try:
        for org, descriptor in descriptors.items():
            logger.info("Parsing sponsors of %s from %s", org, descriptor.source_url)
            try:
                report = parse_sponsorship(descriptor, client=client, parse_date=stamp)
            except Exception as e:
                logger.exception("Unexpected failure parsing %s", org)
                report = SponsorReport.failed(ExtractionError.from_exception("parse_sponsorships", org, e))
                report.parse_date = stamp
            all_sponsors[org] = report
    finally:
        if owns_client:
            client.close()
    return all_sponsors


def load_descriptor(versions: dict[str, Any]) -> SponsorshipDescriptor:
    """Validate the current version from an org's sponsorship file."""
    return SponsorshipDescriptor.from_config(get_current_sponsorship(versions))


def parse_all_sponsorships(
    foundations_dir: str | Path = config.FOUNDATIONS_DIR,
    sponsorships_dir: str | Path = config.SPONSORSHIPS_DIR,
    *,
    client: Optional[httpx.Client] = None,
    parse_date: Optional[str] = None,
) -> AggregateReport:
    """
    Parse every configured foundation plus the held-out test subject.
    A missing descriptor file raises; an unreadable or invalid one becomes that
    org's error report.
    """
    stamp = parse_date or today_stamp()
    descriptors: dict[str, SponsorshipDescriptor] = {}
    invalid: AggregateReport = {}
    refs = get_sponsorship_refs(foundations_dir)
    for org, ref in refs.items():
        try:
            descriptors[org] = load_descriptor(get_sponsorship_file(ref, sponsorships_dir))
        except FileNotFoundError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            # ValueError covers malformed JSON and pydantic validation failures
            logger.warning("Invalid sponsorship descriptor for %s: %s", org, e)
            invalid[org] = SponsorReport(
                error=ExtractionError(step="load_descriptor", context=org, message=str(e)),
                parse_date=stamp,
            )

    parsed = parse_sponsorships(descriptors, client=client, parse_date=stamp)
    return {org: parsed[org] if org in parsed else invalid[org] for org in refs}
