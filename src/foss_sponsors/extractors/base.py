"""Abstract base class for sponsor list extractors."""

from abc import ABC, abstractmethod

from foss_sponsors.models.report import SponsorReport


class BaseExtractor(ABC):
    """
    Standard interface for turning one fetched source document into a report.
    Extractors never raise for content problems; failures are recorded in the report.
    """

    kind: str = ""

    @abstractmethod
    def extract(self, document: str) -> SponsorReport:
        """
        Parse document and return sponsors by level.
        """
        pass
