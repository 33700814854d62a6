from abc import ABC, abstractmethod

from culturematch.models import CompanySummary


class AnalysisError(Exception):
    """An analyzer could not produce usable output for a domain."""


class CultureAnalyzer(ABC):
    name: str = "base"

    @abstractmethod
    def analyze(self, domain: str) -> CompanySummary:
        pass
