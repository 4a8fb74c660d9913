"""
Scoring Oracle Interface - Abstract base for resume scoring providers.
"""
from abc import ABC, abstractmethod

from core.models import AnalysisResponse


class ScoringOracle(ABC):
    """
    Abstract interface for services that score a resume against a job description.
    """

    @abstractmethod
    def analyze_resume(self, resume_text: str, job_description: str) -> AnalysisResponse:
        """
        Score a resume against a job description.

        Returns a validated AnalysisResponse.

        Raises:
            OracleFailure: If the provider errors or returns an empty or malformed result
        """
        pass
