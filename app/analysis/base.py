from abc import ABC, abstractmethod

from app.analysis.models import AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for all analysis adapters."""

    @abstractmethod
    def analyze(self, text: str) -> AnalysisResult:
        """Explain extracted document text and write practice questions for it.

        Args:
            text: Plain text produced by the extraction pipeline.

        Returns:
            AnalysisResult with explanation and questions.

        Raises:
            AnalysisError: on any failure.
        """
