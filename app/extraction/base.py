from abc import ABC, abstractmethod
from typing import ClassVar


class BaseExtractor(ABC):
    """Contract for all format-specific text extractors."""

    name: ClassVar[str] = "extractor"

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from raw file bytes.

        Args:
            content: Raw file content.

        Returns:
            The extracted text, unvalidated. May be empty.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
