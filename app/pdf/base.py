from abc import abstractmethod

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError, ExtractionFailedError
from app.extraction.models import PageTextFragment
from app.pdf.lines import join_pages


class BasePdfExtractor(BaseExtractor):
    """Contract for all PDF text extraction adapters.

    Adapters only enumerate positioned text runs per page; line
    reconstruction and page joining are shared.
    """

    name = "pdf"

    def extract(self, content: bytes) -> str:
        try:
            pages = self.read_pages(content)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(
                f"Failed to process PDF: {exc}",
                extractor=self.name,
            ) from exc
        return join_pages(pages)

    @abstractmethod
    def read_pages(self, pdf_bytes: bytes) -> list[PageTextFragment]:
        """Enumerate text runs of every page in document order.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One PageTextFragment per page.

        Raises:
            Exception: any parser error; wrapped into ExtractionFailedError
                by `extract`.
        """
