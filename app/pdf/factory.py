from typing import ClassVar

from app.config.settings import Settings
from app.logging.logger import Log
from app.pdf.base import BasePdfExtractor
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the PDF extractor named by `Settings.pdf_engine`."""

    ADAPTERS: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.strip().lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ADAPTERS)}"
            )
        Log.debug(f"Using PDF engine {engine}")
        return adapter_cls()
