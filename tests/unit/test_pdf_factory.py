import pytest

from app.config.settings import Settings
from app.pdf.factory import PdfExtractorFactory
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter_by_default(self) -> None:
        adapter = PdfExtractorFactory.create(Settings())
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine="pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(Settings(pdf_engine=" PdfPlumber "))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(Settings(pdf_engine="unknown"))
