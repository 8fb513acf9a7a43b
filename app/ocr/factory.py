from app.config.settings import Settings
from app.ocr.config import DEFAULT_OCR_CONFIG
from app.ocr.tesseract_adapter import TesseractAdapter


class OcrExtractorFactory:
    """Creates the image extractor with the fixed recognition policy."""

    @classmethod
    def create(cls, settings: Settings) -> TesseractAdapter:
        return TesseractAdapter(
            DEFAULT_OCR_CONFIG,
            timeout_seconds=settings.ocr_timeout_seconds,
            max_concurrency=settings.ocr_max_concurrency,
        )
