import io
import threading
import time

import pytesseract
from PIL import Image, UnidentifiedImageError

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionFailedError, ExtractionTimeoutError
from app.logging.logger import Log
from app.ocr.config import DEFAULT_OCR_CONFIG, OcrConfig

_TIMEOUT_MESSAGE = "Tesseract process timeout"
_MIN_ENGINE_SECONDS = 0.01


class TesseractAdapter(BaseExtractor):
    """Recognizes text in raster images with Tesseract via pytesseract.

    At most `max_concurrency` recognitions run at once per adapter
    instance. `timeout_seconds` bounds the whole request: waiting for a
    free slot and the engine run share one deadline. The engine output is
    returned exactly as produced.
    """

    name = "tesseract"

    def __init__(
        self,
        config: OcrConfig = DEFAULT_OCR_CONFIG,
        *,
        timeout_seconds: float = 0,
        max_concurrency: int = 1,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self._config = config
        self._timeout_seconds = timeout_seconds
        self._max_concurrency = max_concurrency
        self._slots = threading.BoundedSemaphore(max_concurrency)

    @property
    def config(self) -> OcrConfig:
        return self._config

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    @property
    def max_concurrency(self) -> int:
        return self._max_concurrency

    def extract(self, content: bytes) -> str:
        with self._open_image(content) as image:
            deadline = time.monotonic() + self._timeout_seconds if self._timeout_seconds else None
            if not self._slots.acquire(timeout=self._timeout_seconds or None):
                raise ExtractionTimeoutError(
                    f"OCR engine busy: no recognition slot freed within {self._timeout_seconds}s",
                    extractor=self.name,
                )
            try:
                return self._recognize(image, self._remaining_seconds(deadline))
            finally:
                self._slots.release()

    def _open_image(self, content: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(content))
            image.load()
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise ExtractionFailedError(
                f"Error performing OCR: cannot decode image: {exc}",
                extractor=self.name,
            ) from exc
        return image

    @staticmethod
    def _remaining_seconds(deadline: float | None) -> float:
        """Engine budget left before the deadline; 0 means no timeout."""
        if deadline is None:
            return 0
        return max(deadline - time.monotonic(), _MIN_ENGINE_SECONDS)

    def _recognize(self, image: Image.Image, timeout: float) -> str:
        Log.debug(
            f"Running OCR lang={self._config.language} {self._config.tesseract_flags()}"
        )
        try:
            return pytesseract.image_to_string(
                image,
                lang=self._config.language,
                config=self._config.tesseract_flags(),
                timeout=timeout,
            )
        except pytesseract.TesseractNotFoundError as exc:
            raise ExtractionFailedError(
                f"Error performing OCR: engine unavailable: {exc}",
                extractor=self.name,
            ) from exc
        except pytesseract.TesseractError as exc:
            raise ExtractionFailedError(
                f"Error performing OCR: {exc.message or exc}",
                extractor=self.name,
            ) from exc
        except RuntimeError as exc:
            if str(exc) == _TIMEOUT_MESSAGE:
                raise ExtractionTimeoutError(
                    f"OCR exceeded {self._timeout_seconds}s and was aborted",
                    extractor=self.name,
                ) from exc
            raise ExtractionFailedError(
                f"Error performing OCR: {exc}",
                extractor=self.name,
            ) from exc
