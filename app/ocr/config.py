from dataclasses import dataclass


@dataclass(frozen=True)
class OcrConfig:
    """Recognition policy for the OCR engine.

    Defaults: English, LSTM-only engine (oem 1), fully automatic page
    segmentation (psm 3).
    """

    language: str = "eng"
    engine_mode: int = 1
    page_segmentation_mode: int = 3

    def tesseract_flags(self) -> str:
        return f"--oem {self.engine_mode} --psm {self.page_segmentation_mode}"


DEFAULT_OCR_CONFIG = OcrConfig()
