import io
from typing import Any

import pdfplumber

from app.extraction.models import PageTextFragment, TextRun
from app.pdf.base import BasePdfExtractor


def _char_baseline(char: dict[str, Any]) -> float:
    matrix = char.get("matrix")
    if matrix:
        return float(matrix[5])
    return float(char["y0"])


def _orientation(char: dict[str, Any]) -> tuple[float, ...] | None:
    matrix = char.get("matrix")
    return tuple(matrix[:4]) if matrix else None


def _continues_run(previous: dict[str, Any], char: dict[str, Any]) -> bool:
    """Upright chars split on baseline; rotated chars on orientation or font change."""
    if char.get("upright", True):
        return bool(previous.get("upright", True)) and _char_baseline(previous) == _char_baseline(char)
    return (
        not previous.get("upright", True)
        and _orientation(previous) == _orientation(char)
        and previous.get("fontname") == char.get("fontname")
    )


def _chars_to_runs(chars: list[dict[str, Any]]) -> tuple[TextRun, ...]:
    """Merge consecutive chars into runs; a run's baseline is its first char's."""
    runs: list[TextRun] = []
    buffer: list[str] = []
    first: dict[str, Any] | None = None
    previous: dict[str, Any] | None = None
    for char in chars:
        if previous is not None and first is not None and not _continues_run(previous, char):
            runs.append(TextRun(text="".join(buffer), baseline=_char_baseline(first)))
            buffer = []
            first = None
        if first is None:
            first = char
        buffer.append(char["text"])
        previous = char
    if buffer and first is not None:
        runs.append(TextRun(text="".join(buffer), baseline=_char_baseline(first)))
    return tuple(runs)


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    name = "pdfplumber"

    def read_pages(self, pdf_bytes: bytes) -> list[PageTextFragment]:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            return [
                PageTextFragment(page_number=page.page_number, runs=_chars_to_runs(page.chars))
                for page in pdf.pages
            ]
