from typing import Any

import pymupdf

from app.extraction.models import PageTextFragment, TextRun
from app.pdf.base import BasePdfExtractor

_TEXT_FLAGS = pymupdf.TEXTFLAGS_DICT & ~pymupdf.TEXT_PRESERVE_IMAGES


def _page_runs(page_dict: dict[str, Any]) -> tuple[TextRun, ...]:
    runs: list[TextRun] = []
    for block in page_dict.get("blocks", []):
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                runs.append(TextRun(text=span["text"], baseline=float(span["origin"][1])))
    return tuple(runs)


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    name = "pymupdf"

    def read_pages(self, pdf_bytes: bytes) -> list[PageTextFragment]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            return [
                PageTextFragment(
                    page_number=page.number + 1,
                    runs=_page_runs(page.get_text("dict", flags=_TEXT_FLAGS)),
                )
                for page in doc
            ]
