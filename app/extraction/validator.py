"""Post-extraction validation: rejects blank text, builds the result."""

from app.extraction.exceptions import EmptyContentError
from app.extraction.models import ExtractionResult

PREVIEW_LENGTH = 100


def validate_extracted_text(text: str, *, extractor: str, mime_type: str) -> ExtractionResult:
    """Wrap raw extractor output into an ExtractionResult.

    Whitespace is only stripped for the emptiness check; the returned text,
    its length and preview are computed from the original string.

    Raises:
        EmptyContentError: if the text is empty or whitespace-only.
    """
    if not text or not text.strip():
        raise EmptyContentError(
            f"No text could be extracted from {mime_type} by {extractor}",
            mime_type=mime_type,
            extractor=extractor,
        )
    return ExtractionResult(
        text=text,
        length=len(text),
        preview=text[:PREVIEW_LENGTH],
        extractor=extractor,
    )
