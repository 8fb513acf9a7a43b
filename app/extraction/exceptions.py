from app.extraction.models import ErrorKind


class ExtractionError(Exception):
    """Base exception for all extraction failures."""

    kind: ErrorKind = ErrorKind.EXTRACTION_FAILED

    def __init__(self, message: str, *, mime_type: str = "", extractor: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.mime_type = mime_type
        self.extractor = extractor

    def with_context(self, *, mime_type: str, extractor: str) -> "ExtractionError":
        """Return a copy of this error whose message names file type and extractor."""
        if self.mime_type and self.extractor:
            return self
        return type(self)(
            f"{self.message} (file type: {mime_type}, extractor: {extractor})",
            mime_type=mime_type,
            extractor=extractor,
        )

    def to_dict(self) -> dict[str, str]:
        return {"errorKind": self.kind.value, "message": self.message}


class UnsupportedFormatError(ExtractionError):
    """Raised when no extractor handles the declared media type."""

    kind = ErrorKind.UNSUPPORTED_FORMAT


class ExtractionFailedError(ExtractionError):
    """Raised when the underlying parser or engine fails."""

    kind = ErrorKind.EXTRACTION_FAILED


class EmptyContentError(ExtractionError):
    """Raised when extraction succeeded but produced no usable text."""

    kind = ErrorKind.EMPTY_CONTENT


class ExtractionTimeoutError(ExtractionError):
    """Raised when the recognition engine exceeds its allotted time."""

    kind = ErrorKind.EXTRACTION_TIMEOUT
