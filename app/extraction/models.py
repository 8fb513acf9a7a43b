from dataclasses import dataclass
from enum import Enum


class MediaKind(Enum):
    """Closed set of input kinds the extraction pipeline understands."""

    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "MediaKind":
        """Map a declared media type onto a MediaKind.

        `application/pdf` -> PDF, any `image/*` -> IMAGE, `text/plain` -> TEXT,
        everything else -> UNSUPPORTED. Parameters such as `; charset=utf-8`
        are ignored.
        """
        essence = mime_type.split(";", 1)[0].strip().lower()
        if essence == "application/pdf":
            return cls.PDF
        if essence.startswith("image/"):
            return cls.IMAGE
        if essence == "text/plain":
            return cls.TEXT
        return cls.UNSUPPORTED


class ErrorKind(Enum):
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    EXTRACTION_FAILED = "ExtractionFailed"
    EMPTY_CONTENT = "EmptyContent"
    EXTRACTION_TIMEOUT = "ExtractionTimeout"


@dataclass(frozen=True)
class UploadedArtifact:
    """A single uploaded file: raw bytes plus its declared media type."""

    content: bytes
    mime_type: str
    filename: str
    size_bytes: int

    @classmethod
    def from_bytes(cls, content: bytes, mime_type: str, filename: str = "") -> "UploadedArtifact":
        return cls(
            content=content,
            mime_type=mime_type,
            filename=filename,
            size_bytes=len(content),
        )

    @property
    def kind(self) -> MediaKind:
        return MediaKind.from_mime_type(self.mime_type)


@dataclass(frozen=True)
class TextRun:
    """A positioned piece of text on a page."""

    text: str
    baseline: float


@dataclass(frozen=True)
class PageTextFragment:
    """Text runs of one page, in content-stream order."""

    page_number: int
    runs: tuple[TextRun, ...] = ()


@dataclass(frozen=True)
class ExtractionResult:
    """Successful output of the extraction pipeline."""

    text: str
    length: int
    preview: str
    extractor: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "length": self.length,
            "preview": self.preview,
        }
