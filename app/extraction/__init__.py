from app.extraction.exceptions import (
    EmptyContentError,
    ExtractionError,
    ExtractionFailedError,
    ExtractionTimeoutError,
    UnsupportedFormatError,
)
from app.extraction.models import ExtractionResult, MediaKind, UploadedArtifact

__all__ = [
    "EmptyContentError",
    "ExtractionError",
    "ExtractionFailedError",
    "ExtractionResult",
    "ExtractionTimeoutError",
    "MediaKind",
    "UnsupportedFormatError",
    "UploadedArtifact",
]
