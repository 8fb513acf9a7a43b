import pytest

from app.extraction.exceptions import (
    EmptyContentError,
    ExtractionFailedError,
    ExtractionTimeoutError,
    UnsupportedFormatError,
)
from app.extraction.models import ExtractionResult, MediaKind, UploadedArtifact


class TestMediaKindFromMimeType:
    @pytest.mark.parametrize(
        ("mime_type", "expected"),
        [
            ("application/pdf", MediaKind.PDF),
            ("image/png", MediaKind.IMAGE),
            ("image/jpeg", MediaKind.IMAGE),
            ("image/tiff", MediaKind.IMAGE),
            ("text/plain", MediaKind.TEXT),
            ("text/plain; charset=utf-8", MediaKind.TEXT),
            ("TEXT/PLAIN", MediaKind.TEXT),
            ("application/zip", MediaKind.UNSUPPORTED),
            ("text/html", MediaKind.UNSUPPORTED),
            ("application/pdfx", MediaKind.UNSUPPORTED),
            ("", MediaKind.UNSUPPORTED),
        ],
    )
    def test_maps_mime_type(self, mime_type: str, expected: MediaKind) -> None:
        assert MediaKind.from_mime_type(mime_type) is expected


class TestUploadedArtifact:
    def test_from_bytes_fills_size(self) -> None:
        artifact = UploadedArtifact.from_bytes(b"abc", "text/plain", "notes.txt")
        assert artifact.size_bytes == 3
        assert artifact.filename == "notes.txt"
        assert artifact.kind is MediaKind.TEXT

    def test_is_immutable(self) -> None:
        artifact = UploadedArtifact.from_bytes(b"abc", "text/plain")
        with pytest.raises(AttributeError):
            artifact.mime_type = "image/png"  # type: ignore[misc]


class TestPayloads:
    def test_result_payload(self) -> None:
        result = ExtractionResult(text="hello", length=5, preview="hello", extractor="plain-text")
        assert result.to_dict() == {"text": "hello", "length": 5, "preview": "hello"}

    @pytest.mark.parametrize(
        ("error_cls", "kind"),
        [
            (UnsupportedFormatError, "UnsupportedFormat"),
            (ExtractionFailedError, "ExtractionFailed"),
            (EmptyContentError, "EmptyContent"),
            (ExtractionTimeoutError, "ExtractionTimeout"),
        ],
    )
    def test_error_payload(self, error_cls: type, kind: str) -> None:
        error = error_cls("something went wrong")
        assert error.to_dict() == {"errorKind": kind, "message": "something went wrong"}


class TestWithContext:
    def test_adds_file_type_and_extractor(self) -> None:
        error = ExtractionFailedError("boom")
        contextual = error.with_context(mime_type="image/png", extractor="tesseract")
        assert isinstance(contextual, ExtractionFailedError)
        assert contextual.message == "boom (file type: image/png, extractor: tesseract)"
        assert contextual.mime_type == "image/png"
        assert contextual.extractor == "tesseract"

    def test_keeps_error_that_already_has_context(self) -> None:
        error = EmptyContentError("empty", mime_type="text/plain", extractor="plain-text")
        assert error.with_context(mime_type="x", extractor="y") is error
