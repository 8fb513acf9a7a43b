import pytest

from app.extraction.base import BaseExtractor
from app.extraction.dispatcher import FormatDispatcher
from app.extraction.exceptions import UnsupportedFormatError
from app.extraction.models import MediaKind, UploadedArtifact


class RecordingExtractor(BaseExtractor):
    def __init__(self, name: str) -> None:
        self.name = name  # type: ignore[misc]
        self.calls = 0

    def extract(self, content: bytes) -> str:
        self.calls += 1
        return content.decode()


def _make_dispatcher() -> tuple[FormatDispatcher, dict[MediaKind, RecordingExtractor]]:
    extractors = {
        MediaKind.PDF: RecordingExtractor("pdf"),
        MediaKind.IMAGE: RecordingExtractor("ocr"),
        MediaKind.TEXT: RecordingExtractor("text"),
    }
    return FormatDispatcher(extractors), extractors


class TestSelect:
    @pytest.mark.parametrize(
        ("mime_type", "expected"),
        [
            ("application/pdf", "pdf"),
            ("image/png", "ocr"),
            ("image/jpeg", "ocr"),
            ("text/plain", "text"),
        ],
    )
    def test_routes_by_mime_type(self, mime_type: str, expected: str) -> None:
        dispatcher, _ = _make_dispatcher()
        artifact = UploadedArtifact.from_bytes(b"x", mime_type)
        assert dispatcher.select(artifact).name == expected

    def test_unsupported_kind_names_mime_type(self) -> None:
        dispatcher, extractors = _make_dispatcher()
        artifact = UploadedArtifact.from_bytes(b"PK\x03\x04", "application/zip", "a.zip")
        with pytest.raises(UnsupportedFormatError, match="application/zip") as exc_info:
            dispatcher.select(artifact)
        assert exc_info.value.mime_type == "application/zip"
        assert all(extractor.calls == 0 for extractor in extractors.values())

    def test_kind_without_registered_extractor_is_unsupported(self) -> None:
        dispatcher = FormatDispatcher({MediaKind.TEXT: RecordingExtractor("text")})
        artifact = UploadedArtifact.from_bytes(b"%PDF", "application/pdf")
        with pytest.raises(UnsupportedFormatError, match="application/pdf"):
            dispatcher.select(artifact)


class TestConstruction:
    def test_rejects_extractor_for_unsupported_kind(self) -> None:
        with pytest.raises(ValueError, match="UNSUPPORTED"):
            FormatDispatcher({MediaKind.UNSUPPORTED: RecordingExtractor("x")})

    def test_lists_supported_kinds(self) -> None:
        dispatcher, _ = _make_dispatcher()
        assert set(dispatcher.supported_kinds) == {MediaKind.PDF, MediaKind.IMAGE, MediaKind.TEXT}
