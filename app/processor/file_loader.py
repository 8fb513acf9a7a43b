import mimetypes
from pathlib import Path

from app.extraction.models import UploadedArtifact
from app.processor.exceptions import FileReadError

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: Path) -> str:
    """Guess a media type from the file name, e.g. report.pdf -> application/pdf."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_MIME_TYPE


class FileLoader:
    """Reads a file from disk into an UploadedArtifact."""

    def load(self, path: Path, mime_type: str | None = None) -> UploadedArtifact:
        """Read file bytes and attach the declared (or guessed) media type.

        Raises:
            FileReadError: if the path is missing or unreadable.
        """
        if not path.is_file():
            raise FileReadError(f"File not found: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
        return UploadedArtifact.from_bytes(
            content,
            mime_type=mime_type or guess_mime_type(path),
            filename=path.name,
        )
