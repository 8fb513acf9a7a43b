from app.extraction.base import BaseExtractor


class PlainTextExtractor(BaseExtractor):
    """Decodes the buffer as UTF-8, replacing malformed byte sequences."""

    name = "plain-text"

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8", errors="replace")
