from collections.abc import Mapping

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import UnsupportedFormatError
from app.extraction.models import MediaKind, UploadedArtifact


class FormatDispatcher:
    """Routes an artifact to the extractor registered for its media kind."""

    def __init__(self, extractors: Mapping[MediaKind, BaseExtractor]) -> None:
        if MediaKind.UNSUPPORTED in extractors:
            raise ValueError("An extractor cannot be registered for MediaKind.UNSUPPORTED")
        self._extractors = dict(extractors)

    def select(self, artifact: UploadedArtifact) -> BaseExtractor:
        """Return the extractor for the artifact's media kind.

        Raises:
            UnsupportedFormatError: if the kind is not handled.
        """
        extractor = self._extractors.get(artifact.kind)
        if extractor is None:
            raise UnsupportedFormatError(
                f"Unsupported file type: {artifact.mime_type}",
                mime_type=artifact.mime_type,
            )
        return extractor

    @property
    def supported_kinds(self) -> list[MediaKind]:
        return list(self._extractors)
