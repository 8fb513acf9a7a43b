from app.config.settings import Settings
from app.extraction.dispatcher import FormatDispatcher
from app.extraction.exceptions import ExtractionError, ExtractionFailedError
from app.extraction.models import ExtractionResult, MediaKind, UploadedArtifact
from app.extraction.plain_text import PlainTextExtractor
from app.extraction.validator import validate_extracted_text
from app.logging.logger import Log
from app.ocr.factory import OcrExtractorFactory
from app.pdf.factory import PdfExtractorFactory


class ExtractionPipeline:
    """Dispatch -> extract -> validate, for a single artifact.

    The pipeline holds no per-request state, so one instance can serve
    concurrent callers.
    """

    def __init__(self, dispatcher: FormatDispatcher) -> None:
        self._dispatcher = dispatcher

    def run(self, artifact: UploadedArtifact) -> ExtractionResult:
        """Extract validated text from the artifact.

        Raises:
            ExtractionError: on any failure; partial text is never returned.
        """
        Log.info(
            f"File received: {artifact.filename or '<unnamed>'} "
            f"({artifact.mime_type}, {artifact.size_bytes} bytes)"
        )
        extractor = self._dispatcher.select(artifact)
        Log.info(f"Processing {artifact.mime_type} with {extractor.name}")

        try:
            raw_text = extractor.extract(artifact.content)
        except ExtractionError as exc:
            contextual = exc.with_context(mime_type=artifact.mime_type, extractor=extractor.name)
            if contextual is exc:
                raise
            raise contextual from exc
        except Exception as exc:
            raise ExtractionFailedError(
                f"{extractor.name} failed on {artifact.mime_type}: {exc}",
                mime_type=artifact.mime_type,
                extractor=extractor.name,
            ) from exc

        result = validate_extracted_text(
            raw_text,
            extractor=extractor.name,
            mime_type=artifact.mime_type,
        )
        Log.info(f"Text extraction successful: {result.length} chars")
        Log.debug(f"First 200 characters: {result.text[:200]}")
        return result

    def run_to_payload(self, artifact: UploadedArtifact) -> dict[str, object]:
        """Run the pipeline and shape the outcome into the outbound payload."""
        try:
            return self.run(artifact).to_dict()
        except ExtractionError as exc:
            Log.error(f"File processing error [{exc.kind.value}]: {exc.message}")
            return dict(exc.to_dict())


def build_extraction_pipeline(settings: Settings) -> ExtractionPipeline:
    """Build an ExtractionPipeline with one extractor per supported kind."""
    dispatcher = FormatDispatcher(
        {
            MediaKind.PDF: PdfExtractorFactory.create(settings),
            MediaKind.IMAGE: OcrExtractorFactory.create(settings),
            MediaKind.TEXT: PlainTextExtractor(),
        }
    )
    return ExtractionPipeline(dispatcher)
