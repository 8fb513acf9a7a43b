from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.analysis.models import AnalysisResult
from app.extraction.models import ExtractionResult, UploadedArtifact


@dataclass(slots=True)
class PipelineContext:
    artifact: UploadedArtifact
    extraction_result: ExtractionResult | None = None
    analysis_result: AnalysisResult | None = None

    def to_payload(self) -> dict[str, object]:
        """Outbound payload: extraction fields, plus analysis fields when present."""
        payload: dict[str, object] = {}
        if self.extraction_result is not None:
            payload.update(self.extraction_result.to_dict())
        if self.analysis_result is not None:
            payload.update(self.analysis_result.to_dict())
        return payload


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
