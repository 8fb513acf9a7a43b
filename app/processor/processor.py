from collections.abc import Sequence

from app.analysis.factory import AnalyzerFactory
from app.config.settings import Settings
from app.extraction.models import UploadedArtifact
from app.extraction.pipeline import build_extraction_pipeline
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import AnalyzeStep, ExtractTextStep


class Processor:
    """Runs pipeline steps in order for one artifact.

    Pipeline: extract -> (analyze). The first failing step aborts the run
    and its exception propagates; no partial context is returned.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, artifact: UploadedArtifact) -> PipelineContext:
        context = PipelineContext(artifact=artifact)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.error(
                    f"{type(step).__name__} failed for {artifact.filename or '<unnamed>'}: {exc}"
                )
                raise
        return context


def build_processor(settings: Settings, *, analyze: bool = False) -> Processor:
    """Build a Processor; analysis is appended only when requested."""
    steps: list[PipelineStep] = [ExtractTextStep(build_extraction_pipeline(settings))]
    if analyze:
        steps.append(AnalyzeStep(AnalyzerFactory.create(settings)))
    return Processor(steps)
