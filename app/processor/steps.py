from app.analysis.base import BaseAnalyzer
from app.extraction.pipeline import ExtractionPipeline
from app.logging.logger import Log
from app.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, extraction_pipeline: ExtractionPipeline) -> None:
        self._extraction_pipeline = extraction_pipeline

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extraction_result = self._extraction_pipeline.run(context.artifact)
        Log.info(
            f"Extracted {context.extraction_result.length} chars from "
            f"{context.artifact.filename or '<unnamed>'}"
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction_result is None:
            raise ValueError("PipelineContext.extraction_result must be set before analysis")
        context.analysis_result = self._analyzer.analyze(context.extraction_result.text)
        return context
