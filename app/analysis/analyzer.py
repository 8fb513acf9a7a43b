"""AI-powered explanation and practice question generator."""

from pathlib import Path

from app.analysis.base import BaseAnalyzer
from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import AnalysisError
from app.analysis.models import AnalysisResult
from app.analysis.prompt_loader import EXPLANATION_PROMPT, QUESTIONS_PROMPT, load_prompt
from app.logging.logger import Log


class Analyzer(BaseAnalyzer):
    """Asks a chat model for an explanation, then for practice questions."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        explanation_prompt_path: Path | None = None,
        questions_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._explanation_prompt = load_prompt(EXPLANATION_PROMPT, explanation_prompt_path)
        self._questions_prompt = load_prompt(QUESTIONS_PROMPT, questions_prompt_path)

    def analyze(self, text: str) -> AnalysisResult:
        if not text.strip():
            raise AnalysisError("Cannot analyze empty text")

        explanation = self._complete(self._explanation_prompt, text)
        Log.debug(f"Explanation received: {len(explanation)} chars")

        questions = self._complete(self._questions_prompt, text)
        Log.debug(f"Questions received: {len(questions)} chars")

        Log.info(f"Analysis complete for {len(text)} chars of text")
        return AnalysisResult(explanation=explanation, questions=questions)

    def _complete(self, system_prompt: str, text: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=system_prompt,
            user_prompt=text,
        )
