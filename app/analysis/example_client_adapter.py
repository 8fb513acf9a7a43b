"""Offline analysis client.

Returns canned replies without any network call; used for local runs and
tests, and as a template for new provider adapters.
"""

from typing import ClassVar

from app.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Answers every prompt with a fixed explanation or question set."""

    EXPLANATION: ClassVar[str] = "This document introduces its topic in simple terms."
    QUESTIONS: ClassVar[str] = (
        "Q: What is the main topic of the document?\n"
        "A: The topic introduced in its opening lines."
    )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, user_prompt
        if "question" in system_prompt.lower():
            return self.QUESTIONS
        return self.EXPLANATION
