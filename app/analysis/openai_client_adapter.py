import httpx
import openai

from app.analysis.client_base import BaseAnalysisClient
from app.analysis.exceptions import AnalysisError, AnalysisNetworkError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        try:
            self._client = openai.OpenAI(
                api_key=api_key or None,
                timeout=timeout_seconds,
                base_url=base_url,
            )
        except openai.OpenAIError as exc:
            raise AnalysisError(f"Cannot create AI client: {exc}") from exc

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AnalysisError("AI returned empty response")
        return content
