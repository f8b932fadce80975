from typing import Any

import httpx
import openai

from report_analyzer.interpretation.client_base import BaseInterpretationClient
from report_analyzer.interpretation.exceptions import (
    InterpretationError,
    InterpretationNetworkError,
)


class OpenAIClientAdapter(BaseInterpretationClient):
    """Interpretation client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        max_tokens: int,
        system_prompt: str,
        user_content: list[dict[str, Any]],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},  # type: ignore[misc,list-item]
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise InterpretationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise InterpretationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise InterpretationError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise InterpretationError("AI returned empty response")
        return content
