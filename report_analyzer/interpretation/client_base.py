from abc import ABC, abstractmethod
from typing import Any


class BaseInterpretationClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        max_tokens: int,
        system_prompt: str,
        user_content: list[dict[str, Any]],
    ) -> str:
        """Return the assistant message as markdown text.

        Args:
            model: Provider model name.
            max_tokens: Upper bound on the completion length.
            system_prompt: Instructions describing the expected report layout.
            user_content: OpenAI-style content parts (``text`` / ``image_url``).

        Raises:
            InterpretationError: on an unusable response.
            InterpretationNetworkError: on transport or provider failures.
        """
