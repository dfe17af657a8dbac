"""
Ollama chat/model client over the OpenAI-compatible API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from openai import AsyncOpenAI, NotFoundError, OpenAIError

from vault_search.config import settings
from vault_search.embeddings.client import SERVER_UNREACHABLE_NOTICE
from vault_search.notify import LoggingNotifier, Notifier

DEFAULT_CHAT_MODEL = settings.chat_model
DEFAULT_TEMPERATURE = 0.0
PROBE_PROMPT = "Why is the sky blue?"
NO_MODELS_NOTICE = "No models found from Ollama."

logger = logging.getLogger(__name__)


class LLMClient:
    def __init__(
        self,
        model: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        notifier: Notifier | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self.model = DEFAULT_CHAT_MODEL if model is None else model
        self.temperature = temperature
        self.notifier = notifier or LoggingNotifier()
        # Ollama ignores the key but the client requires one.
        self.client = client or AsyncOpenAI(
            api_key="ollama",
            base_url=f"{settings.ollama_base_url.rstrip('/')}/v1",
            timeout=settings.ollama_timeout_sec,
        )

    async def list_models(self) -> List[str]:
        """Names of the models the server has pulled; empty on failure."""
        try:
            page = await self.client.models.list()
        except OpenAIError as exc:
            logger.warning("Listing models failed", extra={"error": str(exc)})
            self.notifier.notify(SERVER_UNREACHABLE_NOTICE)
            return []

        names = [model.id for model in page.data]
        if names:
            self.notifier.notify(f"Available models: {', '.join(names)}")
        else:
            self.notifier.notify(NO_MODELS_NOTICE)
        return names

    async def chat(self, messages: List[Dict[str, Any]]) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            messages=messages,
        )
        choice = response.choices[0].message
        return choice.content or ""

    async def check_chat_model(self, available_models: List[str]) -> str | None:
        """
        Send a probe prompt when the chat model is set and available.

        Returns the model's reply, or None when the check was skipped or failed.
        """
        if not self.model or self.model not in available_models:
            return None

        try:
            reply = await self.chat([{"role": "user", "content": PROBE_PROMPT}])
        except NotFoundError:
            self.notifier.notify(
                f"The requested model {self.model} is not available in Ollama. "
                "Please pull or select a different model."
            )
            return None
        except OpenAIError as exc:
            logger.warning("Chat probe failed", extra={"model": self.model, "error": str(exc)})
            self.notifier.notify(SERVER_UNREACHABLE_NOTICE)
            return None

        if not reply:
            self.notifier.notify(
                "Ollama did not return a chat response. Please check your model and Ollama server."
            )
            return None
        self.notifier.notify(reply)
        return reply


__all__ = ["LLMClient", "DEFAULT_CHAT_MODEL", "DEFAULT_TEMPERATURE", "PROBE_PROMPT", "NO_MODELS_NOTICE"]
