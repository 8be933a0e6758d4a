from __future__ import annotations

from typing import Optional, Sequence

from openai import OpenAI

from jobgoblin.ai.types import ChatMessage
from jobgoblin.core.config import settings


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        max_tokens: int = 1500,
        temperature: float = 0.3,
    ):
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        key = (api_key or settings.openai_api_key or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        # One attempt per request; the caller surfaces failures directly.
        self._client = OpenAI(
            api_key=key,
            base_url=(base_url or settings.openai_base_url or None),
            timeout=timeout_s,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    def complete(self, messages: Sequence[ChatMessage]) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        response = self._client.chat.completions.create(
            model=self._model,
            messages=payload,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()
