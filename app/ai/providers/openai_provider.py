from __future__ import annotations

from typing import Optional

from openai import OpenAI

from app.ai.types import ChatMessage
from app.core.errors import ExternalServiceError

_SYSTEM_PROMPT = (
    "You review resumes against job descriptions. "
    "Reply with exactly three short improvement suggestions as plain sentences, each ending with a period."
)


class OpenAISummarizer:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 10.0,
        temperature: float = 0.2,
        max_tokens: int = 300,
    ):
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        key = (api_key or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = OpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=0,
        )

    def summarize(self, prompt: str) -> str:
        messages = [
            ChatMessage(role="system", content=_SYSTEM_PROMPT),
            ChatMessage(role="user", content=prompt),
        ]
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:  # noqa: BLE001 - any SDK failure means the summarizer is unavailable
            raise ExternalServiceError(f"OpenAI request failed: {exc}", code="llm_exception") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content or not content.strip():
            raise ExternalServiceError("OpenAI returned an empty response", code="empty_response")
        return str(content)
