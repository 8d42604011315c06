from __future__ import annotations

from typing import Any, Optional

import httpx

from app.core.errors import ExternalServiceError


class HuggingFaceSummarizer:
    """Single-attempt client for a Hugging Face Inference API summarization model."""

    def __init__(
        self,
        url: str,
        token: Optional[str] = None,
        timeout_s: float = 10.0,
        max_length: int = 150,
        min_length: int = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._url = url
        self._token = (token or "").strip() or None
        self._timeout_s = timeout_s
        self._max_length = max_length
        self._min_length = min_length
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def summarize(self, prompt: str) -> str:
        payload = {
            "inputs": prompt,
            "parameters": {
                "max_length": self._max_length,
                "min_length": self._min_length,
                "do_sample": False,
            },
        }
        try:
            with httpx.Client(timeout=self._timeout_s, transport=self._transport) as client:
                response = client.post(self._url, json=payload, headers=self._headers())
        except httpx.HTTPError as exc:
            raise ExternalServiceError(f"Summarizer request failed: {exc}", code="network_error") from exc

        if not response.is_success:
            raise ExternalServiceError(
                f"Summarizer returned HTTP {response.status_code}",
                code="bad_status",
            )

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise ExternalServiceError("Summarizer returned invalid JSON", code="malformed_response") from exc

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            raise ExternalServiceError("Summarizer response has unexpected shape", code="malformed_response")
        summary = data[0].get("summary_text")
        if not isinstance(summary, str) or not summary.strip():
            raise ExternalServiceError("Summarizer response has no summary_text", code="malformed_response")
        return summary
