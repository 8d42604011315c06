from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from app.ai.factory import get_summarizer
from app.ai.types import Summarizer
from app.core.errors import ExternalServiceError
from app.core.matching_config import get_matching_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionSuccess:
    suggestions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SuggestionUnavailable:
    reason: str


SuggestionResult = Union[SuggestionSuccess, SuggestionUnavailable]


def fallback_suggestions() -> list[str]:
    return [str(item) for item in get_matching_value("suggestions.fallback", [])]


def build_prompt(resume_text: str, jd_text: str) -> str:
    excerpt = int(get_matching_value("suggestions.excerpt_chars", 200))
    return (
        "Resume analysis for job application:\n\n"
        f"Job Requirements: {jd_text[:excerpt]}\n\n"
        f"Resume Summary: {resume_text[:excerpt]}\n\n"
        "Provide 3 brief improvement suggestions for the resume:"
    )


def split_summary(summary: str) -> list[str]:
    """Turn summary prose into at most three sentence-sized suggestions."""
    min_chars = int(get_matching_value("suggestions.min_fragment_chars", 11))
    count = int(get_matching_value("suggestions.count", 3))
    fragments = [part.strip() for part in summary.split(".")]
    return [f"{part}." for part in fragments if len(part) >= min_chars][:count]


def request_suggestions(
    resume_text: str,
    jd_text: str,
    summarizer: Summarizer | None = None,
) -> SuggestionResult:
    client = get_summarizer() if summarizer is None else summarizer
    if client is None:
        return SuggestionUnavailable(reason="summarizer_disabled")

    prompt = build_prompt(resume_text, jd_text)
    try:
        summary = client.summarize(prompt)
    except ExternalServiceError as exc:
        logger.warning("suggestions_fallback code=%s: %s", exc.code, exc)
        return SuggestionUnavailable(reason=exc.code)
    except Exception as exc:  # noqa: BLE001 - suggestion failures never reach the caller
        logger.warning("suggestions_fallback code=summarizer_exception: %s", exc)
        return SuggestionUnavailable(reason="summarizer_exception")

    suggestions = split_summary(summary)
    if not suggestions:
        logger.info("suggestions_fallback code=empty_summary")
        return SuggestionUnavailable(reason="empty_summary")
    return SuggestionSuccess(suggestions=suggestions)


def resolve_suggestions(result: SuggestionResult) -> list[str]:
    if isinstance(result, SuggestionSuccess):
        return list(result.suggestions)
    return fallback_suggestions()


def suggest(resume_text: str, jd_text: str, summarizer: Summarizer | None = None) -> list[str]:
    return resolve_suggestions(request_suggestions(resume_text, jd_text, summarizer=summarizer))
