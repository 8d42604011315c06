from __future__ import annotations

from app.ai.providers.huggingface_provider import HuggingFaceSummarizer
from app.ai.providers.openai_provider import OpenAISummarizer
from app.ai.types import Summarizer
from app.core.config import Settings, settings
from app.core.matching_config import get_matching_value


def get_summarizer(config: Settings = settings) -> Summarizer | None:
    if not config.summarizer_enabled:
        return None

    if config.summarizer_provider == "huggingface":
        return HuggingFaceSummarizer(
            url=config.summarizer_url,
            token=config.summarizer_token,
            timeout_s=config.summarizer_timeout_s,
            max_length=int(get_matching_value("suggestions.max_length", 150)),
            min_length=int(get_matching_value("suggestions.min_length", 30)),
        )

    if config.summarizer_provider == "openai":
        if not config.openai_api_key:
            return None
        return OpenAISummarizer(
            model=config.openai_model,
            api_key=config.openai_api_key,
            base_url=config.openai_base_url,
            timeout_s=config.summarizer_timeout_s,
        )

    raise ValueError(f"Unsupported SUMMARIZER_PROVIDER='{config.summarizer_provider}'")
