from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    max_upload_bytes: int
    term_catalog_path: str | None
    summarizer_enabled: bool
    summarizer_provider: str
    summarizer_url: str
    summarizer_token: str | None
    summarizer_timeout_s: float
    openai_api_key: str | None
    openai_model: str
    openai_base_url: str | None


settings = Settings(
    host=_get_env("HOST", "0.0.0.0") or "0.0.0.0",
    port=_get_env_int("PORT", 8000),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ],
    ),
    cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX"),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024),
    term_catalog_path=_get_env("TERM_CATALOG_PATH"),
    summarizer_enabled=_get_env_bool("SUMMARIZER_ENABLED", True),
    summarizer_provider=(_get_env("SUMMARIZER_PROVIDER", "huggingface") or "huggingface").strip().lower(),
    summarizer_url=_get_env(
        "SUMMARIZER_URL",
        "https://api-inference.huggingface.co/models/facebook/bart-large-cnn",
    )
    or "https://api-inference.huggingface.co/models/facebook/bart-large-cnn",
    summarizer_token=_get_env("SUMMARIZER_TOKEN"),
    summarizer_timeout_s=_get_env_float("SUMMARIZER_TIMEOUT_S", 10.0),
    openai_api_key=_get_env("OPENAI_API_KEY"),
    openai_model=_get_env("OPENAI_MODEL", "gpt-4o-mini") or "gpt-4o-mini",
    openai_base_url=_get_env("OPENAI_BASE_URL"),
)

if settings.summarizer_provider not in {"huggingface", "openai"}:
    raise RuntimeError("SUMMARIZER_PROVIDER must be either 'huggingface' or 'openai'.")
