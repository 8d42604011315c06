"""Matching policy: caps, multipliers, level bands and fallback suggestions.

The policy ships as ``app/config/matching.yaml`` and is read once per process.
Callers look values up by dotted path and always pass the default they would
use if the key were absent, so a trimmed policy file degrades gracefully.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from app.core.errors import PolicyConfigError

POLICY_PATH = Path(__file__).resolve().parents[1] / "config" / "matching.yaml"


def load_matching_policy(path: Path) -> dict[str, Any]:
    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise PolicyConfigError(f"matching policy file is missing: {path}") from exc
    except (OSError, yaml.YAMLError) as exc:
        raise PolicyConfigError(f"cannot load matching policy {path}: {exc}") from exc

    if not isinstance(document, dict):
        raise PolicyConfigError(f"matching policy {path} must be a mapping of sections")
    return document


@lru_cache(maxsize=1)
def get_matching_config() -> Mapping[str, Any]:
    return load_matching_policy(POLICY_PATH)


def get_matching_value(path: str, default: Any = None) -> Any:
    """Return ``scoring.score_cap``-style entries, or ``default`` when any segment is absent."""
    if not path:
        return default
    node: Any = get_matching_config()
    for segment in path.split("."):
        if not isinstance(node, dict) or segment not in node:
            return default
        node = node[segment]
    return node
