from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from app.normalize.text import normalize_text

from .provider import TermCatalog


def _flatten_terms(raw: Any) -> list[str]:
    if isinstance(raw, dict):
        terms: list[str] = []
        for group in raw.values():
            terms.extend(_flatten_terms(group))
        return terms
    if isinstance(raw, list):
        return [str(item) for item in raw]
    raise ValueError("Catalog entries must be a list or a mapping of lists.")


def _catalog_key(term: str) -> str:
    return normalize_text(term).strip()


class LocalTermCatalog(TermCatalog):
    def __init__(self, catalog_path: str | Path | None = None) -> None:
        path = Path(catalog_path) if catalog_path else Path(__file__).with_name("terms.json")
        stop_words, technical_terms = self._load_catalog(path)
        self._stop_words = frozenset(stop_words)
        self._display_names = {_catalog_key(term): term.strip().lower() for term in technical_terms}
        self._display_names.pop("", None)
        self._technical_terms = frozenset(self._display_names)
        self._multi_word_terms = tuple(key for key in self._display_names if " " in key)

    @staticmethod
    def _load_catalog(path: Path) -> tuple[list[str], list[str]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise ValueError(f"Term catalog '{path}' must be a JSON object.")
        stop_words = [_catalog_key(term) for term in _flatten_terms(raw.get("stop_words", []))]
        technical_terms = _flatten_terms(raw.get("technical_terms", []))
        return [word for word in stop_words if word], technical_terms

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    @property
    def technical_terms(self) -> frozenset[str]:
        return self._technical_terms

    def is_stop_word(self, term: str) -> bool:
        return _catalog_key(term) in self._stop_words

    def is_technical_term(self, term: str) -> bool:
        return _catalog_key(term) in self._technical_terms

    def multi_word_technical_terms(self) -> tuple[str, ...]:
        return self._multi_word_terms

    def display_name(self, term: str) -> str:
        return self._display_names.get(_catalog_key(term), term)
