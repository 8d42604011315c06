from __future__ import annotations

from dataclasses import dataclass

from app.core.matching_config import get_matching_value
from app.normalize.text import normalize_text
from app.taxonomy import TermCatalog, get_default_term_catalog


@dataclass(frozen=True, slots=True)
class Keyword:
    term: str
    frequency: int


KeywordList = tuple[Keyword, ...]


def _is_candidate_token(token: str, catalog: TermCatalog, min_length: int, symbols: str) -> bool:
    if len(token) < min_length or catalog.is_stop_word(token):
        return False
    if catalog.is_technical_term(token):
        return True
    return any(char.isdigit() or char in symbols for char in token)


def _candidate_terms(normalized: str, catalog: TermCatalog) -> list[str]:
    min_length = int(get_matching_value("keywords.min_token_length", 3))
    symbols = str(get_matching_value("keywords.technical_token_symbols", "+#.-"))

    candidates = [term for term in catalog.multi_word_technical_terms() if term in normalized]
    for raw_token in normalized.split():
        # sentence-final period: "aws." is the token "aws"
        token = raw_token.rstrip(".")
        if _is_candidate_token(token, catalog, min_length, symbols):
            candidates.append(token)
    return list(dict.fromkeys(candidates))


def extract_keywords(text: str, catalog: TermCatalog | None = None) -> KeywordList:
    """Return the most salient terms of ``text``, technical terms first.

    Within the technical and non-technical groups terms are ordered by
    descending occurrence count, ties by first occurrence in the text.
    """
    catalog = catalog or get_default_term_catalog()
    normalized = normalize_text(text)
    if not normalized.strip():
        return ()

    keywords = [
        Keyword(term=term, frequency=normalized.count(term))
        for term in _candidate_terms(normalized, catalog)
    ]
    keywords.sort(
        key=lambda item: (
            not catalog.is_technical_term(item.term),
            -item.frequency,
            normalized.find(item.term),
        )
    )
    max_terms = int(get_matching_value("keywords.max_terms", 30))
    return tuple(keywords[:max_terms])


def keyword_terms(keywords: KeywordList) -> list[str]:
    return [keyword.term for keyword in keywords]
