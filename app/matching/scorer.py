from __future__ import annotations

import math
from dataclasses import dataclass, field

from app.core.matching_config import get_matching_value
from app.taxonomy import TermCatalog, get_default_term_catalog

from .keywords import KeywordList, keyword_terms


@dataclass(frozen=True, slots=True)
class ScoreResult:
    match_score: int
    match_level: str
    missing_keywords: list[str] = field(default_factory=list)
    skills_found: list[str] = field(default_factory=list)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def classify_match_level(match_score: int) -> str:
    levels = get_matching_value("scoring.levels", []) or []
    for level in sorted(levels, key=lambda item: int(item["min_score"]), reverse=True):
        if match_score >= int(level["min_score"]):
            return str(level["label"])
    return "Potential Candidate Match"


def _compute_score(
    matched: list[str],
    technical_matches: list[str],
    technical_requirements: list[str],
    jd_terms: list[str],
) -> int:
    if technical_requirements:
        multiplier = float(get_matching_value("scoring.technical_multiplier", 100))
        raw = multiplier * len(technical_matches) / len(technical_requirements)
    else:
        multiplier = float(get_matching_value("scoring.fallback_multiplier", 85))
        raw = multiplier * len(matched) / max(len(jd_terms), 1)
    cap = int(get_matching_value("scoring.score_cap", 95))
    return min(_round_half_up(raw), cap)


def score_keywords(
    resume_keywords: KeywordList,
    jd_keywords: KeywordList,
    catalog: TermCatalog | None = None,
) -> ScoreResult:
    catalog = catalog or get_default_term_catalog()
    resume_terms = keyword_terms(resume_keywords)
    jd_terms = keyword_terms(jd_keywords)
    resume_set = {term.lower() for term in resume_terms}

    matched = [term for term in jd_terms if term.lower() in resume_set]
    missing_limit = int(get_matching_value("scoring.missing_keywords_limit", 6))
    missing = [
        term
        for term in jd_terms
        if term.lower() not in resume_set and catalog.is_technical_term(term)
    ][:missing_limit]

    technical_matches = [term for term in matched if catalog.is_technical_term(term)]
    technical_requirements = [term for term in jd_terms if catalog.is_technical_term(term)]
    match_score = _compute_score(matched, technical_matches, technical_requirements, jd_terms)

    if matched:
        skills_found = matched[: int(get_matching_value("scoring.skills_found_limit", 8))]
    else:
        fallback_limit = int(get_matching_value("scoring.resume_skills_fallback_limit", 5))
        skills_found = [term for term in resume_terms if catalog.is_technical_term(term)][:fallback_limit]

    return ScoreResult(
        match_score=match_score,
        match_level=classify_match_level(match_score),
        missing_keywords=missing,
        skills_found=skills_found,
    )
