from __future__ import annotations

import logging

from app.ai.types import Summarizer
from app.core.errors import InputValidationError
from app.core.matching_config import get_matching_value
from app.matching.fields import extract_company, extract_title
from app.matching.keywords import extract_keywords
from app.matching.scorer import score_keywords
from app.schemas.match import MatchReport
from app.services.suggestions import SuggestionSuccess, request_suggestions, resolve_suggestions
from app.taxonomy import TermCatalog, get_default_term_catalog

logger = logging.getLogger(__name__)


def analyze(
    resume_text: str,
    job_description: str,
    *,
    summarizer: Summarizer | None = None,
    catalog: TermCatalog | None = None,
) -> MatchReport:
    """Score ``resume_text`` against ``job_description`` and build the report.

    Suggestions are requested last and only ever fill ``improvements``; a
    failing summarizer falls back to the static list.
    """
    if not job_description or not job_description.strip():
        raise InputValidationError("Job description is required")

    catalog = catalog or get_default_term_catalog()
    resume_text = resume_text or ""

    resume_keywords = extract_keywords(resume_text, catalog=catalog)
    jd_keywords = extract_keywords(job_description, catalog=catalog)
    score = score_keywords(resume_keywords, jd_keywords, catalog=catalog)

    position_title = extract_title(job_description)
    company = extract_company(job_description)

    suggestion_result = request_suggestions(resume_text, job_description, summarizer=summarizer)
    improvements = resolve_suggestions(suggestion_result)

    report_missing_limit = int(get_matching_value("report.missing_keywords_limit", 5))
    report = MatchReport(
        match_score=score.match_score,
        match_level=score.match_level,
        position_title=position_title,
        company=company,
        missing_keywords=[catalog.display_name(term) for term in score.missing_keywords[:report_missing_limit]],
        skills_found=[catalog.display_name(term) for term in score.skills_found],
        improvements=improvements,
    )
    logger.info(
        "analysis_completed score=%s level=%s resume_keywords=%s jd_keywords=%s suggestions=%s",
        report.match_score,
        report.match_level,
        len(resume_keywords),
        len(jd_keywords),
        "summarizer" if isinstance(suggestion_result, SuggestionSuccess) else "fallback",
    )
    return report
