from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MatchLevel = Literal[
    "Strong Candidate Match",
    "Good Candidate Match",
    "Moderate Candidate Match",
    "Potential Candidate Match",
]


class MatchReport(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    match_score: int = Field(ge=0, le=95)
    match_level: MatchLevel
    position_title: str
    company: str
    missing_keywords: list[str] = Field(default_factory=list, max_length=5)
    skills_found: list[str] = Field(default_factory=list, max_length=8)
    improvements: list[str] = Field(default_factory=list)


class AnalyzeTextRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_text: str = Field(default="", max_length=50000)
    job_description: str = Field(default="", max_length=50000)
