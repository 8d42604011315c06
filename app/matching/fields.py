from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

DEFAULT_TITLE = "Target Position"
DEFAULT_COMPANY = "Target Company"


@dataclass(frozen=True, slots=True)
class FieldRule:
    name: str
    pattern: re.Pattern[str]


TITLE_RULES: tuple[FieldRule, ...] = (
    FieldRule("label", re.compile(r"\b(?:position|role|title|job):\s*([^\n,.]+)", re.IGNORECASE)),
    FieldRule(
        "hiring_phrase",
        re.compile(r"\b(?:hiring|seeking|looking for)\s+(?:an?\b)?\s*([^\n,.]{10,50})", re.IGNORECASE),
    ),
    FieldRule("title_case_line", re.compile(r"^([A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+){1,4})[ \t]*$", re.MULTILINE)),
)

COMPANY_RULES: tuple[FieldRule, ...] = (
    FieldRule("label", re.compile(r"\b(?:company|at|employer):\s*([^\n,.]+)", re.IGNORECASE)),
    FieldRule("join_phrase", re.compile(r"\b(?:join|work at|careers at)\s+([^\n,.]{2,30})", re.IGNORECASE)),
)


def extract_field(text: str, rules: Sequence[FieldRule], default: str) -> str:
    """Return the first rule capture found in ``text``; rule order decides, not position."""
    if not text:
        return default
    for rule in rules:
        match = rule.pattern.search(text)
        if match is None:
            continue
        value = (match.group(1) or "").strip()
        if value:
            return value
    return default


def extract_title(jd_text: str) -> str:
    return extract_field(jd_text, TITLE_RULES, DEFAULT_TITLE)


def extract_company(jd_text: str) -> str:
    return extract_field(jd_text, COMPANY_RULES, DEFAULT_COMPANY)
