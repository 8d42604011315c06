from __future__ import annotations

from typing import Protocol, Sequence


class TermCatalog(Protocol):
    def is_stop_word(self, term: str) -> bool:
        """Return True when ``term`` must never become a keyword."""

    def is_technical_term(self, term: str) -> bool:
        """Return True when ``term`` is a curated skill, tool or domain concept."""

    def multi_word_technical_terms(self) -> Sequence[str]:
        """Return normalized technical terms that span more than one token."""

    def display_name(self, term: str) -> str:
        """Return the curated spelling of ``term`` for reports."""
