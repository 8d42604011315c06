from __future__ import annotations


class MatcherError(RuntimeError):
    """Base class for errors raised while building a match report."""


class ParseError(MatcherError):
    def __init__(self, message: str, *, source_type: str = "unknown"):
        super().__init__(message)
        self.source_type = source_type


class InputValidationError(MatcherError):
    """A required request input is missing or blank."""


class ExternalServiceError(MatcherError):
    def __init__(self, message: str, *, code: str = "summarizer_unavailable"):
        super().__init__(message)
        self.code = code


class PolicyConfigError(MatcherError):
    """The matching policy file is missing, unreadable or not a mapping."""
