"""Exceptions raised by the analysis pipeline."""
from __future__ import annotations


class SeoAnalyzerError(Exception):
    """Base error; ``status_code`` is the HTTP status used at the API boundary."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SeoAnalyzerError):
    """Raised for missing or malformed user supplied URLs."""

    status_code = 400


class FetchError(SeoAnalyzerError):
    """Raised when the target page cannot be retrieved."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ParseError(SeoAnalyzerError):
    """Raised when the HTML document cannot be parsed."""
