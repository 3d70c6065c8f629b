"""Exception types for the prevalence scraper.

Only `FetchError` is raised out of this package. Malformed tables and
unparsable percentages are reported as values by the table helpers; their
exception types exist so callers can name the condition in diagnostics.
"""

from typing import Any, Dict, Optional


class ReportError(Exception):
    """Base class for scraper errors.

    Args:
        message: Human-readable description of the failure.
        url: The page the failure relates to, if any.
        context: Optional dict of additional context (status, counts, ...).
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.url = url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.url:
            parts.append(f"URL: {self.url}")

        for key, value in self.context.items():
            parts.append(f"{key}: {value}")

        return " | ".join(parts)


class FetchError(ReportError):
    """Raised when the scrape target cannot be reached or parsed."""


class MalformedTableError(ReportError):
    """A table block lacks the expected two-column structure."""


class UnparsablePercentageError(ReportError):
    """A percentage cell does not reduce to a finite number."""
