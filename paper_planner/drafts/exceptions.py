from paper_planner.drafts.models import Violation


class DraftError(Exception):
    """Base exception for LLM response handling."""


class DraftParseError(DraftError):
    """Raised when the response is not valid or repairable JSON."""

    def __init__(self, message: str, *, stage: str = "json", raw_snippet: str = "") -> None:
        super().__init__(message)
        self.stage = stage
        self.raw_snippet = raw_snippet


class DraftValidationError(DraftError):
    """Raised when a parsed draft breaks the section invariants."""

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        super().__init__(
            "Draft failed validation: " + "; ".join(v.message for v in violations)
        )
        self.violations = violations
