from enum import Enum


class ExtractionFailureReason(str, Enum):
    """Why a document could not be turned into text."""

    UNSUPPORTED_TYPE = "UnsupportedType"
    PARSER_FAILURE = "ParserFailure"
    READ_FAILURE = "ReadFailure"


class ExtractionError(Exception):
    """Raised when text cannot be extracted from an imported document.

    ``partial_text`` carries whatever text was recovered before the failure,
    so callers can still surface it to the user.
    """

    def __init__(
        self,
        reason: ExtractionFailureReason,
        message: str,
        *,
        partial_text: str = "",
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.partial_text = partial_text
