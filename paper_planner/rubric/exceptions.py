class RubricError(Exception):
    """Raised when the section rubric cannot be loaded or is malformed."""
