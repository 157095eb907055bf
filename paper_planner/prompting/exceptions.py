class PromptError(Exception):
    """Raised when a prompt template cannot be loaded."""
