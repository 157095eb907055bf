class ImportCancelledError(Exception):
    """Raised when the caller cancels an import in flight."""
