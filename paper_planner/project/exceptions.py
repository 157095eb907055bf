class ProjectStoreError(Exception):
    """Raised when persisted project state cannot be read or written."""
