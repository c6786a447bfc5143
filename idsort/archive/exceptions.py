class ArchiveError(Exception):
    """Raised when the archive cannot be written."""
