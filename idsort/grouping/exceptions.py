class GroupingError(Exception):
    """Base exception for grouping errors."""


class GroupingInvariantError(GroupingError):
    """Raised when the clusters no longer partition the input images."""
