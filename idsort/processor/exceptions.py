class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InvalidStatusTransitionError(ProcessorError):
    """Raised when an image record's status would move backwards."""


class RoleAlreadyAssignedError(ProcessorError):
    """Raised when a role is assigned to an image that already has one."""


class IdentityAssignmentError(ProcessorError):
    """Raised when an identity is attached twice or to a non-front image."""
