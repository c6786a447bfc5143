import uuid
from dataclasses import dataclass, field
from enum import Enum

from idsort.extraction.models import IdentityRecord
from idsort.filenames.roles import Role
from idsort.processor.exceptions import (
    IdentityAssignmentError,
    InvalidStatusTransitionError,
    RoleAlreadyAssignedError,
)


class ProcessingStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


_ALLOWED_TRANSITIONS: dict[ProcessingStatus, frozenset[ProcessingStatus]] = {
    ProcessingStatus.PENDING: frozenset({ProcessingStatus.PROCESSING}),
    ProcessingStatus.PROCESSING: frozenset(
        {ProcessingStatus.COMPLETED, ProcessingStatus.FAILED}
    ),
    ProcessingStatus.COMPLETED: frozenset(),
    ProcessingStatus.FAILED: frozenset(),
}


@dataclass(frozen=True)
class ImageFile:
    """An input file as handed over by the image loader."""

    filename: str
    content: bytes


@dataclass(eq=False)
class ImageRecord:
    """One input image as it moves through the pipeline.

    Role and identity are write-once; status only moves forward
    (pending -> processing -> completed | failed).
    """

    filename: str
    content: bytes = b""
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    role: Role | None = None
    identity: IdentityRecord | None = None
    status: ProcessingStatus = ProcessingStatus.PENDING
    error: str | None = None
    ocr_confidence: float | None = None

    @classmethod
    def from_file(cls, image_file: ImageFile) -> "ImageRecord":
        return cls(filename=image_file.filename, content=image_file.content)

    @property
    def has_identity(self) -> bool:
        return self.identity is not None and self.identity.is_valid

    def assign_role(self, role: Role) -> None:
        if self.role is not None:
            raise RoleAlreadyAssignedError(
                f"Image {self.filename} already has role '{self.role.value}'"
            )
        self.role = role

    def assign_identity(self, identity: IdentityRecord) -> None:
        if self.role is not Role.FRONT:
            raise IdentityAssignmentError(
                f"Identity can only be attached to front images, {self.filename} is "
                f"'{self.role.value if self.role else 'unclassified'}'"
            )
        if self.identity is not None:
            raise IdentityAssignmentError(f"Image {self.filename} already has an identity")
        self.identity = identity

    def mark_processing(self) -> None:
        self._transition(ProcessingStatus.PROCESSING)

    def mark_completed(self) -> None:
        self._transition(ProcessingStatus.COMPLETED)

    def mark_failed(self, reason: str) -> None:
        self._transition(ProcessingStatus.FAILED)
        self.error = reason

    def _transition(self, target: ProcessingStatus) -> None:
        if target not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidStatusTransitionError(
                f"Image {self.filename}: cannot move from "
                f"'{self.status.value}' to '{target.value}'"
            )
        self.status = target
