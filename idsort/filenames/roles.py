from enum import Enum


class Role(str, Enum):
    """Document function of an image."""

    FRONT = "front"
    BACK = "back"
    SELFIE = "selfie"
    UNKNOWN = "unknown"


# Archive and display order: front, back, selfie, unknown.
ROLE_ORDER: dict[Role, int] = {
    Role.FRONT: 0,
    Role.BACK: 1,
    Role.SELFIE: 2,
    Role.UNKNOWN: 3,
}
