from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityRecord:
    """Identity fields read from the text of a license front.

    Only the names are mandatory; every other field is an empty string when
    it was not found.
    """

    first_name: str
    last_name: str
    date_of_birth: str = ""
    issue_date: str = ""
    expiration_date: str = ""
    document_number: str = ""
    address: str = ""
    raw_text: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_valid(self) -> bool:
        return bool(self.first_name) and bool(self.last_name)

    def same_person(self, other: "IdentityRecord") -> bool:
        return (
            self.first_name == other.first_name and self.last_name == other.last_name
        )
