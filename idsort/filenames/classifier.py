from idsort.filenames.roles import Role
from idsort.filenames.vocabulary import (
    BACK_TOKENS,
    DOCUMENT_TOKENS,
    FRONT_TOKENS,
    GENERIC_DOCUMENT_TOKENS,
    SELFIE_STRONG_TOKENS,
    SELFIE_WEAK_TOKENS,
    contains_any,
    fold,
)
from idsort.logging.logger import Log


class DocumentClassifier:
    """Assigns a document role from the filename alone.

    Checks run in a fixed precedence, first match wins:
    back -> selfie (strong, then weak) -> front (explicit, then implicit)
    -> front (generic document words) -> unknown.

    Back runs first because ``dl_back`` contains the front token ``dl``;
    strong selfie words run before front so ``selfie_of_dl_holder`` stays a
    selfie.
    """

    def classify(self, filename: str) -> Role:
        name = fold(filename)

        if self._is_back(name):
            role = Role.BACK
        elif self._is_selfie(name):
            role = Role.SELFIE
        elif self._is_front(name):
            role = Role.FRONT
        elif contains_any(name, GENERIC_DOCUMENT_TOKENS):
            # Document-like names still get an extraction attempt.
            role = Role.FRONT
        else:
            role = Role.UNKNOWN

        Log.debug(f"Classified {filename} as {role.value}", image=filename, role=role.value)
        return role

    def _is_back(self, name: str) -> bool:
        return contains_any(name, BACK_TOKENS)

    def _is_selfie(self, name: str) -> bool:
        if contains_any(name, SELFIE_STRONG_TOKENS):
            return True
        return contains_any(name, SELFIE_WEAK_TOKENS) and not contains_any(
            name, DOCUMENT_TOKENS
        )

    def _is_front(self, name: str) -> bool:
        return contains_any(name, FRONT_TOKENS) or contains_any(name, DOCUMENT_TOKENS)
