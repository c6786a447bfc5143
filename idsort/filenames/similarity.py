import re

from rapidfuzz.distance import Levenshtein

from idsort.filenames.vocabulary import SIMILARITY_NOISE_RE, fold, strip_noise

SIMILARITY_THRESHOLD = 0.6
MIN_COMPARABLE_LENGTH = 3

_NON_LETTER_RE = re.compile(r"[^a-z]")


class SimilarityMatcher:
    """Fuzzy comparison of two filename stems by normalized edit distance."""

    def similar(self, a: str, b: str) -> bool:
        """Return True when the cleaned stems are more than 60% alike.

        Similarity is ``1 - levenshtein(longer, shorter) / len(longer)``.
        Stems shorter than three letters after cleaning never match.
        """
        clean_a = self.clean(a)
        clean_b = self.clean(b)
        if len(clean_a) < MIN_COMPARABLE_LENGTH or len(clean_b) < MIN_COMPARABLE_LENGTH:
            return False
        return self.score(clean_a, clean_b) > SIMILARITY_THRESHOLD

    def score(self, a: str, b: str) -> float:
        return Levenshtein.normalized_similarity(a, b)

    def clean(self, value: str) -> str:
        stripped = strip_noise(fold(value), SIMILARITY_NOISE_RE)
        return _NON_LETTER_RE.sub("", stripped)
