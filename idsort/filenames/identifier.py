import re

from idsort.filenames.vocabulary import IDENTIFIER_NOISE_RE, base_name, strip_noise

_EDGE_UNDERSCORES_RE = re.compile(r"^_+|_+$")
_EDGE_DIGITS_RE = re.compile(r"^\d+_?|_?\d+$")
_NAME_PAIR_RE = re.compile(r"^([a-z]{2,})_([a-z]{2,})$")
_LETTERS_RE = re.compile(r"^[a-z]+$")


class IdentifierDeriver:
    """Derives a candidate person identifier from a filename.

    ``john_smith_front.jpg`` -> ``john_smith``; ``johnsmith.jpg`` is split at
    the first plausible boundary; anything that is not letters after cleanup
    yields None.
    """

    def derive(self, filename: str) -> str | None:
        cleaned = self.clean(filename)

        pair = _NAME_PAIR_RE.match(cleaned)
        if pair:
            return f"{pair.group(1)}_{pair.group(2)}"

        if not _LETTERS_RE.match(cleaned):
            return None

        if 6 <= len(cleaned) <= 20:
            for split_at in range(2, min(8, len(cleaned) - 2) + 1):
                first, last = cleaned[:split_at], cleaned[split_at:]
                if len(last) >= 2:
                    return f"{first}_{last}"

        if 3 <= len(cleaned) <= 25:
            return cleaned
        return None

    def clean(self, filename: str) -> str:
        stem = strip_noise(base_name(filename), IDENTIFIER_NOISE_RE)
        stem = _EDGE_UNDERSCORES_RE.sub("", stem)
        return _EDGE_DIGITS_RE.sub("", stem)
