"""Filename vocabulary shared by the classifier, identifier deriver and matcher.

Token tuples are ordered: classification checks them as substrings, and the
stripping patterns try alternatives left to right at each position.
"""

from __future__ import annotations

import re
import unicodedata

IMAGE_EXTENSIONS: tuple[str, ...] = ("jpg", "jpeg", "png", "gif", "bmp", "webp")

BACK_TOKENS: tuple[str, ...] = (
    "back",
    "rear",
    "reverse",
    "dl_back",
    "license_back",
    "id_back",
)
SELFIE_STRONG_TOKENS: tuple[str, ...] = (
    "selfie",
    "portrait",
    "headshot",
    "profile",
    "face_",
    "person_",
    "me_",
    "self_",
    "pic_of_",
    "photo_of_me",
)
SELFIE_WEAK_TOKENS: tuple[str, ...] = ("photo", "pic", "shot")
FRONT_TOKENS: tuple[str, ...] = ("front", "dl_front", "license_front", "id_front")
DOCUMENT_TOKENS: tuple[str, ...] = (
    "dl",
    "license",
    "licence",
    "id",
    "driver",
    "identification",
    "state",
    "gov",
    "official",
    "permit",
    "card",
)
GENERIC_DOCUMENT_TOKENS: tuple[str, ...] = (
    "doc",
    "document",
    "card",
    "scan",
    "copy",
    "image",
)

# Role words removed before deriving a person identifier from a filename.
IDENTIFIER_NOISE_TOKENS: tuple[str, ...] = (
    "front",
    "back",
    "selfie",
    "photo",
    "dl",
    "license",
    "id",
    "driver",
    "card",
    "document",
    "scan",
    "copy",
    "image",
)
# Narrower set removed before fuzzy filename comparison.
SIMILARITY_NOISE_TOKENS: tuple[str, ...] = (
    "front",
    "back",
    "selfie",
    "photo",
    "dl",
    "license",
    "id",
)


def _noise_pattern(tokens: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("(?:" + "|".join(re.escape(t) for t in tokens) + ")_?")


IDENTIFIER_NOISE_RE: re.Pattern[str] = _noise_pattern(IDENTIFIER_NOISE_TOKENS)
SIMILARITY_NOISE_RE: re.Pattern[str] = _noise_pattern(SIMILARITY_NOISE_TOKENS)

_EXTENSION_RE: re.Pattern[str] = re.compile(
    r"\.(?:" + "|".join(IMAGE_EXTENSIONS) + r")$",
    re.IGNORECASE,
)


def fold(filename: str) -> str:
    """Lowercase *filename* and drop diacritics (``José`` -> ``jose``)."""
    decomposed = unicodedata.normalize("NFKD", filename)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


def strip_extension(filename: str) -> str:
    """Remove a trailing image extension; other suffixes are left in place."""
    return _EXTENSION_RE.sub("", filename)


def base_name(filename: str) -> str:
    """Folded filename without its image extension."""
    return strip_extension(fold(filename))


def contains_any(text: str, tokens: tuple[str, ...]) -> bool:
    return any(token in text for token in tokens)


def strip_noise(text: str, pattern: re.Pattern[str]) -> str:
    """Remove every occurrence of the vocabulary compiled into *pattern*."""
    return pattern.sub("", text)
