"""Rule-based identity extraction from driver-license OCR text.

Processing flow:
1. Reject text shorter than MIN_TEXT_LENGTH characters.
2. Collapse whitespace (including newlines) into single spaces.
3. Resolve the name with four strategies, first success wins:
   a. Comma form ``LASTNAME, FIRSTNAME``.
   b. Labeled first-name and last-name fields.
   c. A single labeled full-name field.
   d. First pair of adjacent all-caps words outside the template stoplist.
4. Validate name lengths; a partial name discards the whole record.
5. Read the secondary fields (dates, document number, address) best effort.
"""

from __future__ import annotations

import re
from typing import ClassVar

from idsort.extraction.base import BaseFieldExtractor
from idsort.extraction.models import IdentityRecord
from idsort.logging.logger import Log

MIN_TEXT_LENGTH = 20

FIRST_NAME_LENGTH = (2, 20)
LAST_NAME_LENGTH = (2, 25)

_DATE = r"(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})(?!\d)"

# Field labels, shared by the field patterns and the address boundary.
_FIRST_NAME_LABELS = r"FIRST\s+NAME|GIVEN\s+NAME|FIRST|FN"
_LAST_NAME_LABELS = r"LAST\s+NAME|SURNAME|LAST|LN"
_DOB_LABELS = r"DOB|D\.O\.B|DATE\s+OF\s+BIRTH|BIRTH"
_ISSUED_LABELS = r"ISS(?:UE)?\s*DATE|ISSUED|ISS"
_EXPIRES_LABELS = r"EXP(?:IRATION)?\s*DATE|EXPIRATION|EXPIRES|EXP"
_FIELD_LABELS = "|".join(
    (
        _FIRST_NAME_LABELS,
        _LAST_NAME_LABELS,
        _DOB_LABELS,
        _ISSUED_LABELS,
        _EXPIRES_LABELS,
        r"NAME|CLASS|SEX|HEIGHT|HGT|WEIGHT|WGT|EYES|HAIR|DL|LIC(?:ENSE)?",
    )
)


class LicenseFieldExtractor(BaseFieldExtractor):
    """Extracts identity fields from the text of a license front.

    Works on English-language US-style licenses; text that does not yield
    both a first and a last name produces no record.
    """

    # Printed on most license templates next to, or instead of, the holder name.
    TEMPLATE_WORDS: ClassVar[frozenset[str]] = frozenset(
        {
            "CLASS", "STATE", "DRIVER", "LICENSE", "EXPIRES", "ISSUED",
            "HEIGHT", "WEIGHT", "EYES", "HAIR", "SEX", "ORGAN", "DONOR",
            "VETERAN",
        }
    )
    # Field labels recognized by the patterns below.
    LABEL_WORDS: ClassVar[frozenset[str]] = frozenset(
        {
            "NAME", "FULL", "FIRST", "GIVEN", "LAST", "SURNAME", "FN", "LN",
            "DOB", "DATE", "BIRTH", "OF", "ISS", "ISSUE", "EXP", "EXPIRATION",
            "DL", "LIC", "ID", "NO", "NUM", "NUMBER", "ADDRESS", "ADDR",
            "ADD", "HGT", "WGT", "END", "REST",
        }
    )

    _COMMA_NAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?<![A-Z])([A-Z]{2,25}),\s*([A-Z]{2,20})(?![A-Z])"
    )
    _FIRST_NAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:" + _FIRST_NAME_LABELS + r")\b[:\s]*([A-Z]{2,20})\b",
        re.IGNORECASE,
    )
    _LAST_NAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:" + _LAST_NAME_LABELS + r")\b[:\s]*([A-Z]{2,25})\b",
        re.IGNORECASE,
    )
    _FULL_NAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(FULL\s+NAME|LN\s+FN|NAME)\b[:\s]*([A-Z][A-Z\s]{4,40})",
        re.IGNORECASE,
    )
    # Zero-width so that overlapping pairs are all visited.
    _WORD_PAIR_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?=\b([A-Z]{2,20})\s+([A-Z]{2,25})\b)"
    )

    _DOB_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:" + _DOB_LABELS + r")\b\.?[:\s]*" + _DATE,
        re.IGNORECASE,
    )
    _ISSUED_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:" + _ISSUED_LABELS + r")\b\.?[:\s]*" + _DATE,
        re.IGNORECASE,
    )
    _EXPIRES_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:" + _EXPIRES_LABELS + r")\b\.?[:\s]*" + _DATE,
        re.IGNORECASE,
    )
    _DOCUMENT_NUMBER_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:DL|LIC(?:ENSE)?|ID)\b(?:\s*(?:NO|NUM|NUMBER)\b)?[.:\s#]*([A-Z0-9]{4,25})\b",
        re.IGNORECASE,
    )
    _ADDRESS_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b(?:ADDRESS|ADDR|ADD)\b[.:\s]*"
        r"([A-Z0-9\s,.\-#]{10,100}?)"
        r"(?=\s*(?:\b(?:" + _FIELD_LABELS + r")\b|$))",
        re.IGNORECASE,
    )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, raw_text: str) -> IdentityRecord | None:
        if not raw_text or len(raw_text.strip()) < MIN_TEXT_LENGTH:
            Log.warning(
                f"OCR text too short for parsing: {len((raw_text or '').strip())} characters"
            )
            return None

        text = re.sub(r"\s+", " ", raw_text).strip()
        Log.debug(f"Parsing OCR text: {text[:400]}")

        try:
            return self._run(text)
        except Exception as exc:
            Log.error(f"Identity extraction failed: {exc}")
            return None

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _run(self, text: str) -> IdentityRecord | None:
        names = (
            self._comma_name(text)
            or self._labeled_names(text)
            or self._full_name(text)
            or self._word_pair(text)
        )
        if names is None or not self._valid_names(*names):
            Log.warning(f"Could not extract a valid name pair from: {text[:200]}")
            return None

        first_name, last_name = names
        record = IdentityRecord(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=self._first_group(self._DOB_RE, text),
            issue_date=self._first_group(self._ISSUED_RE, text),
            expiration_date=self._first_group(self._EXPIRES_RE, text),
            document_number=self._document_number(text),
            address=self._address(text),
            raw_text=text,
        )
        Log.info(f"Extracted identity: {record.full_name}")
        return record

    # ------------------------------------------------------------------
    # Name strategies
    # ------------------------------------------------------------------

    def _comma_name(self, text: str) -> tuple[str, str] | None:
        for match in self._COMMA_NAME_RE.finditer(text):
            last_name, first_name = match.group(1), match.group(2)
            if self._is_name_word(first_name) and self._is_name_word(last_name):
                Log.debug(f"Found comma-separated name: {first_name} {last_name}")
                return first_name, last_name
        return None

    def _labeled_names(self, text: str) -> tuple[str, str] | None:
        first_name = self._labeled_value(self._FIRST_NAME_RE, text)
        last_name = self._labeled_value(self._LAST_NAME_RE, text)
        if first_name and last_name:
            Log.debug(f"Found labeled first/last names: {first_name} {last_name}")
            return first_name, last_name
        return None

    def _full_name(self, text: str) -> tuple[str, str] | None:
        match = self._FULL_NAME_RE.search(text)
        if match is None:
            return None

        parts: list[str] = []
        for word in match.group(2).split():
            if not self._is_name_word(word):
                break
            parts.append(word)
        if len(parts) < 2:
            return None

        if re.sub(r"\s+", " ", match.group(1)).upper() == "LN FN":
            Log.debug(f"Found last-first name field: {' '.join(parts)}")
            return " ".join(parts[1:]), parts[0]
        Log.debug(f"Found full name field: {' '.join(parts)}")
        return parts[0], " ".join(parts[1:])

    def _word_pair(self, text: str) -> tuple[str, str] | None:
        for match in self._WORD_PAIR_RE.finditer(text):
            first_name, last_name = match.group(1), match.group(2)
            if self._is_name_word(first_name) and self._is_name_word(last_name):
                Log.debug(f"Found potential name pair: {first_name} {last_name}")
                return first_name, last_name
        return None

    # ------------------------------------------------------------------
    # Secondary fields
    # ------------------------------------------------------------------

    def _document_number(self, text: str) -> str:
        for match in self._DOCUMENT_NUMBER_RE.finditer(text):
            candidate = match.group(1)
            if any(c.isdigit() for c in candidate):
                return candidate
        return ""

    def _address(self, text: str) -> str:
        match = self._ADDRESS_RE.search(text)
        return match.group(1).strip(" ,") if match else ""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _labeled_value(self, pattern: re.Pattern[str], text: str) -> str:
        for match in pattern.finditer(text):
            value = match.group(1)
            if self._is_name_word(value):
                return value
        return ""

    def _is_name_word(self, word: str) -> bool:
        upper = word.upper()
        return upper not in self.TEMPLATE_WORDS and upper not in self.LABEL_WORDS

    def _valid_names(self, first_name: str, last_name: str) -> bool:
        return (
            FIRST_NAME_LENGTH[0] <= len(first_name) <= FIRST_NAME_LENGTH[1]
            and LAST_NAME_LENGTH[0] <= len(last_name) <= LAST_NAME_LENGTH[1]
        )

    @staticmethod
    def _first_group(pattern: re.Pattern[str], text: str) -> str:
        match = pattern.search(text)
        return match.group(1) if match else ""
