from __future__ import annotations

import re
from collections.abc import Iterable

from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

_EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_PHONE_CANDIDATE_RE = re.compile(r"\+?\(?\d[\d\s().-]{7,}\d")
_YEAR_RANGE_RE = re.compile(r"\b(?:19|20)\d{2}\s*[-–]\s*(?:19|20)\d{2}\b")
_MIN_PHONE_DIGITS = 10
_MAX_PHONE_DIGITS = 15


def _header_lines(text: str, limit: int) -> list[str]:
    lines: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        lines.append(stripped)
        if len(lines) >= limit:
            break
    return lines


def _has_phone_number(line: str) -> bool:
    # Employment dates like "2018-2020" share the phone character set.
    cleaned = _YEAR_RANGE_RE.sub(" ", line)
    for match in _PHONE_CANDIDATE_RE.finditer(cleaned):
        digits = sum(1 for char in match.group() if char.isdigit())
        if _MIN_PHONE_DIGITS <= digits <= _MAX_PHONE_DIGITS:
            return True
    return False


def _has_contact_details(text: str, header_lines: int) -> bool:
    if header_lines <= 0:
        return False
    for line in _header_lines(text, header_lines):
        if _EMAIL_RE.search(line) or _has_phone_number(line):
            return True
    return False


def detect_sections(
    resume_text: str,
    *,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    contact_header_lines: int = 5,
) -> frozenset[str]:
    """Return the ids of every section whose pattern occurs anywhere in the text.

    An email address or phone number within the first `contact_header_lines`
    non-empty lines also counts as a contact section.
    """
    text = resume_text or ""
    found = {section_id for section_id, pattern in vocabulary.sections if pattern.search(text)}
    if "contact" not in found and "contact" in vocabulary.section_ids():
        if _has_contact_details(text, contact_header_lines):
            found.add("contact")
    return frozenset(found)


def missing_core_sections(found: Iterable[str], core_sections: Iterable[str]) -> tuple[str, ...]:
    present = set(found)
    return tuple(section_id for section_id in core_sections if section_id not in present)
