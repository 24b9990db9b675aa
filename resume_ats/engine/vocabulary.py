from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

SectionTable = tuple[tuple[str, re.Pattern[str]], ...]

SECTION_TABLE: SectionTable = (
    ("contact", re.compile(r"\b(contact|email|phone|linkedin|github|address)\b", re.IGNORECASE)),
    ("summary", re.compile(r"\b(summary|objective|profile)\b", re.IGNORECASE)),
    ("experience", re.compile(r"\b(experience|work experience|employment|career)\b", re.IGNORECASE)),
    ("skills", re.compile(r"\b(skills|technical skills|competencies|technologies)\b", re.IGNORECASE)),
    ("education", re.compile(r"\b(education|degree|university|college)\b", re.IGNORECASE)),
    ("projects", re.compile(r"\b(projects?|portfolio)\b", re.IGNORECASE)),
    ("certifications", re.compile(r"\b(certifications?|certificates?|license|licensed?)\b", re.IGNORECASE)),
)

# Function words plus job-posting filler that would inflate the match ratio.
STOPWORDS: frozenset[str] = frozenset(
    {
        "and", "the", "with", "from", "that", "this", "your", "their", "our", "for", "into", "able",
        "will", "shall", "must", "have", "has", "had", "are", "was", "were", "you", "they", "them",
        "over", "under", "about", "above", "below", "not", "only", "but", "also", "more", "than",
        "such", "etc", "using", "use", "used", "strong", "good", "great", "work", "role", "team",
        "skills", "requirements", "responsibilities", "job", "description", "looking", "plus",
        "preferred", "required", "experience", "years", "year", "developer", "engineer", "data",
    }
)

WEAK_PHRASES: tuple[str, ...] = (
    "responsible for",
    "managed",
    "worked on",
    "assisted",
    "duties included",
    "had to",
    "participated in",
    "involved in",
)

STRONG_VERBS: tuple[str, ...] = (
    "Spearheaded",
    "Orchestrated",
    "Engineered",
    "Led",
    "Pioneered",
    "Implemented",
    "Designed",
    "Drove",
)


def _compile_phrase(phrase: str) -> re.Pattern[str]:
    words = [re.escape(word) for word in phrase.split()]
    return re.compile(r"\b" + r"\s+".join(words) + r"\b", re.IGNORECASE)


@dataclass(frozen=True)
class Vocabulary:
    """Word lists and section patterns the engine matches against.

    Swap in an alternate instance to score with a different vocabulary
    without touching the algorithms.
    """

    sections: SectionTable = SECTION_TABLE
    stopwords: frozenset[str] = STOPWORDS
    weak_phrases: tuple[str, ...] = WEAK_PHRASES
    strong_verbs: tuple[str, ...] = STRONG_VERBS
    _phrase_patterns: Mapping[str, re.Pattern[str]] = field(
        default_factory=lambda: MappingProxyType({}), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        patterns = {
            phrase: _compile_phrase(phrase)
            for phrase in (*self.weak_phrases, *self.strong_verbs)
            if phrase.strip()
        }
        object.__setattr__(self, "_phrase_patterns", MappingProxyType(patterns))

    def section_ids(self) -> tuple[str, ...]:
        return tuple(section_id for section_id, _ in self.sections)

    def phrase_pattern(self, phrase: str) -> re.Pattern[str]:
        pattern = self._phrase_patterns.get(phrase)
        if pattern is None:
            pattern = _compile_phrase(phrase)
        return pattern


DEFAULT_VOCABULARY = Vocabulary()
