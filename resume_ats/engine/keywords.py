from __future__ import annotations

import re

from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

# Anything that is not a letter, digit, "+", "#", "." or "/" separates tokens,
# which keeps "c++", "c#", "node.js" and "ci/cd" intact.
_TOKEN_SEPARATOR_RE = re.compile(r"[^\w+#./]+|_+")
_MIN_KEYWORD_LENGTH = 3


def extract_keywords(text: str, *, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> frozenset[str]:
    if not text or not text.strip():
        return frozenset()

    keywords: set[str] = set()
    for raw in _TOKEN_SEPARATOR_RE.split(text.lower()):
        token = raw.strip().rstrip(".")
        if len(token) < _MIN_KEYWORD_LENGTH:
            continue
        if token in vocabulary.stopwords:
            continue
        keywords.add(token)
    return frozenset(keywords)


def _contains_whole_word(haystack: str, keyword: str) -> bool:
    pattern = rf"(?<![\w+#]){re.escape(keyword)}(?![\w+#])"
    return re.search(pattern, haystack) is not None


def match_keywords(
    keywords: frozenset[str] | set[str],
    resume_text: str,
    *,
    whole_word: bool = False,
) -> tuple[frozenset[str], frozenset[str]]:
    """Split keywords into (matched, missing) by presence in the resume text.

    Matching is case-insensitive substring containment unless `whole_word`
    is set, so "react" is found inside "reactive" by default.
    """
    resume_lower = (resume_text or "").lower()
    matched: set[str] = set()
    missing: set[str] = set()
    for keyword in keywords:
        lowered = keyword.lower()
        if whole_word:
            found = _contains_whole_word(resume_lower, lowered)
        else:
            found = lowered in resume_lower
        if found:
            matched.add(keyword)
        else:
            missing.add(keyword)
    return frozenset(matched), frozenset(missing)
