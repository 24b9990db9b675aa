from __future__ import annotations

from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


def count_weak_phrases(resume_text: str, *, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> int:
    if not resume_text or not resume_text.strip():
        return 0
    total = 0
    for phrase in vocabulary.weak_phrases:
        if not phrase.strip():
            continue
        total += sum(1 for _ in vocabulary.phrase_pattern(phrase).finditer(resume_text))
    return total


def detect_strong_verbs(resume_text: str, *, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> frozenset[str]:
    if not resume_text or not resume_text.strip():
        return frozenset()
    return frozenset(
        verb
        for verb in vocabulary.strong_verbs
        if verb.strip() and vocabulary.phrase_pattern(verb).search(resume_text)
    )
