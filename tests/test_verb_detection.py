import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.engine.verbs import count_weak_phrases, detect_strong_verbs  # noqa: E402
from resume_ats.engine.vocabulary import DEFAULT_VOCABULARY, Vocabulary  # noqa: E402


class WeakPhraseTests(unittest.TestCase):
    def test_counts_every_occurrence_across_whitespace(self):
        text = "Responsible for billing.\nresponsible  for payroll.\nRESPONSIBLE\nFOR audits."
        self.assertEqual(count_weak_phrases(text), 3)

    def test_phrase_words_must_be_contiguous(self):
        self.assertEqual(count_weak_phrases("Responsible to the board for compliance"), 0)

    def test_whole_word_matching(self):
        self.assertEqual(count_weak_phrases("Managed vendors, managing budgets"), 1)
        self.assertEqual(count_weak_phrases("Unassisted deployments"), 0)

    def test_sums_across_phrases(self):
        text = (
            "Responsible for managing tasks.\n"
            "Worked on developing features.\n"
            "Assisted in database design.\n"
            "Participated in code reviews.\n"
        )
        self.assertEqual(count_weak_phrases(text), 4)

    def test_empty_input(self):
        self.assertEqual(count_weak_phrases(""), 0)
        self.assertEqual(count_weak_phrases("   "), 0)

    def test_custom_vocabulary(self):
        vocabulary = Vocabulary(weak_phrases=("utilized",))
        self.assertEqual(count_weak_phrases("Utilized Python. Responsible for QA.", vocabulary=vocabulary), 1)


class StrongVerbTests(unittest.TestCase):
    def test_detects_canonical_spelling(self):
        verbs = detect_strong_verbs("spearheaded the migration; LED a team of five")
        self.assertEqual(verbs, frozenset({"Spearheaded", "Led"}))

    def test_requires_whole_words(self):
        self.assertEqual(detect_strong_verbs("Reconciled the ledger"), frozenset())

    def test_presence_not_count(self):
        self.assertEqual(detect_strong_verbs("Led X. Led Y. Led Z."), frozenset({"Led"}))

    def test_empty_input(self):
        self.assertEqual(detect_strong_verbs(""), frozenset())


class VocabularyPatternTests(unittest.TestCase):
    def test_phrase_patterns_are_compiled_up_front(self):
        for phrase in (*DEFAULT_VOCABULARY.weak_phrases, *DEFAULT_VOCABULARY.strong_verbs):
            self.assertIn(phrase, DEFAULT_VOCABULARY._phrase_patterns)
        self.assertIs(DEFAULT_VOCABULARY.phrase_pattern("Led"), DEFAULT_VOCABULARY.phrase_pattern("Led"))

    def test_phrase_patterns_cannot_be_modified(self):
        with self.assertRaises(TypeError):
            DEFAULT_VOCABULARY._phrase_patterns["utilized"] = DEFAULT_VOCABULARY.phrase_pattern("utilized")

    def test_unknown_phrase_is_compiled_without_caching(self):
        pattern = DEFAULT_VOCABULARY.phrase_pattern("utilized")
        self.assertIsNotNone(pattern.search("UTILIZED Python"))
        self.assertNotIn("utilized", DEFAULT_VOCABULARY._phrase_patterns)

    def test_blank_entries_are_skipped(self):
        vocabulary = Vocabulary(weak_phrases=("", "utilized"), strong_verbs=("  ",))
        self.assertEqual(set(vocabulary._phrase_patterns), {"utilized"})


if __name__ == "__main__":
    unittest.main()
