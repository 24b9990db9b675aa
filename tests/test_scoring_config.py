import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.core.config.scoring import get_scoring_config, get_scoring_value


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("ats.weights.structure"), 40)
        self.assertEqual(get_scoring_value("ats.weak_phrases.max_penalty"), 15)

    def test_weights_sum_to_one_hundred(self):
        weights = get_scoring_value("ats.weights")
        self.assertEqual(sum(weights.values()), 100)

    def test_missing_paths_return_default(self):
        self.assertIsNone(get_scoring_value("ats.weights.unknown"))
        self.assertEqual(get_scoring_value("ats.weights.structure.deeper", "fallback"), "fallback")
        self.assertEqual(get_scoring_value("", 7), 7)


if __name__ == "__main__":
    unittest.main()
