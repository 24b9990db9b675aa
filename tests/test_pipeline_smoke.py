import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import resume_ats.main  # noqa: F401
from resume_ats.engine import analyze_resume, build_feedback


class PipelineSmokeTests(unittest.TestCase):
    def test_safe_imports_and_end_to_end_analysis(self):
        result = analyze_resume("Jane Doe\nSkills\nPython", "Python Kafka")
        self.assertIsNotNone(result)
        self.assertEqual(result.matched_keywords, frozenset({"python"}))
        self.assertEqual(len(build_feedback(result).items), 4)


if __name__ == "__main__":
    unittest.main()
