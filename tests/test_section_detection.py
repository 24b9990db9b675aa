import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.engine.sections import detect_sections, missing_core_sections  # noqa: E402

CORE = ("contact", "summary", "experience", "skills", "education")


class SectionDetectionTests(unittest.TestCase):
    def test_all_core_headings_found(self):
        text = "Contact\nSummary\nExperience\nSkills\nEducation\n"
        self.assertEqual(
            detect_sections(text),
            frozenset({"contact", "summary", "experience", "skills", "education"}),
        )

    def test_headings_match_anywhere_and_case_insensitively(self):
        text = "Jane Doe\nPROFILE: backend developer\nB.S. from State UNIVERSITY\nPortfolio and certifications available"
        self.assertEqual(
            detect_sections(text),
            frozenset({"summary", "education", "projects", "certifications"}),
        )

    def test_only_skills(self):
        self.assertEqual(detect_sections("Skills\nPython, SQL, Docker"), frozenset({"skills"}))

    def test_email_in_header_counts_as_contact(self):
        text = "Jane Doe\njane@example.com\nSkills\nPython"
        self.assertIn("contact", detect_sections(text))

    def test_phone_number_in_header_counts_as_contact(self):
        text = "Jane Doe\n(555) 123-4567\nSkills\nPython"
        self.assertIn("contact", detect_sections(text))

    def test_international_phone_number_counts_as_contact(self):
        text = "Jane Doe\n+49 152 34748915\nSkills\nPython"
        self.assertIn("contact", detect_sections(text))

    def test_year_ranges_are_not_phone_numbers(self):
        for header in (
            "Acme Corp 2018-2020",
            "Senior Engineer 2019 - 2021",
            "Acme 2015–2018, Globex 2018-2020",
        ):
            text = f"Jane Doe\n{header}\nSkills\nPython"
            self.assertEqual(detect_sections(text), frozenset({"skills"}), header)

    def test_short_digit_runs_are_not_phone_numbers(self):
        self.assertEqual(detect_sections("Jane Doe\nOrder 1234-5678\nSkills"), frozenset({"skills"}))

    def test_email_below_header_window_is_ignored(self):
        text = "Alpha\nBeta\nGamma\nDelta\nEpsilon\nZeta\njane@example.com"
        self.assertEqual(detect_sections(text), frozenset())
        self.assertEqual(detect_sections(text, contact_header_lines=10), frozenset({"contact"}))

    def test_empty_text(self):
        self.assertEqual(detect_sections(""), frozenset())
        self.assertEqual(missing_core_sections(detect_sections(""), CORE), CORE)

    def test_missing_core_sections_preserve_core_order(self):
        found = frozenset({"skills", "projects"})
        self.assertEqual(
            missing_core_sections(found, CORE),
            ("contact", "summary", "experience", "education"),
        )


if __name__ == "__main__":
    unittest.main()
