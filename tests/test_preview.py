import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.preview import (  # noqa: E402
    build_preview,
    candidate_name,
    export_filename,
    get_template,
    plain_to_html,
)


class CandidateNameTests(unittest.TestCase):
    def test_first_non_empty_line(self):
        self.assertEqual(candidate_name("\n\n   John Smith  \nSummary"), "John Smith")

    def test_default_name(self):
        self.assertEqual(candidate_name(""), "Candidate Name")
        self.assertEqual(candidate_name(" \n \n"), "Candidate Name")


class PlainToHtmlTests(unittest.TestCase):
    def test_headings_bullets_and_paragraphs(self):
        text = "John Smith\nSummary\n- Led team\n- Built APIs\nSkills\nPython <3>"
        expected = (
            "<p>John Smith</p>\n"
            '<h2 class="section-heading">Summary</h2>\n'
            "<ul>\n"
            "<li>Led team</li>\n"
            "<li>Built APIs</li>\n"
            "</ul>\n"
            '<h2 class="section-heading">Skills</h2>\n'
            "<p>Python &lt;3&gt;</p>\n"
        )
        self.assertEqual(plain_to_html(text), expected)

    def test_list_is_closed_at_end_of_text(self):
        html = plain_to_html("Experience\n* Shipped v2\n1. Cut costs")
        self.assertTrue(html.endswith("<li>Cut costs</li>\n</ul>\n"))
        self.assertEqual(html.count("<ul>"), 1)

    def test_bullets_mentioning_sections_stay_list_items(self):
        html = plain_to_html("- Five years of experience in Go")
        self.assertIn("<li>Five years of experience in Go</li>", html)
        self.assertNotIn("<h2", html)

    def test_long_lines_are_paragraphs(self):
        html = plain_to_html("I bring broad experience in distributed systems")
        self.assertEqual(html, "<p>I bring broad experience in distributed systems</p>\n")

    def test_escapes_markup(self):
        html = plain_to_html('<script>alert("x")</script>')
        self.assertNotIn("<script>", html)
        self.assertIn("&lt;script&gt;", html)

    def test_empty_text(self):
        self.assertEqual(plain_to_html(""), "")


class TemplateTests(unittest.TestCase):
    def test_export_filename(self):
        self.assertEqual(export_filename("John Smith", "modern"), "John_Smith_modern_Resume.pdf")

    def test_unknown_template(self):
        with self.assertRaises(ValueError):
            get_template("retro")

    def test_default_template(self):
        self.assertEqual(get_template(None).key, "modern")
        self.assertEqual(get_template("Minimal").name, "Minimal Clean")

    def test_build_preview(self):
        preview = build_preview("john smith\nSkills\nPython", "creative")
        self.assertEqual(preview.candidate_name, "john smith")
        self.assertEqual(preview.initial, "J")
        self.assertEqual(preview.template.class_name, "theme-creative")
        self.assertEqual(preview.export_filename, "john_smith_creative_Resume.pdf")
        self.assertIn('<h2 class="section-heading">Skills</h2>', preview.html)


if __name__ == "__main__":
    unittest.main()
