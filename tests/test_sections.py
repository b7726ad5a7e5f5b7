import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.extraction.sections import SECTION_NAMES, SectionSegmenter, heading_rule  # noqa: E402


class SectionSegmenterTests(unittest.TestCase):
    RESUME = (
        "Jane Doe\n"
        "jane@example.com\n"
        "\n"
        "Summary\n"
        "Backend engineer with eight years building APIs.\n"
        "\n"
        "Skills: Python, SQL\n"
        "\n"
        "Experience\n"
        "Senior Engineer at Acme Corp (2019-2022)\n"
        "Built a recommendation service.\n"
        "\n"
        "Education\n"
        "BS in Computer Science\n"
    )

    def setUp(self):
        self.segmenter = SectionSegmenter()

    def test_segments_known_sections_and_maps_missing_ones_to_none(self):
        spans = self.segmenter.segment(self.RESUME)
        self.assertEqual(set(spans), set(SECTION_NAMES))
        self.assertEqual(spans["summary"], "Backend engineer with eight years building APIs.")
        self.assertEqual(spans["skills"], "Python, SQL")
        self.assertEqual(
            spans["experience"],
            "Senior Engineer at Acme Corp (2019-2022)\nBuilt a recommendation service.",
        )
        self.assertEqual(spans["education"], "BS in Computer Science")
        self.assertIsNone(spans["projects"])
        self.assertIsNone(spans["certifications"])
        self.assertIsNone(spans["languages"])

    def test_anchor_with_empty_span_maps_to_none(self):
        spans = self.segmenter.segment("Projects\n\nEducation\nBS in Math\n")
        self.assertIsNone(spans["projects"])
        self.assertEqual(spans["education"], "BS in Math")

    def test_inline_labels_do_not_end_a_span(self):
        text = "Projects\nChat App\nTechnologies: Python, Redis\nGPA: 3.9\n"
        spans = self.segmenter.segment(text)
        self.assertIn("Technologies: Python, Redis", spans["projects"])
        self.assertIn("GPA: 3.9", spans["projects"])

    def test_capitalized_label_line_ends_a_span(self):
        text = "Experience\nEngineer at Foo (2020-2021)\nReferences: available on request\n"
        spans = self.segmenter.segment(text)
        self.assertEqual(spans["experience"], "Engineer at Foo (2020-2021)")
        self.assertTrue(self.segmenter.is_heading_like("Hobbies: chess"))
        self.assertFalse(self.segmenter.is_heading_like("Duration: 2 years"))

    def test_rule_order_decides_between_competing_anchors(self):
        text = "Objective\nFind a job.\n\nSummary\nSeasoned analyst with a focus on pricing models.\n"
        spans = self.segmenter.segment(text)
        self.assertEqual(spans["summary"], "Seasoned analyst with a focus on pricing models.")

    def test_custom_rule_table(self):
        segmenter = SectionSegmenter(rules=(heading_rule("skills", "toolbox"),))
        spans = segmenter.segment("Toolbox: Git, Make\n")
        self.assertEqual(spans["skills"], "Git, Make")
        self.assertIsNone(spans["experience"])

    def test_windows_line_endings(self):
        spans = self.segmenter.segment("Skills\r\nPython, Go\r\n")
        self.assertEqual(spans["skills"], "Python, Go")

    def test_empty_text(self):
        spans = self.segmenter.segment("")
        self.assertTrue(all(value is None for value in spans.values()))


if __name__ == "__main__":
    unittest.main()
