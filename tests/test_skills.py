import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.extraction.sections import SectionSegmenter  # noqa: E402
from resume_analyzer.extraction.skills import extract_skills, known_technologies_in, parse_skill_items  # noqa: E402
from resume_analyzer.reference import get_reference_data  # noqa: E402


class SkillsExtractorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.reference = get_reference_data()

    def _extract(self, text: str) -> list[str]:
        spans = SectionSegmenter().segment(text)
        return extract_skills(text, self.reference, spans["skills"])

    def test_labeled_skill_line(self):
        self.assertEqual(self._extract("Skills: Python, SQL, Docker"), ["Python", "SQL", "Docker"])

    def test_label_prefixes_and_parentheticals_are_dropped(self):
        items = parse_skill_items("Languages: Python (advanced), Go\nFrameworks: Django, FastAPI")
        self.assertEqual(items, ["Python", "Go", "Django", "FastAPI"])

    def test_digits_stop_words_and_single_characters_are_dropped(self):
        self.assertEqual(parse_skill_items("Python, 2020, etc, C"), ["Python"])

    def test_vocabulary_scan_uses_token_boundaries(self):
        self.assertEqual(known_technologies_in("Going to the cargo store", self.reference), [])
        self.assertEqual(known_technologies_in("Experienced with Go and Rust", self.reference), ["Go", "Rust"])

    def test_case_insensitive_dedup_keeps_first_spelling(self):
        self.assertEqual(self._extract("Skills: python, Python, PYTHON"), ["python"])

    def test_skills_are_capped(self):
        first = ", ".join(f"Alpha{index:02d}" for index in range(20))
        second = ", ".join(f"Beta{index:02d}" for index in range(20))
        text = f"Technical Skills: {first}\n\nTechnologies: {second}\n"
        skills = self._extract(text)
        self.assertEqual(len(skills), 25)
        self.assertEqual(len({skill.casefold() for skill in skills}), 25)

    def test_no_skills(self):
        self.assertEqual(self._extract("I enjoy hiking and cooking on weekends."), [])


if __name__ == "__main__":
    unittest.main()
