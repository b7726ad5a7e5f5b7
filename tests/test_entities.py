import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.extraction.achievements import extract_achievements  # noqa: E402
from resume_analyzer.extraction.certifications import extract_certifications  # noqa: E402
from resume_analyzer.extraction.education import extract_education  # noqa: E402
from resume_analyzer.extraction.languages import extract_languages  # noqa: E402
from resume_analyzer.extraction.metadata import build_metadata  # noqa: E402
from resume_analyzer.extraction.projects import extract_projects  # noqa: E402
from resume_analyzer.extraction.summary import PLACEHOLDER_SUMMARY, extract_summary  # noqa: E402
from resume_analyzer.reference import get_reference_data  # noqa: E402


class EducationTests(unittest.TestCase):
    def test_degree_block_and_inline_institution(self):
        span = (
            "Bachelor of Science in Computer Science\n"
            "State University\n"
            "2015 - 2019\n"
            "GPA: 3.8\n"
            "\n"
            "MBA from Wharton (2021)\n"
        )
        first, second = extract_education(span)
        self.assertEqual(first.degree, "Bachelor of Science")
        self.assertEqual(first.major, "Computer Science")
        self.assertEqual(first.institution, "State University")
        self.assertEqual(first.year, "2015")
        self.assertEqual(first.gpa, "3.8")
        self.assertEqual(second.degree, "MBA")
        self.assertEqual(second.institution, "Wharton")
        self.assertEqual(second.year, "2021")

    def test_comma_separated_degree_line(self):
        entry = extract_education("B.S. in Computer Science, State University, 2019")[0]
        self.assertEqual(entry.degree, "B.S.")
        self.assertEqual(entry.major, "Computer Science")
        self.assertEqual(entry.institution, "State University")
        self.assertEqual(entry.year, "2019")

    def test_one_line_degree_without_connecting_words(self):
        entry = extract_education("Bachelor's degree, Stanford University, 2019")[0]
        self.assertEqual(entry.degree, "Bachelor's degree")
        self.assertEqual(entry.major, "")
        self.assertEqual(entry.institution, "Stanford University")
        self.assertEqual(entry.year, "2019")

        entry = extract_education("BS Computer Science - MIT - 2020")[0]
        self.assertEqual(entry.degree, "BS")
        self.assertEqual(entry.major, "Computer Science")
        self.assertEqual(entry.institution, "MIT")
        self.assertEqual(entry.year, "2020")

    def test_degree_with_major_only_keeps_following_institution_line(self):
        entries = extract_education("M.Sc. Data Science, 2021\nUniversity of Edinburgh\n\nBA History")
        self.assertEqual(len(entries), 2)
        self.assertEqual(entries[0].major, "Data Science")
        self.assertEqual(entries[0].institution, "University of Edinburgh")
        self.assertEqual(entries[0].year, "2021")
        self.assertEqual(entries[1].degree, "BA")
        self.assertEqual(entries[1].major, "History")

    def test_second_degree_line_closes_open_entry(self):
        entries = extract_education("BS in Mathematics\nMS in Statistics")
        self.assertEqual([entry.major for entry in entries], ["Mathematics", "Statistics"])

    def test_entries_without_degree_or_institution_are_dropped(self):
        self.assertEqual(extract_education("GPA: 3.9"), [])
        self.assertEqual(extract_education(None), [])


class ProjectTests(unittest.TestCase):
    SPAN = (
        "Chat App\n"
        "Real-time chat built with Python, Redis and WebSockets.\n"
        "https://github.com/jane/chat-app\n"
        "https://chat.example.com\n"
        "\n"
        "- Portfolio Site\n"
        "A personal site using React, Vite. Hosted at https://jane.dev.\n"
    )

    def test_blocks_become_projects(self):
        chat, site = extract_projects(self.SPAN)
        self.assertEqual(chat.title, "Chat App")
        self.assertEqual(chat.technologies, ["Python", "Redis", "WebSockets"])
        self.assertEqual(chat.repository_url, "https://github.com/jane/chat-app")
        self.assertEqual(chat.url, "https://chat.example.com")
        self.assertEqual(site.title, "Portfolio Site")
        self.assertEqual(site.technologies, ["React", "Vite"])
        self.assertEqual(site.url, "https://jane.dev")
        self.assertEqual(site.repository_url, "")

    def test_description_and_technologies_are_bounded(self):
        techs = ", ".join(f"Tool{index}" for index in range(12))
        span = f"Big Project\n{'word ' * 100}\nTechnologies: {techs}\n"
        project = extract_projects(span)[0]
        self.assertEqual(len(project.description), 200)
        self.assertEqual(len(project.technologies), 8)

    def test_projects_are_capped(self):
        span = "\n\n".join(f"Project {index}\nSomething built for fun." for index in range(9))
        self.assertEqual(len(extract_projects(span)), 6)


class CertificationAndLanguageTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.reference = get_reference_data()

    def test_certifications(self):
        span = (
            "AWS Certified Solutions Architect - 2021\n"
            "CKA\n"
            "• Google Professional Data Engineer (2022)\n"
            "Certified Scrum Master\n"
        )
        certifications = extract_certifications(span, self.reference)
        self.assertEqual(len(certifications), 3)
        self.assertEqual(certifications[0].name, "AWS Certified Solutions Architect")
        self.assertEqual(certifications[0].year, "2021")
        self.assertEqual(certifications[0].issuer, "AWS")
        self.assertEqual(certifications[1].name, "Google Professional Data Engineer")
        self.assertEqual(certifications[1].issuer, "Google")
        self.assertEqual(certifications[2].issuer, "")

    def test_languages_with_adjacent_proficiency(self):
        languages = extract_languages("English (Native), Spanish - Intermediate, German", self.reference)
        self.assertEqual(
            [(entry.language, entry.proficiency) for entry in languages],
            [("English", "native"), ("Spanish", "intermediate"), ("German", "unspecified")],
        )

    def test_missing_spans(self):
        self.assertEqual(extract_certifications(None, self.reference), [])
        self.assertEqual(extract_languages(None, self.reference), [])


class SummaryTests(unittest.TestCase):
    def test_labeled_summary(self):
        span = "Backend engineer with eight years of experience building distributed systems. Loves Python."
        summary, source = extract_summary("", span)
        self.assertEqual(source, "labeled")
        self.assertEqual(summary, span)

    def test_document_sentences_when_no_labeled_summary(self):
        text = "Jane Doe\nBackend engineer with eight years of experience building distributed systems and APIs.\n"
        summary, source = extract_summary(text, None)
        self.assertEqual(source, "document")
        self.assertTrue(summary.startswith("Backend engineer"))

    def test_placeholder_when_nothing_usable(self):
        self.assertEqual(extract_summary("Jane Doe\njane@example.com", "Engineer."), (PLACEHOLDER_SUMMARY, "default"))

    def test_labeled_summary_is_truncated(self):
        summary, _ = extract_summary("", "word " * 120)
        self.assertLessEqual(len(summary), 300)


class AchievementsAndMetadataTests(unittest.TestCase):
    def test_achievements(self):
        text = "- Increased sales by 25% in one year.\nAwards: Employee of the Year\nWorked on many things."
        self.assertEqual(extract_achievements(text), ["Increased sales by 25% in one year.", "Employee of the Year"])

    def test_metadata_for_empty_text(self):
        metadata = build_metadata("", get_reference_data())
        self.assertEqual(metadata.word_count, 0)
        self.assertEqual(metadata.page_estimate, 0)
        self.assertEqual(metadata.complexity, "low")
        self.assertEqual(metadata.parse_quality, "low")

    def test_metadata_for_long_structured_text(self):
        text = "Jane Doe jane@example.com\nSkills: Python, Docker\nExperience since 2020\n" + "word " * 550
        metadata = build_metadata(text, get_reference_data())
        self.assertEqual(metadata.page_estimate, 3)
        self.assertEqual(metadata.parse_quality, "high")


if __name__ == "__main__":
    unittest.main()
