import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.reference import ReferenceData, RoleProfileRegistry, get_reference_data  # noqa: E402


class RoleProfileRegistryTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.registry = RoleProfileRegistry(get_reference_data())

    def test_lookup_ignores_case_and_whitespace(self):
        profile = self.registry.profile_for("  data   SCIENTIST ")
        self.assertEqual(profile.label, "Data Scientist")
        self.assertIn("Python", profile.required_skills)

    def test_unknown_and_empty_roles_fall_back_to_default(self):
        self.assertEqual(self.registry.profile_for("Astronaut").label, "Software Developer")
        self.assertEqual(self.registry.profile_for(None).label, "Software Developer")
        self.assertFalse(self.registry.is_known("Astronaut"))

    def test_known_roles(self):
        roles = self.registry.roles()
        for label in (
            "Software Developer",
            "Data Scientist",
            "Frontend Developer",
            "Backend Developer",
            "Full Stack Developer",
            "DevOps Engineer",
            "ML Engineer",
            "Product Manager",
        ):
            self.assertIn(label, roles)

    def test_reference_data_is_frozen(self):
        reference = get_reference_data()
        with self.assertRaises(ValidationError):
            reference.default_role = "Other"

    def test_default_role_must_have_a_profile(self):
        with self.assertRaises(ValidationError):
            ReferenceData.model_validate({"default_role": "Missing", "roles": {}})


if __name__ == "__main__":
    unittest.main()
