from django.core.exceptions import ValidationError
from django.test import TestCase

from recipes.tests.helpers import make_user


class UserModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user(first_name="Jane", last_name="Doe", email="jane@example.org")

    def test_valid_user(self):
        self.user.full_clean()

    def test_username_needs_three_characters(self):
        self.user.username = "@j"
        with self.assertRaises(ValidationError):
            self.user.full_clean()

    def test_bio_cannot_exceed_500_characters(self):
        self.user.bio = "x" * 501
        with self.assertRaises(ValidationError):
            self.user.full_clean()

    def test_full_name(self):
        self.assertEqual(self.user.full_name(), "Jane Doe")

    def test_avatar_falls_back_to_gravatar(self):
        self.assertIn("gravatar.com", self.user.avatar_url)

    def test_recipes_created_starts_at_zero(self):
        self.assertEqual(self.user.recipes_created, 0)
