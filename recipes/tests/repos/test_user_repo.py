from django.test import TestCase

from recipes.exceptions import NotFoundError
from recipes.repos.user_repo import UserRepo
from recipes.tests.helpers import make_user


class UserRepoTests(TestCase):
    def setUp(self):
        self.repo = UserRepo()
        self.user = make_user(username="johndoe", first_name="John", last_name="Doe")

    def test_get_by_id(self):
        self.assertEqual(self.repo.get_by_id(self.user.pk), self.user)

    def test_get_by_id_bad_values(self):
        for bad in (123456, "abc", None):
            with self.subTest(bad=bad):
                with self.assertRaises(NotFoundError):
                    self.repo.get_by_id(bad)

    def test_username_taken(self):
        self.assertTrue(self.repo.username_taken("@johndoe"))
        self.assertFalse(self.repo.username_taken("@johndoe", exclude_id=self.user.pk))

    def test_search_is_case_insensitive(self):
        make_user(username="other", first_name="Mary", last_name="Major")
        self.assertEqual(list(self.repo.search("JOHN")), [self.user])
        self.assertEqual(self.repo.search("").count(), 2)
