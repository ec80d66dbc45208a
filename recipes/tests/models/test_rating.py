from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase

from recipes.models import Rating
from recipes.tests.helpers import make_recipe, make_user


class RatingModelTestCase(TestCase):
    def setUp(self):
        self.recipe = make_recipe()
        self.user = make_user(username="rater")

    def test_one_rating_per_user_per_recipe(self):
        Rating.objects.create(recipe=self.recipe, user=self.user, rating=4)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Rating.objects.create(recipe=self.recipe, user=self.user, rating=2)

    def test_rating_value_range_enforced_by_database(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Rating.objects.create(recipe=self.recipe, user=self.user, rating=6)

    def test_full_clean_rejects_zero(self):
        rating = Rating(recipe=self.recipe, user=self.user, rating=0)
        with self.assertRaises(ValidationError):
            rating.full_clean()

    def test_comment_defaults_to_empty(self):
        rating = Rating.objects.create(recipe=self.recipe, user=self.user, rating=3)
        self.assertEqual(rating.comment, "")

    def test_ratings_are_ordered_by_submission(self):
        other = make_user(username="second")
        first = Rating.objects.create(recipe=self.recipe, user=self.user, rating=5)
        second = Rating.objects.create(recipe=self.recipe, user=other, rating=1)
        self.assertEqual(list(self.recipe.ratings.all()), [first, second])
