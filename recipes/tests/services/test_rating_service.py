from unittest.mock import patch

from django.db import IntegrityError
from django.test import TestCase

from recipes.exceptions import ConflictError, NotFoundError, ValidationError
from recipes.models import Rating, Recipe
from recipes.services.ratings import RatingService
from recipes.tests.helpers import make_recipe, make_user


class RatingServiceTests(TestCase):
    def setUp(self):
        self.service = RatingService()
        self.recipe = make_recipe()
        self.users = [make_user(username=f"rater{i}") for i in range(4)]

    def test_aggregate_follows_ledger(self):
        for user, value in zip(self.users, (5, 4, 3)):
            recipe = self.service.submit_rating(self.recipe.pk, user, value)
        self.assertEqual((recipe.average_rating, recipe.total_ratings), (4.0, 3))

        recipe = self.service.submit_rating(self.recipe.pk, self.users[3], 2)
        self.assertEqual((recipe.average_rating, recipe.total_ratings), (3.5, 4))

    def test_resubmission_replaces_in_place(self):
        first = self.users[0]
        self.service.submit_rating(self.recipe.pk, first, 5, "great")
        self.service.submit_rating(self.recipe.pk, self.users[1], 3)
        original = Rating.objects.get(recipe=self.recipe, user=first)

        recipe = self.service.submit_rating(self.recipe.pk, first, 1, "changed my mind")

        self.assertEqual(Rating.objects.filter(recipe=self.recipe).count(), 2)
        replaced = Rating.objects.get(recipe=self.recipe, user=first)
        self.assertEqual(replaced.pk, original.pk)
        self.assertEqual(replaced.created_at, original.created_at)
        self.assertEqual((replaced.rating, replaced.comment), (1, "changed my mind"))
        self.assertEqual(list(recipe.ratings.all())[0].user, first)
        self.assertEqual((recipe.average_rating, recipe.total_ratings), (2.0, 2))

    def test_omitted_comment_clears_previous(self):
        user = self.users[0]
        self.service.submit_rating(self.recipe.pk, user, 4, "tasty")
        self.service.submit_rating(self.recipe.pk, user, 4)
        self.assertEqual(Rating.objects.get(recipe=self.recipe, user=user).comment, "")

    def test_author_may_rate_own_recipe(self):
        recipe = self.service.submit_rating(self.recipe.pk, self.recipe.author, 5)
        self.assertEqual(recipe.total_ratings, 1)

    def test_rejects_out_of_range_values(self):
        for value in (0, 6, "abc", None, 3.5):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    self.service.submit_rating(self.recipe.pk, self.users[0], value)
        self.assertEqual(Rating.objects.count(), 0)
        self.assertEqual(Recipe.objects.get(pk=self.recipe.pk).total_ratings, 0)

    def test_out_of_range_message(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.submit_rating(self.recipe.pk, self.users[0], 7)
        self.assertEqual(ctx.exception.errors, [{"field": "rating", "message": "Rating must be between 1 and 5"}])

    def test_rejects_long_comment(self):
        with self.assertRaises(ValidationError):
            self.service.submit_rating(self.recipe.pk, self.users[0], 3, "x" * 501)

    def test_unknown_recipe(self):
        with self.assertRaises(NotFoundError):
            self.service.submit_rating("00000000-0000-0000-0000-000000000000", self.users[0], 3)

    def test_lost_insert_race_becomes_conflict(self):
        with patch.object(Rating.objects, "update_or_create", side_effect=IntegrityError("duplicate")):
            with self.assertRaises(ConflictError):
                self.service.submit_rating(self.recipe.pk, self.users[0], 3)
        self.assertEqual(Recipe.objects.get(pk=self.recipe.pk).total_ratings, 0)

    def test_ratings_for_returns_ledger(self):
        self.service.submit_rating(self.recipe.pk, self.users[0], 2)
        self.service.submit_rating(self.recipe.pk, self.users[1], 4)
        self.assertEqual([r.rating for r in self.service.ratings_for(self.recipe.pk)], [2, 4])
