from decimal import Decimal
from types import SimpleNamespace

from django.test import SimpleTestCase, TestCase

from recipes.models import Rating, Recipe
from recipes.services.aggregates import (
    RatingAggregate,
    compute_rating_aggregate,
    recalculate_recipe_aggregate,
    round_half_up,
)
from recipes.tests.helpers import make_recipe, make_user


class ComputeRatingAggregateTests(SimpleTestCase):
    def test_empty_ledger(self):
        self.assertEqual(compute_rating_aggregate([]), RatingAggregate(0.0, 0))

    def test_three_ratings(self):
        self.assertEqual(compute_rating_aggregate([5, 4, 3]), RatingAggregate(4.0, 3))

    def test_adding_a_fourth(self):
        self.assertEqual(compute_rating_aggregate([5, 4, 3, 2]), RatingAggregate(3.5, 4))

    def test_rounds_to_one_decimal(self):
        self.assertEqual(compute_rating_aggregate([5, 4, 4]).average, 4.3)
        self.assertEqual(compute_rating_aggregate([5, 5, 4]).average, 4.7)

    def test_rounds_halves_up(self):
        self.assertEqual(round_half_up(Decimal("4.25")), 4.3)
        self.assertEqual(round_half_up(Decimal("4.35")), 4.4)
        self.assertEqual(round_half_up(Decimal("2.05")), 2.1)

    def test_single_rating(self):
        self.assertEqual(compute_rating_aggregate([1]), RatingAggregate(1.0, 1))

    def test_accepts_generators(self):
        self.assertEqual(compute_rating_aggregate(v for v in (2, 3)).total, 2)


class RecalculateRecipeAggregateTests(TestCase):
    def setUp(self):
        self.recipe = make_recipe()

    def test_persists_aggregate_from_ledger(self):
        for index, value in enumerate((5, 4, 3)):
            Rating.objects.create(recipe=self.recipe, user=make_user(username=f"rater{index}"), rating=value)

        aggregate = recalculate_recipe_aggregate(self.recipe)

        self.assertEqual(aggregate, RatingAggregate(4.0, 3))
        self.assertEqual((self.recipe.average_rating, self.recipe.total_ratings), (4.0, 3))
        stored = Recipe.objects.get(pk=self.recipe.pk)
        self.assertEqual((stored.average_rating, stored.total_ratings), (4.0, 3))

    def test_empty_ledger_resets_to_zero(self):
        Recipe.objects.filter(pk=self.recipe.pk).update(average_rating=3.0, total_ratings=2)

        recalculate_recipe_aggregate(self.recipe)

        stored = Recipe.objects.get(pk=self.recipe.pk)
        self.assertEqual((stored.average_rating, stored.total_ratings), (0.0, 0))

    def test_works_with_any_object_with_pk(self):
        stub = SimpleNamespace(pk=self.recipe.pk)
        recalculate_recipe_aggregate(stub)
        self.assertEqual(stub.total_ratings, 0)
