from django.test import TestCase

from recipes.exceptions import NotFoundError
from recipes.models import Recipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.tests.helpers import make_recipe


class RecipeRepoTests(TestCase):
    def setUp(self):
        self.repo = RecipeRepo()
        self.recipe = make_recipe(title="Soup")

    def test_find_by_id(self):
        self.assertEqual(self.repo.find_by_id(self.recipe.pk), self.recipe)

    def test_find_by_id_with_children_prefetches(self):
        recipe = self.repo.find_by_id(self.recipe.pk, with_children=True)
        with self.assertNumQueries(0):
            list(recipe.ingredients.all())
            list(recipe.steps.all())
            list(recipe.ratings.all())
            recipe.author.username

    def test_find_by_id_malformed(self):
        for bad in ("nope", None, "00000000-0000-0000-0000-000000000000"):
            with self.subTest(bad=bad):
                with self.assertRaises(NotFoundError):
                    self.repo.find_by_id(bad)

    def test_find_many_and_count(self):
        make_recipe(title="Cake", category="Dessert")
        self.assertEqual(self.repo.count_matching({"category": "Dessert"}), 1)
        titles = [r.title for r in self.repo.find_many(order_by=["title"])]
        self.assertEqual(titles, ["Cake", "Soup"])

    def test_update_fields(self):
        self.repo.update_fields(self.recipe.pk, title="Broth")
        self.assertEqual(Recipe.objects.get(pk=self.recipe.pk).title, "Broth")

    def test_atomic_increment_counters_only(self):
        self.repo.atomic_increment(self.recipe.pk, "views", 2)
        self.assertEqual(Recipe.objects.get(pk=self.recipe.pk).views, 2)
        with self.assertRaises(ValueError):
            self.repo.atomic_increment(self.recipe.pk, "average_rating", 1)

    def test_decrement_floors_at_zero(self):
        self.repo.atomic_increment(self.recipe.pk, "favourites", -1)
        self.assertEqual(Recipe.objects.get(pk=self.recipe.pk).favourites, 0)

    def test_delete_by_id(self):
        self.repo.delete_by_id(self.recipe.pk)
        self.assertFalse(Recipe.objects.exists())
