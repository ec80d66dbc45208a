from django.db import IntegrityError, transaction
from django.test import TestCase

from recipes.models import Ingredient, RecipeStep
from recipes.tests.helpers import make_recipe


class IngredientAndStepTestCase(TestCase):
    def setUp(self):
        self.recipe = make_recipe(ingredients=())

    def test_ingredient_text_is_trimmed(self):
        ingredient = Ingredient.objects.create(
            recipe=self.recipe, name="  basil ", amount=" 1 ", unit=" handful ", position=1
        )
        ingredient.refresh_from_db()
        self.assertEqual((ingredient.name, ingredient.amount, ingredient.unit), ("basil", "1", "handful"))

    def test_ingredient_position_unique_per_recipe(self):
        Ingredient.objects.create(recipe=self.recipe, name="a", amount="1", unit="g", position=1)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Ingredient.objects.create(recipe=self.recipe, name="b", amount="1", unit="g", position=1)

    def test_step_numbers_unique_per_recipe(self):
        # make_recipe already created step 1
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                RecipeStep.objects.create(recipe=self.recipe, step=1, description="again")

    def test_steps_ordered_by_number(self):
        RecipeStep.objects.create(recipe=self.recipe, step=3, description="third")
        RecipeStep.objects.create(recipe=self.recipe, step=2, description="second")
        self.assertEqual([s.step for s in self.recipe.steps.all()], [1, 2, 3])
