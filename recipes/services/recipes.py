"""Service helpers for the recipe lifecycle: create, view, update, delete."""

import logging

from django.db import transaction

from recipes.exceptions import AuthorizationError, NotFoundError, ValidationError
from recipes.models import Favourite, Ingredient, Recipe, RecipeStep
from recipes.repos.recipe_repo import RecipeRepo
from recipes.serializers import RecipeWriteSerializer

logger = logging.getLogger(__name__)

# changing any of these requires rebuilding the search document
SEARCHABLE_FIELDS = {"title", "description", "tags", "cuisine"}


class RecipeService:
    """Encapsulate recipe lifecycle operations; the acting user is always passed in."""

    def __init__(self, recipe_repo=None):
        self.recipe_repo = recipe_repo or RecipeRepo()

    def _validated(self, data, *, partial=False):
        serializer = RecipeWriteSerializer(data=data, partial=partial)
        if not serializer.is_valid():
            raise ValidationError.from_serializer_errors(serializer.errors)
        return dict(serializer.validated_data)

    def _authorize(self, recipe, actor):
        actor_id = getattr(actor, "pk", actor)
        if actor_id is None or recipe.author_id != actor_id:
            raise AuthorizationError()

    def _replace_ingredients(self, recipe, ingredients):
        Ingredient.objects.filter(recipe=recipe).delete()
        Ingredient.objects.bulk_create(
            Ingredient(
                recipe=recipe,
                name=item["name"].strip(),
                amount=item["amount"].strip(),
                unit=item["unit"].strip(),
                position=position,
            )
            for position, item in enumerate(ingredients, start=1)
        )

    def _replace_steps(self, recipe, instructions):
        RecipeStep.objects.filter(recipe=recipe).delete()
        RecipeStep.objects.bulk_create(
            RecipeStep(recipe=recipe, step=item["step"], description=item["description"].strip())
            for item in sorted(instructions, key=lambda i: i["step"])
        )

    def create(self, data, actor) -> Recipe:
        """Validate and persist a new recipe authored by `actor`; nothing is written on failure."""
        validated = self._validated(data)
        ingredients = validated.pop("ingredients")
        instructions = validated.pop("instructions")

        with transaction.atomic():
            recipe = self.recipe_repo.insert(author=actor, **validated)
            self._replace_ingredients(recipe, ingredients)
            self._replace_steps(recipe, instructions)
            recipe.refresh_search_document()

        logger.info("Recipe %s created by user %s", recipe.pk, actor.pk)
        return self.recipe_repo.find_by_id(recipe.pk, with_children=True)

    def view(self, recipe_id, viewer=None) -> Recipe:
        """
        Return a recipe for display and count the view.

        The counter is bumped with a single UPDATE so concurrent views never
        lose increments. Private recipes are only visible to their author.
        """
        recipe = self.recipe_repo.find_by_id(recipe_id)
        viewer_id = getattr(viewer, "pk", None)
        if not recipe.is_public and recipe.author_id != viewer_id:
            raise NotFoundError()
        self.recipe_repo.atomic_increment(recipe.pk, "views", 1)
        return self.recipe_repo.find_by_id(recipe.pk, with_children=True)

    def update(self, recipe_id, patch, actor) -> Recipe:
        """
        Merge a partial patch into the recipe. Only the author may update.

        Derived and server-owned fields in the patch are ignored; supplying
        ingredients or instructions replaces that whole list.
        """
        recipe = self.recipe_repo.find_by_id(recipe_id)
        self._authorize(recipe, actor)
        validated = self._validated(patch or {}, partial=True)
        ingredients = validated.pop("ingredients", None)
        instructions = validated.pop("instructions", None)

        with transaction.atomic():
            for field, value in validated.items():
                setattr(recipe, field, value)
            recipe.save(update_fields=[*validated.keys(), "updated_at"])
            if ingredients is not None:
                self._replace_ingredients(recipe, ingredients)
            if instructions is not None:
                self._replace_steps(recipe, instructions)
            if ingredients is not None or SEARCHABLE_FIELDS & validated.keys():
                recipe.refresh_search_document()

        logger.info("Recipe %s updated by user %s (%s)", recipe.pk, actor.pk, ", ".join(sorted(validated)) or "lists")
        return self.recipe_repo.find_by_id(recipe.pk, with_children=True)

    def delete(self, recipe_id, actor) -> None:
        """Hard-delete the recipe and purge it from every user's favourites."""
        recipe = self.recipe_repo.find_by_id(recipe_id)
        self._authorize(recipe, actor)

        with transaction.atomic():
            purged, _ = Favourite.objects.filter(recipe_id=recipe.pk).delete()
            recipe.delete()

        logger.info("Recipe %s deleted by user %s; removed from %s favourite lists", recipe_id, actor.pk, purged)
