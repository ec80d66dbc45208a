"""Service for the rating ledger: one rating per user per recipe."""

import logging

from django.db import IntegrityError, transaction

from recipes.exceptions import ConflictError, ValidationError
from recipes.models import Rating, Recipe
from recipes.repos.recipe_repo import RecipeRepo
from recipes.serializers import RatingInputSerializer
from recipes.services.aggregates import recalculate_recipe_aggregate

logger = logging.getLogger(__name__)


class RatingService:
    """Submit ratings and keep the recipe aggregate in step with the ledger."""

    def __init__(self, recipe_repo=None, rating_model=Rating):
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.rating_model = rating_model

    def validate(self, rating, comment=None):
        """Return (rating, comment) or raise ValidationError listing every problem."""
        payload = {"rating": rating}
        if comment is not None:
            payload["comment"] = comment
        serializer = RatingInputSerializer(data=payload)
        if not serializer.is_valid():
            raise ValidationError.from_serializer_errors(serializer.errors)
        data = serializer.validated_data
        return data["rating"], (data.get("comment") or "").strip()

    def submit_rating(self, recipe_id, user, rating, comment=None) -> Recipe:
        """
        Create or replace `user`'s rating of the recipe and return the recipe
        with its recalculated aggregate.

        A second submission by the same user overwrites rating and comment in
        place (the entry keeps its position); an omitted comment clears it.
        """
        value, text = self.validate(rating, comment)
        recipe = self.recipe_repo.find_by_id(recipe_id)

        try:
            with transaction.atomic():
                # serialises aggregate writers for this recipe
                Recipe.objects.select_for_update().only("pk").get(pk=recipe.pk)
                entry, created = self.rating_model.objects.update_or_create(
                    recipe=recipe,
                    user=user,
                    defaults={"rating": value, "comment": text},
                )
                aggregate = recalculate_recipe_aggregate(recipe)
        except IntegrityError:
            logger.warning("Concurrent rating of recipe %s by user %s", recipe.pk, user.pk)
            raise ConflictError()

        logger.info(
            "%s rating %s on recipe %s by user %s (avg=%s, total=%s)",
            "Added" if created else "Replaced",
            entry.rating,
            recipe.pk,
            user.pk,
            aggregate.average,
            aggregate.total,
        )
        return self.recipe_repo.find_by_id(recipe.pk, with_children=True)

    def ratings_for(self, recipe_id):
        """Return the ledger in submission order with raters preloaded."""
        recipe = self.recipe_repo.find_by_id(recipe_id)
        return list(self.rating_model.objects.filter(recipe=recipe).select_related("user"))
