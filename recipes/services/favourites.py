"""Service helpers for a user's favourite recipes."""

import logging

from django.db import IntegrityError, transaction

from recipes.exceptions import ConflictError
from recipes.models import Favourite
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.listing import paginate

logger = logging.getLogger(__name__)


class FavouriteService:
    """Encapsulate favourite toggling and listing."""

    def __init__(self, favourite_model=Favourite, recipe_repo=None):
        self.favourite_model = favourite_model
        self.recipe_repo = recipe_repo or RecipeRepo()

    def toggle(self, recipe_id, user):
        """
        Flip the recipe's membership in the user's favourites.

        The decision is taken by the write itself: a conditional DELETE of the
        (user, recipe) row, or an INSERT guarded by the unique constraint.
        The counter moves in the same transaction. Returns
        (is_favourited_now, favourites_count).
        """
        recipe = self.recipe_repo.find_by_id(recipe_id)

        try:
            with transaction.atomic():
                removed = self.favourite_model.objects.filter(user=user, recipe_id=recipe.pk).delete()[0]
                if removed:
                    self.recipe_repo.atomic_increment(recipe.pk, "favourites", -1)
                    is_favourited = False
                else:
                    self.favourite_model.objects.create(user=user, recipe_id=recipe.pk)
                    self.recipe_repo.atomic_increment(recipe.pk, "favourites", 1)
                    is_favourited = True
        except IntegrityError:
            logger.warning("Concurrent favourite toggle of recipe %s by user %s", recipe.pk, user.pk)
            raise ConflictError()

        count = self.recipe_repo.queryset().filter(pk=recipe.pk).values_list("favourites", flat=True).first()
        logger.info(
            "Recipe %s %s favourites of user %s",
            recipe.pk,
            "added to" if is_favourited else "removed from",
            user.pk,
        )
        return is_favourited, count or 0

    def is_favourited(self, recipe_id, user):
        return self.favourite_model.objects.filter(user=user, recipe_id=recipe_id).exists()

    def list_for_user(self, user, page=1, limit=12):
        """Page through the user's favourite recipes, most recently added first."""
        qs = self.recipe_repo.queryset().filter(favourite_rows__user=user).prefetch_related(
            "ingredients", "steps"
        )
        return paginate(
            self.recipe_repo,
            qs=qs,
            order_by=("-favourite_rows__added_at", "-id"),
            page=page,
            limit=limit,
        )
