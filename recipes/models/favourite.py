from django.conf import settings
from django.db import models

"""
Favourite model

Membership row of a user's favourite set.

- Each row links one user to one recipe; the pair is unique so a toggle can
  be expressed as "delete if present, else insert" without a prior read.
- Rows cascade away with either side, and recipe deletion also purges them
  explicitly (see RecipeService.delete) so no dangling references survive.
- `Recipe.favourites` is the cached count of these rows and is adjusted in
  the same transaction as every insert/delete done by FavouriteService.
"""

class Favourite(models.Model):
    """A recipe in a user's favourites."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="favourites",
    )

    recipe = models.ForeignKey(
        "recipes.Recipe",
        on_delete=models.CASCADE,
        related_name="favourite_rows",
    )

    added_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "favourite"
        constraints = [
            models.UniqueConstraint(
                fields=["user", "recipe"],
                name="uniq_favourite_user_recipe",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "-added_at"], name="favourite_user_added_idx"),
        ]

    def __str__(self) -> str:
        return f"Favourite(user={self.user_id}, recipe={self.recipe_id})"
