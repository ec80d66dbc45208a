"""Model representing one user's rating of a recipe."""

from django.core.validators import MaxLengthValidator, MaxValueValidator, MinValueValidator
from django.db import models
from .user import User
from .recipe import Recipe


class Rating(models.Model):
    """Ledger entry: at most one per (recipe, user); replaced in place on re-rating."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ratings'
    )

    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='ratings'
    )

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    comment = models.TextField(
        max_length=500,
        blank=True,
        default="",
        validators=[MaxLengthValidator(500)],
    )

    # ledger order; untouched when an entry is replaced
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """One rating per user per recipe, ordered by first submission."""
        db_table = "rating"
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["recipe", "user"],
                name="uniq_rating_recipe_user",
            ),
            models.CheckConstraint(
                condition=models.Q(rating__gte=1) & models.Q(rating__lte=5),
                name="rating_value_range",
            ),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} rated {self.recipe_id}: {self.rating}"
