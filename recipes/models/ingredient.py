"""Model for recipe ingredients."""

from django.db import models
from .recipe import Recipe


class Ingredient(models.Model):
    """Ingredient line of a recipe: name, amount and unit."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='ingredients'
    )

    name = models.CharField(max_length=255)

    # free text amounts such as "1/2" or "a pinch"
    amount = models.CharField(max_length=50)
    unit = models.CharField(max_length=50)

    # position in the recipe
    position = models.PositiveIntegerField(default=1)

    class Meta:
        """Ordering and position constraints for ingredients."""
        db_table = "ingredient"
        ordering = ["position", "id"]
        unique_together = (
            ('recipe', 'position'),
        )
        constraints = [
            models.CheckConstraint(
                condition=models.Q(position__gt=0),
                name='ingredient_position_gt_0'
            ),
        ]

    def save(self, *args, **kwargs):
        """Trim text fields before saving."""
        self.name = (self.name or "").strip()
        self.amount = (self.amount or "").strip()
        self.unit = (self.unit or "").strip()
        super().save(*args, **kwargs)

    def __str__(self):
        """Readable ingredient string with amount."""
        return f"{self.name} ({self.amount} {self.unit})"
