"""Model representing an individual instruction step with ordering."""

from django.db import models
from .recipe import Recipe

class RecipeStep(models.Model):
    """Numbered instruction step for a recipe."""
    recipe = models.ForeignKey(
        Recipe,
        on_delete=models.CASCADE,
        db_column='recipe_id',
        related_name='steps'
    )

    step = models.PositiveIntegerField()

    description = models.TextField(max_length=1000)

    class Meta:
        """Uniqueness and ordering constraints for steps."""
        db_table = "recipe_step"
        ordering = ["step"]
        unique_together = (
            ('recipe', 'step'),
        )
        constraints = [
            models.CheckConstraint(
                condition=models.Q(step__gt=0),
                name="recipe_step_gt_0"
            ),
        ]

    def __str__(self):
        """Readable snippet of the step for admin/debugging."""
        return f"Step {self.step}: {self.description[:30]}..."
