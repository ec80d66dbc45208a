"""System checks guarding the indexes that recipe listings depend on."""

from django.core import checks

from recipes.models import Recipe
from recipes.models.recipe import AUTHOR_CREATED_INDEX, CATEGORY_RATING_INDEX

# index name -> expected field list (leading "-" means descending)
REQUIRED_RECIPE_INDEXES = {
    CATEGORY_RATING_INDEX: ["category", "difficulty", "-average_rating"],
    AUTHOR_CREATED_INDEX: ["author", "-created_at"],
}


@checks.register(checks.Tags.models)
def check_recipe_indexes(app_configs=None, **kwargs):
    """recipes.E001: a listing index is missing or declared with different fields."""
    declared = {index.name: list(index.fields) for index in Recipe._meta.indexes}
    errors = []
    for name, fields in REQUIRED_RECIPE_INDEXES.items():
        if declared.get(name) != fields:
            errors.append(
                checks.Error(
                    f"Recipe index {name} on {fields} is missing or changed.",
                    hint="Restore it in Recipe.Meta.indexes and run makemigrations.",
                    obj=Recipe,
                    id="recipes.E001",
                )
            )
    return errors
