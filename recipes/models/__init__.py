from .user import User
from .recipe import Recipe
from .ingredient import Ingredient
from .recipe_step import RecipeStep
from .rating import Rating
from .favourite import Favourite

__all__ = [
    "User",
    "Recipe",
    "Ingredient",
    "RecipeStep",
    "Rating",
    "Favourite",
]
