from .aggregates import RatingAggregate, compute_rating_aggregate, recalculate_recipe_aggregate
from .favourites import FavouriteService
from .listing import RecipeListingService, RecipeQuery, RecipeQueryCompiler
from .ratings import RatingService
from .recipes import RecipeService
from .users import UserService

__all__ = [
    "RatingAggregate",
    "compute_rating_aggregate",
    "recalculate_recipe_aggregate",
    "FavouriteService",
    "RecipeListingService",
    "RecipeQuery",
    "RecipeQueryCompiler",
    "RatingService",
    "RecipeService",
    "UserService",
]
