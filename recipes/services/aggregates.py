"""Rating aggregate: average and count derived from a recipe's rating ledger."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from recipes.models import Rating, Recipe


@dataclass(frozen=True)
class RatingAggregate:
    average: float
    total: int


def round_half_up(value: Decimal, places: int = 1) -> float:
    """Round like JavaScript's Math.round(x * 10) / 10, not banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def compute_rating_aggregate(values: Iterable[int]) -> RatingAggregate:
    """Pure: (average rounded to one decimal, count); an empty ledger gives (0.0, 0)."""
    ratings = [int(v) for v in values]
    if not ratings:
        return RatingAggregate(average=0.0, total=0)
    average = Decimal(sum(ratings)) / Decimal(len(ratings))
    return RatingAggregate(average=round_half_up(average), total=len(ratings))


def recalculate_recipe_aggregate(recipe: Recipe) -> RatingAggregate:
    """
    Recompute and persist the aggregate for `recipe` from its current ledger.

    Must run inside the transaction that mutated the ledger so the stored
    aggregate is never observed out of step with the ratings.
    """
    values = Rating.objects.filter(recipe_id=recipe.pk).values_list("rating", flat=True)
    aggregate = compute_rating_aggregate(values)
    Recipe.objects.filter(pk=recipe.pk).update(
        average_rating=aggregate.average,
        total_ratings=aggregate.total,
    )
    recipe.average_rating = aggregate.average
    recipe.total_ratings = aggregate.total
    return aggregate
