"""Repository for recipe persistence: lookups, paged queries and counters."""

from typing import Any, Mapping, Optional, Sequence

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.exceptions import NotFoundError
from recipes.models import Recipe


class RecipeRepo(DB_Accessor):
    """Store interface used by the recipe services."""

    COUNTER_FIELDS = ("views", "favourites")

    def __init__(self) -> None:
        """Initialise with the Recipe model."""
        super().__init__(Recipe)

    def queryset(self) -> QuerySet:
        return self.model.objects.select_related("author")

    def find_by_id(self, recipe_id: Any, *, with_children: bool = False) -> Recipe:
        """Return a recipe or raise NotFoundError for unknown or malformed ids."""
        qs = self.queryset()
        if with_children:
            qs = qs.prefetch_related("ingredients", "steps", "ratings__user")
        try:
            return qs.get(pk=recipe_id)
        except (Recipe.DoesNotExist, DjangoValidationError, ValueError, TypeError):
            raise NotFoundError()

    def find_many(
        self,
        filters: Optional[Mapping[str, Any] | Q] = None,
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: Optional[int] = None,
        qs: Optional[QuerySet] = None,
    ) -> QuerySet:
        return self.list(filters=filters, order_by=order_by, offset=offset, limit=limit, qs=qs)

    def count_matching(self, filters: Optional[Mapping[str, Any] | Q] = None, qs: Optional[QuerySet] = None) -> int:
        return self.count(filters, qs=qs)

    def insert(self, **data: Any) -> Recipe:
        return self.create(**data)

    def update_fields(self, recipe_id: Any, **data: Any) -> int:
        return self.update({"pk": recipe_id}, **data)

    def atomic_increment(self, recipe_id: Any, field: str, delta: int = 1) -> int:
        """Single-statement counter change; only counter columns are allowed."""
        if field not in self.COUNTER_FIELDS:
            raise ValueError(f"{field} is not a counter field")
        return self.increment({"pk": recipe_id}, field, delta)

    def delete_by_id(self, recipe_id: Any) -> int:
        return self.delete(pk=recipe_id)
