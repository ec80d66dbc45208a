from typing import Any, Dict, List, Mapping, Optional, Sequence, Type
from django.db.models import F, Model, Q, QuerySet, Value
from django.db.models.functions import Greatest


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def queryset(self) -> QuerySet:
        return self.model.objects.all()

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any] | Q] = None,
        order_by: Sequence[Any] = (),
        limit: Optional[int] = None,
        offset: int = 0,
        as_dict: bool = False,
        qs: Optional[QuerySet] = None,
    ) -> QuerySet | List[Dict[str, Any]]:
        """Return a filtered/ordered/sliced queryset (or list of dicts)."""
        qs = self._apply_filters(self.queryset() if qs is None else qs, filters)
        qs = self._apply_ordering(qs, order_by)
        qs = self._apply_slice(qs, offset=offset, limit=limit)
        return list(qs.values()) if as_dict else qs

    def count(self, filters: Optional[Mapping[str, Any] | Q] = None, qs: Optional[QuerySet] = None) -> int:
        """Return the number of rows matching filters."""
        return self._apply_filters(self.queryset() if qs is None else qs, filters).count()

    def _apply_filters(self, qs: QuerySet, filters) -> QuerySet:
        if filters is None:
            return qs
        if isinstance(filters, Q):
            return qs.filter(filters)
        return qs.filter(**filters)

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[Any]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def _apply_slice(
        self, qs: QuerySet, *, offset: int = 0, limit: Optional[int] = None
    ) -> QuerySet:
        if not (offset or limit is not None):
            return qs
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return qs[start:end]

    def get(self, **lookup: Any) -> Model:
        """Fetch a single object matching the lookup."""
        return self.queryset().get(**lookup)

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def increment(self, lookup: Mapping[str, Any], field: str, delta: int = 1) -> int:
        """
        Add `delta` to `field` in a single UPDATE statement.

        Negative deltas are floored at zero so counters never go below it.
        """
        expression = F(field) + delta
        if delta < 0:
            expression = Greatest(F(field) + delta, Value(0))
        return self.model.objects.filter(**lookup).update(**{field: expression})

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
