"""Repository helpers for user lookups."""

from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet

from recipes.db_accessor import DB_Accessor
from recipes.exceptions import NotFoundError
from recipes.models.user import User


class UserRepo(DB_Accessor):
    """Repository for basic user queries."""
    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_id(self, user_id: Any) -> User:
        """Return a user by id or raise NotFoundError."""
        try:
            return self.get(id=user_id)
        except (User.DoesNotExist, DjangoValidationError, ValueError, TypeError):
            raise NotFoundError("User not found")

    def username_taken(self, username: str, *, exclude_id: Any = None) -> bool:
        """Return True when another user already has this username."""
        qs = self.model.objects.filter(username=username)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()

    def search(self, term: str = "") -> QuerySet:
        """Users whose username or names contain `term` (case-insensitive)."""
        qs = self.queryset()
        if term:
            qs = qs.filter(
                Q(username__icontains=term)
                | Q(first_name__icontains=term)
                | Q(last_name__icontains=term)
            )
        return qs
