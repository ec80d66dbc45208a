"""Service helpers for user profiles and discovery."""

import logging

from recipes.exceptions import ValidationError
from recipes.repos.user_repo import UserRepo
from recipes.serializers import ProfileUpdateSerializer
from recipes.services.listing import paginate

logger = logging.getLogger(__name__)


class UserService:
    """Encapsulate profile lookups and updates."""

    def __init__(self, user_repo=None):
        self.user_repo = user_repo or UserRepo()

    def fetch(self, user_id):
        """Fetch a user by id or raise NotFoundError."""
        return self.user_repo.get_by_id(user_id)

    def public_recipe_count(self, user):
        return user.recipes.filter(is_public=True).count()

    def update_profile(self, user, data):
        """Apply first/last name, bio and username changes; usernames stay unique."""
        serializer = ProfileUpdateSerializer(data=data, partial=True)
        if not serializer.is_valid():
            raise ValidationError.from_serializer_errors(serializer.errors)
        changes = {k: v for k, v in serializer.validated_data.items() if v != "" or k == "bio"}

        username = changes.get("username")
        if username and self.user_repo.username_taken(username, exclude_id=user.pk):
            raise ValidationError(
                errors=[{"field": "username", "message": "Username is already taken"}],
                message="Username is already taken",
            )

        for field, value in changes.items():
            setattr(user, field, value)
        if changes:
            user.save(update_fields=list(changes))
            logger.info("User %s updated profile fields: %s", user.pk, ", ".join(sorted(changes)))
        return user

    def discover(self, search="", page=1, limit=20):
        """Users matching `search`, most prolific authors first."""
        return paginate(
            self.user_repo,
            qs=self.user_repo.search(search),
            order_by=("-recipes_created", "-date_joined", "id"),
            page=page,
            limit=limit,
        )
