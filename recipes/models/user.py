"""Custom user model with profile metadata and avatar helpers."""

from django.core.validators import RegexValidator, MaxLengthValidator
from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Recipe author / rater with profile info and a created-recipe counter."""

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[RegexValidator(
            regex=r'^[\w@.-]{3,}$',
            message='Username must consist of at least three characters'
        )]
    )
    first_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50, blank=True)
    email = models.EmailField(unique=True, blank=False)
    bio = models.TextField(
        max_length=500,
        blank=True,
        help_text="short user bio shown on profile",
        validators=[MaxLengthValidator(500)]
    )
    avatar = models.ImageField(upload_to="avatars/", blank=True, null=True)

    # cached count maintained by recipe create/delete signals
    recipes_created = models.PositiveIntegerField(default=0)

    favourite_recipes = models.ManyToManyField(
        "recipes.Recipe",
        through="recipes.Favourite",
        related_name="favourited_by",
        blank=True,
    )

    class Meta:
        """Default ordering for users."""
        ordering = ['last_name', 'first_name']

    def full_name(self):
        """Return full name string."""
        return f'{self.first_name} {self.last_name}'.strip()

    def gravatar(self, size=120):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mp')

    def avatar_or_gravatar(self, size=120):
        """Return uploaded avatar URL or a gravatar fallback."""
        if self.avatar:
            try:
                return self.avatar.url
            except ValueError:
                pass
        return self.gravatar(size=size)

    @property
    def avatar_url(self):
        """Preferred avatar URL for author summaries."""
        return self.avatar_or_gravatar(size=200)

    @property
    def joined_date(self):
        return self.date_joined
