from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver
from recipes.models import Recipe
from recipes.repos.user_repo import UserRepo

user_repo = UserRepo()


@receiver(post_save, sender=Recipe)
def count_created_recipe(sender, instance, created, **kwargs):
    """Bump the author's recipes_created counter when a recipe is created."""
    if not created:
        return
    user_repo.increment({"id": instance.author_id}, "recipes_created", 1)


@receiver(post_delete, sender=Recipe)
def uncount_deleted_recipe(sender, instance, **kwargs):
    """Decrement the author's counter on deletion, never below zero."""
    user_repo.increment({"id": instance.author_id}, "recipes_created", -1)
