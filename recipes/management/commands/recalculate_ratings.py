"""Management command to rebuild derived recipe columns from their source rows."""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.db.models import Count

from recipes.models import Recipe, User
from recipes.services.aggregates import recalculate_recipe_aggregate


class Command(BaseCommand):
    """Recompute rating aggregates, favourite counters and search documents."""

    help = "Recalculate average/total ratings, favourite counts and search documents"

    def add_arguments(self, parser):
        parser.add_argument("--author", help="Only recipes by this username")

    def handle(self, *args, **options):
        recipes = Recipe.objects.all()
        if options.get("author"):
            recipes = recipes.filter(author=self._author(options["author"]))

        fixed = 0
        for recipe in recipes.annotate(favourite_count=Count("favourite_rows")).iterator():
            with transaction.atomic():
                Recipe.objects.select_for_update().only("pk").get(pk=recipe.pk)
                before = (recipe.average_rating, recipe.total_ratings, recipe.favourites)
                recalculate_recipe_aggregate(recipe)
                Recipe.objects.filter(pk=recipe.pk).update(favourites=recipe.favourite_count)
                recipe.refresh_search_document()
            if before != (recipe.average_rating, recipe.total_ratings, recipe.favourite_count):
                fixed += 1

        self.stdout.write(self.style.SUCCESS(f"Recalculated {recipes.count()} recipes; {fixed} changed."))

    def _author(self, username):
        author = User.objects.filter(username=username).first()
        if author is None:
            raise CommandError(f"User '{username}' not found")
        return author
