"""Management command verifying the listing indexes exist in the live database."""

from django.core.management.base import BaseCommand, CommandError
from django.db import connection

from recipes.checks import REQUIRED_RECIPE_INDEXES
from recipes.models import Recipe
from recipes.models.recipe import SEARCH_INDEX


class Command(BaseCommand):
    """Fail when a listing index is missing from the recipe table."""

    help = "Verify recipe listing indexes are present in the database"

    def handle(self, *args, **options):
        table = Recipe._meta.db_table
        with connection.cursor() as cursor:
            constraints = connection.introspection.get_constraints(cursor, table)

        expected = set(REQUIRED_RECIPE_INDEXES)
        if connection.vendor == "postgresql":
            expected.add(SEARCH_INDEX)

        missing = sorted(name for name in expected if name not in constraints)
        if missing:
            raise CommandError(f"Missing indexes on {table}: {', '.join(missing)}")

        for name in sorted(expected):
            self.stdout.write(f"{name}: ok")
        self.stdout.write(self.style.SUCCESS("All recipe indexes present."))
