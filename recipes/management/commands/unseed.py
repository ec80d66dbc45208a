from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import transaction
from recipes.models import User

class Command(BaseCommand):
    """
    Management command to remove (unseed) sample data from the database.

    Deletes all non-staff users. Their recipes, ratings and favourites go
    with them through cascades, so the derived columns of the surviving
    recipes are recalculated afterwards.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        non_staff_users = User.objects.filter(is_staff=False)

        with transaction.atomic():
            deleted_count, _ = non_staff_users.delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} non-staff users and related data."))
        call_command("recalculate_ratings", stdout=self.stdout)
