"""Management command to seed the database with sample users, recipes, ratings and favourites."""

from random import sample, randint, choice

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from recipes.exceptions import RecipeAPIError
from recipes.models import Recipe, User
from recipes.services import FavouriteService, RatingService, RecipeService
from .seed_data import bio_phrases, comment_phrases, user_fixtures
from .seed_utils import SeedHelpers, create_username, create_email


class Command(SeedHelpers, BaseCommand):
    """Management command to seed the database with sample data.

    Recipes, ratings and favourites go through the services so aggregates
    and counters come out consistent with their rows.
    """
    USER_COUNT = 50
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total users to have after seeding")
        parser.add_argument("--recipes-per-user", type=int, default=3)
        parser.add_argument("--max-ratings", type=int, default=10, help="Upper bound of ratings per recipe")
        parser.add_argument("--favourites-per-user", type=int, default=4)

    def __init__(self, *args, **kwargs):
        """Set up faker instance and the services used for seeding."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')
        self.recipe_service = RecipeService()
        self.rating_service = RatingService()
        self.favourite_service = FavouriteService()

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.create_users(options["users"])
        self.seed_recipes(per_user=options["recipes_per_user"])
        self.seed_ratings(max_ratings_per_recipe=options["max_ratings"])
        self.seed_favourites(per_user=options["favourites_per_user"])
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, target):
        """Generate fixture and random users."""
        for data in user_fixtures:
            self.try_create_user(data)
        attempts = 0
        while User.objects.count() < target and attempts < target * 5:
            attempts += 1
            first_name = self.faker.first_name()
            last_name = self.faker.last_name()
            self.try_create_user({
                'username': create_username(first_name, last_name),
                'email': create_email(first_name, last_name),
                'first_name': first_name,
                'last_name': last_name,
            })
        self.stdout.write(f"Users: {User.objects.count()}")

    def try_create_user(self, data):
        """Try to create a user, skipping duplicates."""
        if User.objects.filter(username=data['username']).exists():
            return
        try:
            with transaction.atomic():
                User.objects.create_user(
                    username=data['username'],
                    email=data['email'],
                    password=Command.DEFAULT_PASSWORD,
                    first_name=data['first_name'],
                    last_name=data['last_name'],
                    bio=choice(bio_phrases),
                )
        except IntegrityError:
            pass

    def seed_recipes(self, *, per_user: int = 3) -> None:
        """Create recipes for every user through the recipe service."""
        created = 0
        for author in User.objects.all():
            for _ in range(randint(1, max(1, per_user))):
                try:
                    self.recipe_service.create(self._build_recipe_payload(), author)
                    created += 1
                except RecipeAPIError as exc:
                    self.stderr.write(f"Skipped recipe for {author.username}: {exc.message}")
        self.stdout.write(f"Recipes created: {created}")

    def seed_ratings(self, *, max_ratings_per_recipe: int = 10) -> None:
        """Rate public recipes from a random sample of non-author users."""
        users = list(User.objects.all())
        submitted = 0
        for recipe in Recipe.objects.filter(is_public=True):
            raters = [u for u in users if u.pk != recipe.author_id]
            for user in sample(raters, min(len(raters), randint(0, max_ratings_per_recipe))):
                comment = choice(comment_phrases)
                self.rating_service.submit_rating(recipe.pk, user, randint(1, 5), comment or None)
                submitted += 1
        self.stdout.write(f"Ratings submitted: {submitted}")

    def seed_favourites(self, *, per_user: int = 4) -> None:
        """Add a few public recipes to each user's favourites."""
        recipe_ids = list(Recipe.objects.filter(is_public=True).values_list("id", flat=True))
        if not recipe_ids:
            self.stdout.write("no public recipes found, skipping favourites seeding.")
            return
        added = 0
        for user in User.objects.all():
            for recipe_id in sample(recipe_ids, min(per_user, len(recipe_ids))):
                if self.favourite_service.is_favourited(recipe_id, user):
                    continue
                self.favourite_service.toggle(recipe_id, user)
                added += 1
        self.stdout.write(f"Favourites added: {added}")
