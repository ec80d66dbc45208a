import uuid
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from .user import User

"""
Recipe model

The central record of the app: a user-published recipe plus the derived
rating aggregate.

- `author` links the recipe to the user who created it and is never
  reassigned after creation.
- Ingredients and instruction steps live in their own tables
  (`Ingredient`, `RecipeStep`) ordered by `position`.
- `ratings` (the ledger) is the set of `Rating` rows, one per user.
- `average_rating` / `total_ratings` are derived from the ledger and only
  written by `recipes.services.aggregates.recalculate_recipe_aggregate`.
- `views` / `favourites` are counters updated with F-expressions so
  concurrent requests never lose increments.
- `search_document` is a lowercase blob of title, description, ingredient
  names, tags and cuisine; it backs the full-text index.
- `total_time` is computed on read and never stored.
"""

# Index names are referenced by the query compiler and the index checks.
CATEGORY_RATING_INDEX = "recipe_cat_diff_rating_idx"
AUTHOR_CREATED_INDEX = "recipe_author_created_idx"
SEARCH_INDEX = "recipe_search_idx"


class Recipe(models.Model):
    DIFFICULTY_EASY = "Easy"
    DIFFICULTY_MEDIUM = "Medium"
    DIFFICULTY_HARD = "Hard"

    DIFFICULTY_CHOICES = [
        (DIFFICULTY_EASY, "Easy"),
        (DIFFICULTY_MEDIUM, "Medium"),
        (DIFFICULTY_HARD, "Hard"),
    ]

    CATEGORY_CHOICES = [
        ("Breakfast", "Breakfast"),
        ("Lunch", "Lunch"),
        ("Dinner", "Dinner"),
        ("Dessert", "Dessert"),
        ("Snack", "Snack"),
        ("Appetizer", "Appetizer"),
        ("Beverage", "Beverage"),
        ("Other", "Other"),
    ]

    # fields a client may never set directly
    DERIVED_FIELDS = ("average_rating", "total_ratings", "total_time")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    author = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='recipes',
        db_column='author_id',
    )

    title = models.CharField(max_length=100)
    description = models.CharField(max_length=500)

    cooking_time = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    prep_time = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    servings = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    difficulty = models.CharField(
        max_length=10,
        choices=DIFFICULTY_CHOICES,
        default=DIFFICULTY_MEDIUM,
    )
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    cuisine = models.CharField(max_length=100)

    # lowercase string array
    tags = models.JSONField(default=list, blank=True)
    image = models.CharField(max_length=500, blank=True, default="")

    average_rating = models.FloatField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
        editable=False,
    )
    total_ratings = models.PositiveIntegerField(default=0, editable=False)

    views = models.PositiveIntegerField(default=0, editable=False)
    favourites = models.PositiveIntegerField(default=0, editable=False)

    is_public = models.BooleanField(default=True)

    search_document = models.TextField(blank=True, default="", editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'recipe'
        indexes = [
            models.Index(
                fields=["category", "difficulty", "-average_rating"],
                name=CATEGORY_RATING_INDEX,
            ),
            models.Index(
                fields=["author", "-created_at"],
                name=AUTHOR_CREATED_INDEX,
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(average_rating__gte=0) & models.Q(average_rating__lte=5),
                name="recipe_average_rating_range",
            ),
        ]

    def __str__(self):
        return self.title

    @property
    def total_time(self):
        return (self.prep_time or 0) + (self.cooking_time or 0)

    def build_search_document(self, ingredient_names=None):
        """Join the text-indexed fields into one lowercase string."""
        if ingredient_names is None:
            ingredient_names = self.ingredients.values_list("name", flat=True)
        parts = [self.title, self.description, *ingredient_names, *(self.tags or []), self.cuisine]
        return " ".join(p.strip().lower() for p in parts if p)

    def refresh_search_document(self):
        """Rebuild `search_document` from current state and persist just that column."""
        self.search_document = self.build_search_document()
        Recipe.objects.filter(pk=self.pk).update(search_document=self.search_document)
        return self.search_document
