from rest_framework import serializers
from recipes.models import Ingredient, Rating, Recipe, RecipeStep, User


class AuthorSummarySerializer(serializers.ModelSerializer):
    """Compact user representation embedded in recipes and ratings."""
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    avatar = serializers.CharField(source="avatar_url", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "firstName", "lastName", "avatar"]


class IngredientSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=255)
    amount = serializers.CharField(max_length=50)
    unit = serializers.CharField(max_length=50)

    class Meta:
        model = Ingredient
        fields = ["name", "amount", "unit"]


class InstructionSerializer(serializers.ModelSerializer):
    step = serializers.IntegerField(min_value=1, required=False)
    description = serializers.CharField(max_length=1000)

    class Meta:
        model = RecipeStep
        fields = ["step", "description"]


class RatingEntrySerializer(serializers.ModelSerializer):
    user = AuthorSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Rating
        fields = ["id", "user", "rating", "comment", "createdAt"]


class RatingInputSerializer(serializers.Serializer):
    """Validates a rating submission: integer 1-5 and an optional comment."""
    rating = serializers.IntegerField(
        min_value=1,
        max_value=5,
        error_messages={
            "min_value": "Rating must be between 1 and 5",
            "max_value": "Rating must be between 1 and 5",
        },
    )
    comment = serializers.CharField(
        max_length=500,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={"max_length": "Comment cannot exceed 500 characters"},
    )


class RecipeWriteSerializer(serializers.Serializer):
    """
    Validates create payloads and partial update patches.

    Field names follow the public API (camelCase). Derived fields such as
    averageRating, totalRatings or totalTime are not declared, so DRF drops
    them from validated data.
    """
    title = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=500)
    ingredients = IngredientSerializer(many=True, allow_empty=False)
    instructions = InstructionSerializer(many=True, allow_empty=False)
    cookingTime = serializers.IntegerField(
        source="cooking_time", min_value=1,
        error_messages={"min_value": "Cooking time must be at least 1 minute"},
    )
    prepTime = serializers.IntegerField(
        source="prep_time", min_value=1,
        error_messages={"min_value": "Prep time must be at least 1 minute"},
    )
    servings = serializers.IntegerField(
        min_value=1,
        error_messages={"min_value": "Must serve at least 1 person"},
    )
    difficulty = serializers.ChoiceField(choices=Recipe.DIFFICULTY_CHOICES, default=Recipe.DIFFICULTY_MEDIUM)
    category = serializers.ChoiceField(choices=Recipe.CATEGORY_CHOICES)
    cuisine = serializers.CharField(max_length=100)
    tags = serializers.ListField(child=serializers.CharField(max_length=50), required=False)
    image = serializers.CharField(max_length=500, required=False, allow_blank=True)
    isPublic = serializers.BooleanField(source="is_public", required=False)

    def validate_tags(self, value):
        """Lowercase, trim and de-duplicate while keeping order."""
        seen = []
        for tag in value:
            tag = tag.strip().lower()
            if tag and tag not in seen:
                seen.append(tag)
        return seen

    def _complete_entries(self, serializer_class, value):
        """Partial patches still replace whole lists, so every entry needs all its fields."""
        if not self.partial:
            return value
        entries = serializer_class(data=[dict(item) for item in value], many=True)
        if not entries.is_valid():
            raise serializers.ValidationError(entries.errors)
        return [dict(item) for item in entries.validated_data]

    def validate_ingredients(self, value):
        return self._complete_entries(IngredientSerializer, value)

    def validate_instructions(self, value):
        """Number steps by position when omitted and reject duplicate numbers."""
        value = self._complete_entries(InstructionSerializer, value)
        numbered = []
        for index, item in enumerate(value, start=1):
            numbered.append({**item, "step": item.get("step") or index})
        steps = [item["step"] for item in numbered]
        if len(steps) != len(set(steps)):
            raise serializers.ValidationError("Instruction step numbers must be unique")
        return numbered


class RecipeSerializer(serializers.ModelSerializer):
    """Read representation used by listings."""
    author = AuthorSummarySerializer(read_only=True)
    ingredients = IngredientSerializer(many=True, read_only=True)
    instructions = InstructionSerializer(source="steps", many=True, read_only=True)
    cookingTime = serializers.IntegerField(source="cooking_time", read_only=True)
    prepTime = serializers.IntegerField(source="prep_time", read_only=True)
    totalTime = serializers.IntegerField(source="total_time", read_only=True)
    averageRating = serializers.FloatField(source="average_rating", read_only=True)
    totalRatings = serializers.IntegerField(source="total_ratings", read_only=True)
    favorites = serializers.IntegerField(source="favourites", read_only=True)
    isPublic = serializers.BooleanField(source="is_public", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Recipe
        fields = [
            "id",
            "title",
            "description",
            "ingredients",
            "instructions",
            "cookingTime",
            "prepTime",
            "totalTime",
            "servings",
            "difficulty",
            "category",
            "cuisine",
            "tags",
            "image",
            "author",
            "averageRating",
            "totalRatings",
            "views",
            "favorites",
            "isPublic",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class RecipeDetailSerializer(RecipeSerializer):
    """Single-recipe representation, including the rating ledger."""
    ratings = RatingEntrySerializer(many=True, read_only=True)

    class Meta(RecipeSerializer.Meta):
        fields = RecipeSerializer.Meta.fields + ["ratings"]
        read_only_fields = fields


class FavouriteRecipeSerializer(serializers.ModelSerializer):
    """Short recipe card used inside a user's profile."""
    averageRating = serializers.FloatField(source="average_rating", read_only=True)
    cookingTime = serializers.IntegerField(source="cooking_time", read_only=True)
    prepTime = serializers.IntegerField(source="prep_time", read_only=True)

    class Meta:
        model = Recipe
        fields = ["id", "title", "image", "averageRating", "cookingTime", "prepTime"]


class ProfileSerializer(serializers.ModelSerializer):
    """The signed-in user's own profile."""
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    avatar = serializers.CharField(source="avatar_url", read_only=True)
    recipesCreated = serializers.IntegerField(source="recipes_created", read_only=True)
    joinedDate = serializers.DateTimeField(source="date_joined", read_only=True)
    favoriteRecipes = FavouriteRecipeSerializer(source="favourite_recipes", many=True, read_only=True)

    class Meta:
        model = User
        fields = [
            "id", "username", "email", "firstName", "lastName", "bio", "avatar",
            "recipesCreated", "joinedDate", "favoriteRecipes",
        ]


class PublicProfileSerializer(serializers.ModelSerializer):
    """Another user's profile: no email, no favourites."""
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    avatar = serializers.CharField(source="avatar_url", read_only=True)
    recipesCreated = serializers.IntegerField(source="recipes_created", read_only=True)
    joinedDate = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "firstName", "lastName", "bio", "avatar", "recipesCreated", "joinedDate"]


class ProfileUpdateSerializer(serializers.Serializer):
    firstName = serializers.CharField(source="first_name", max_length=50, required=False)
    lastName = serializers.CharField(source="last_name", max_length=50, required=False)
    bio = serializers.CharField(
        max_length=500, required=False, allow_blank=True,
        error_messages={"max_length": "Bio cannot exceed 500 characters"},
    )
    username = serializers.CharField(
        min_length=3, max_length=20, required=False,
        error_messages={
            "min_length": "Username must be between 3 and 20 characters",
            "max_length": "Username must be between 3 and 20 characters",
        },
    )
