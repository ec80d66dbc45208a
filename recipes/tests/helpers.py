import uuid

from recipes.models import Ingredient, Recipe, RecipeStep, User


def make_user(**kwargs):
    username = kwargs.pop("username", "@johndoe")
    if not username.startswith("@"):
        username = "@" + username

    email = kwargs.pop(
        "email",
        f"{username[1:]}_{uuid.uuid4().hex[:6]}@example.org"
    )

    password = kwargs.pop("password", "Password123")

    user = User.objects.create_user(
        username=username,
        email=email,
        password=password,
        first_name=kwargs.pop("first_name", "John"),
        last_name=kwargs.pop("last_name", "Doe"),
        bio=kwargs.pop("bio", "Test bio"),
        **kwargs,
    )
    return user


def make_recipe(
    *,
    author=None,
    title="Tomato pasta",
    description="Weeknight pasta with tomatoes",
    ingredients=("pasta", "tomatoes"),
    **extra,
):
    """
    creates and returns a recipe with ingredient rows, one step and a
    filled search document, bypassing the service layer.
    """
    if author is None:
        author = make_user(username=f"author{uuid.uuid4().hex[:6]}")

    fields = dict(
        cooking_time=20,
        prep_time=10,
        servings=2,
        difficulty="Easy",
        category="Dinner",
        cuisine="Italian",
        tags=[],
    )
    fields.update(extra)
    recipe = Recipe.objects.create(author=author, title=title, description=description, **fields)
    for position, name in enumerate(ingredients, start=1):
        Ingredient.objects.create(recipe=recipe, name=name, amount="1", unit="pcs", position=position)
    RecipeStep.objects.create(recipe=recipe, step=1, description="Cook everything.")
    recipe.refresh_search_document()
    return recipe


def recipe_payload(**overrides):
    """A valid create payload in the API's camelCase shape."""
    payload = {
        "title": "Chocolate cake",
        "description": "Rich and moist",
        "ingredients": [
            {"name": "flour", "amount": "200", "unit": "g"},
            {"name": "dark chocolate", "amount": "100", "unit": "g"},
        ],
        "instructions": [
            {"step": 1, "description": "Melt the chocolate."},
            {"step": 2, "description": "Fold in the flour and bake."},
        ],
        "cookingTime": 40,
        "prepTime": 20,
        "servings": 8,
        "difficulty": "Medium",
        "category": "Dessert",
        "cuisine": "French",
        "tags": ["Baking", " sweet ", "baking"],
    }
    payload.update(overrides)
    return payload
