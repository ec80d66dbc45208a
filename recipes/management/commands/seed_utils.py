"""Helper utilities for assembling seed payloads without hitting the DB."""

from random import sample, randint, choice
from typing import Any, Dict, List

from .seed_data import (
    BASE_INGREDIENT_POOL,
    categories,
    cuisines,
    difficulties,
    recipe_image_pool,
    tags_pool,
)


class SeedHelpers:
    """Non-DB helpers that build request-shaped payloads for the services."""

    def _build_recipe_payload(self) -> Dict[str, Any]:
        """Construct a recipe payload in the same camelCase shape the API accepts."""
        title = self.faker.sentence(nb_words=4).rstrip(".")[:100]
        return {
            "title": title,
            "description": self.faker.paragraph(nb_sentences=3)[:500],
            "ingredients": self._build_ingredients(),
            "instructions": self._build_instructions(),
            "cookingTime": randint(5, 120),
            "prepTime": randint(5, 60),
            "servings": choice([1, 2, 4, 6, 8]),
            "difficulty": choice(difficulties),
            "category": choice(categories),
            "cuisine": choice(cuisines),
            "tags": sample(tags_pool, randint(0, 4)),
            "image": choice(recipe_image_pool),
            "isPublic": randint(1, 10) > 1,
        }

    def _build_ingredients(self, min_count: int = 4, max_count: int = 8) -> List[Dict[str, str]]:
        chosen = sample(BASE_INGREDIENT_POOL, k=min(randint(min_count, max_count), len(BASE_INGREDIENT_POOL)))
        return [{"name": name, "amount": amount, "unit": unit} for name, amount, unit in chosen]

    def _build_instructions(self, min_steps: int = 3, max_steps: int = 7) -> List[Dict[str, Any]]:
        return [
            {"step": position, "description": self.faker.sentence(nb_words=12)[:1000]}
            for position in range(1, randint(min_steps, max_steps) + 1)
        ]


def create_username(first_name, last_name):
    """Build a simple lowercase username from a name."""
    return ('@' + first_name.lower() + last_name.lower())[:30]


def create_email(first_name, last_name):
    """Build a deterministic email for seeded users."""
    return first_name + '.' + last_name + '@example.org'
