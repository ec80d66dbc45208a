user_fixtures = [
    {"username": "@johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "@janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "@charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

recipe_image_pool = [
    "/static/recipe_images/meal1.jpg",
    "/static/recipe_images/meal2.jpg",
    "/static/recipe_images/meal3.jpg",
    "/static/recipe_images/meal4.jpg",
    "/static/recipe_images/meal5.jpg",
    "/static/recipe_images/meal6.jpg",
]

BASE_INGREDIENT_POOL = [
    ("salt", "1", "tsp"),
    ("black pepper", "1/2", "tsp"),
    ("olive oil", "2", "tbsp"),
    ("garlic cloves", "3", "pcs"),
    ("red onion", "1", "pcs"),
    ("cherry tomatoes", "250", "g"),
    ("parmesan", "50", "g"),
    ("fresh basil", "1", "handful"),
    ("chicken breast", "2", "pcs"),
    ("smoked paprika", "1", "tsp"),
    ("ground cumin", "1", "tsp"),
    ("yogurt", "150", "ml"),
    ("baby spinach", "100", "g"),
    ("mushrooms", "200", "g"),
    ("lemon juice", "1", "tbsp"),
    ("soy sauce", "2", "tbsp"),
    ("white rice", "300", "g"),
    ("pasta", "400", "g"),
    ("butter", "30", "g"),
    ("all-purpose flour", "200", "g"),
    ("granulated sugar", "100", "g"),
    ("eggs", "2", "pcs"),
    ("milk", "250", "ml"),
    ("dark chocolate", "100", "g"),
]

categories = ["Breakfast", "Lunch", "Dinner", "Dessert", "Snack", "Appetizer", "Beverage", "Other"]
difficulties = ["Easy", "Medium", "Hard"]
cuisines = ["Italian", "Indian", "Mexican", "British", "Japanese", "Thai", "French", "Greek"]
tags_pool = ["quick", "family", "spicy", "budget", "comfort", "healthy", "high-protein", "low-carb", "vegetarian"]

comment_phrases = [
    "Amazing!!",
    "Looks yummy",
    "Definitely will be trying this out",
    "made it last night, 10/10",
    "how spicy is it tho",
    "love how simple this is",
    "comfort food fr",
    "added extra garlic and yeah... wow",
    "presentation on point",
    "a bit bland for me",
    "took way longer than the prep time says",
    "kids loved it",
    "",
]

bio_phrases = [
    "home cook who loves quick meals",
    "always experimenting with new flavours",
    "Meal prep enthusiast and pasta fan",
    "baking on weekends, cooking every day",
    "trying to eat healthier without losing taste",
    "BIG on comfort food and family dinners",
    "spice lover, especially in curries and stews",
    "Student cook learning one recipe at a time",
    "foodie who believes butter fixes everything",
    "i cook, i taste, i improvise",
]
