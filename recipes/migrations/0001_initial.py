import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("username", models.CharField(max_length=30, unique=True, validators=[django.core.validators.RegexValidator(message="Username must consist of at least three characters", regex="^[\\w@.-]{3,}$")])),
                ("first_name", models.CharField(blank=True, max_length=50)),
                ("last_name", models.CharField(blank=True, max_length=50)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("bio", models.TextField(blank=True, help_text="short user bio shown on profile", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("avatar", models.ImageField(blank=True, null=True, upload_to="avatars/")),
                ("recipes_created", models.PositiveIntegerField(default=0)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["last_name", "first_name"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Recipe",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=100)),
                ("description", models.CharField(max_length=500)),
                ("cooking_time", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("prep_time", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("servings", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ("difficulty", models.CharField(choices=[("Easy", "Easy"), ("Medium", "Medium"), ("Hard", "Hard")], default="Medium", max_length=10)),
                ("category", models.CharField(choices=[("Breakfast", "Breakfast"), ("Lunch", "Lunch"), ("Dinner", "Dinner"), ("Dessert", "Dessert"), ("Snack", "Snack"), ("Appetizer", "Appetizer"), ("Beverage", "Beverage"), ("Other", "Other")], max_length=20)),
                ("cuisine", models.CharField(max_length=100)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("image", models.CharField(blank=True, default="", max_length=500)),
                ("average_rating", models.FloatField(default=0, editable=False, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)])),
                ("total_ratings", models.PositiveIntegerField(default=0, editable=False)),
                ("views", models.PositiveIntegerField(default=0, editable=False)),
                ("favourites", models.PositiveIntegerField(default=0, editable=False)),
                ("is_public", models.BooleanField(default=True)),
                ("search_document", models.TextField(blank=True, default="", editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="recipes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "recipe",
                "indexes": [
                    models.Index(fields=["category", "difficulty", "-average_rating"], name="recipe_cat_diff_rating_idx"),
                    models.Index(fields=["author", "-created_at"], name="recipe_author_created_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("average_rating__gte", 0), ("average_rating__lte", 5)), name="recipe_average_rating_range"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Ingredient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("amount", models.CharField(max_length=50)),
                ("unit", models.CharField(max_length=50)),
                ("position", models.PositiveIntegerField(default=1)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="ingredients", to="recipes.recipe")),
            ],
            options={
                "db_table": "ingredient",
                "ordering": ["position", "id"],
                "unique_together": {("recipe", "position")},
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("position__gt", 0)), name="ingredient_position_gt_0"),
                ],
            },
        ),
        migrations.CreateModel(
            name="RecipeStep",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("step", models.PositiveIntegerField()),
                ("description", models.TextField(max_length=1000)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="steps", to="recipes.recipe")),
            ],
            options={
                "db_table": "recipe_step",
                "ordering": ["step"],
                "unique_together": {("recipe", "step")},
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("step__gt", 0)), name="recipe_step_gt_0"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Rating",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("rating", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(5)])),
                ("comment", models.TextField(blank=True, default="", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("recipe", models.ForeignKey(db_column="recipe_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to="recipes.recipe")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "rating",
                "ordering": ["created_at", "id"],
                "constraints": [
                    models.UniqueConstraint(fields=("recipe", "user"), name="uniq_rating_recipe_user"),
                    models.CheckConstraint(condition=models.Q(("rating__gte", 1), ("rating__lte", 5)), name="rating_value_range"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Favourite",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("added_at", models.DateTimeField(auto_now_add=True)),
                ("recipe", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="favourite_rows", to="recipes.recipe")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="favourites", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "favourite",
                "indexes": [
                    models.Index(fields=["user", "-added_at"], name="favourite_user_added_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "recipe"), name="uniq_favourite_user_recipe"),
                ],
            },
        ),
        migrations.AddField(
            model_name="user",
            name="favourite_recipes",
            field=models.ManyToManyField(blank=True, related_name="favourited_by", through="recipes.Favourite", to="recipes.recipe"),
        ),
    ]
