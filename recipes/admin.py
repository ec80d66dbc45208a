from django.contrib import admin
from django.db import transaction
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from recipes.models import Favourite, Ingredient, Rating, Recipe, RecipeStep, User
from recipes.services.aggregates import recalculate_recipe_aggregate


class IngredientInline(admin.TabularInline):
    model = Ingredient
    extra = 0


class RecipeStepInline(admin.TabularInline):
    model = RecipeStep
    extra = 0


class RatingInline(admin.TabularInline):
    """Ratings are read-only here; they change only through the rating service."""
    model = Rating
    extra = 0
    can_delete = False
    readonly_fields = ['user', 'rating', 'comment', 'created_at']

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Recipe)
class RecipeAdmin(admin.ModelAdmin):
    """Admin configuration for recipes with visibility and aggregate actions."""
    list_display = ('title', 'author', 'category', 'difficulty', 'average_rating', 'total_ratings', 'views', 'is_public', 'created_at')
    list_filter = ('is_public', 'category', 'difficulty', 'created_at')
    search_fields = ('title', 'description', 'cuisine', 'author__username')
    readonly_fields = ('average_rating', 'total_ratings', 'views', 'favourites', 'created_at', 'updated_at')
    actions = ['hide_recipes', 'publish_recipes', 'recalculate_ratings']
    inlines = [IngredientInline, RecipeStepInline, RatingInline]

    @admin.action(description='Make selected recipes private')
    def hide_recipes(self, request, queryset):
        queryset.update(is_public=False)

    @admin.action(description='Make selected recipes public')
    def publish_recipes(self, request, queryset):
        queryset.update(is_public=True)

    @admin.action(description='Recalculate rating aggregates')
    def recalculate_ratings(self, request, queryset):
        """Recompute average/total from the ledger for each selected recipe."""
        for recipe in queryset:
            with transaction.atomic():
                recalculate_recipe_aggregate(recipe)


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('username', 'email', 'first_name', 'last_name', 'recipes_created', 'is_staff')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': ('bio', 'avatar', 'recipes_created')}),
    )


@admin.register(Favourite)
class FavouriteAdmin(admin.ModelAdmin):
    list_display = ('user', 'recipe', 'added_at')
    search_fields = ('user__username', 'recipe__title')
