"""
URL configuration for the recipeshare project.

All application endpoints live under /api/ and return JSON.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from recipes.views.recipe_api_views import (
    RecipeDetailApi,
    RecipeListApi,
    RecipeRateApi,
    UserRecipesApi,
)
from recipes.views.user_api_views import (
    FavouriteListApi,
    FavouriteToggleApi,
    MyRecipesApi,
    ProfileApi,
    UserDetailApi,
    UserListApi,
)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/recipes/', RecipeListApi.as_view(), name='recipe_list_api'),
    path('api/recipes/user/<str:user_id>/', UserRecipesApi.as_view(), name='user_recipes_api'),
    path('api/recipes/<str:recipe_id>/', RecipeDetailApi.as_view(), name='recipe_detail_api'),
    path('api/recipes/<str:recipe_id>/rate/', RecipeRateApi.as_view(), name='recipe_rate_api'),
    path('api/users/', UserListApi.as_view(), name='user_list_api'),
    path('api/users/profile/', ProfileApi.as_view(), name='profile_api'),
    path('api/users/favorites/', FavouriteListApi.as_view(), name='favourite_list_api'),
    path('api/users/favorites/<str:recipe_id>/', FavouriteToggleApi.as_view(), name='favourite_toggle_api'),
    path('api/users/my-recipes/', MyRecipesApi.as_view(), name='my_recipes_api'),
    path('api/users/<str:user_id>/', UserDetailApi.as_view(), name='user_detail_api'),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
