"""JSON API for profiles, favourites and the signed-in user's recipes."""

from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import ProfileSerializer, PublicProfileSerializer, RecipeSerializer
from recipes.services import FavouriteService, RecipeListingService, UserService
from recipes.views.view_utils import page_params, page_response

favourite_service = FavouriteService()
listing_service = RecipeListingService()
user_service = UserService()


class ProfileApi(APIView):
    """The signed-in user's profile, with favourite recipe cards."""
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(ProfileSerializer(request.user).data)

    def put(self, request):
        user = user_service.update_profile(request.user, request.data)
        return Response({"message": "Profile updated successfully", "user": ProfileSerializer(user).data})


class FavouriteToggleApi(APIView):
    """Add the recipe to, or remove it from, the user's favourites."""
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, recipe_id):
        is_favourited, count = favourite_service.toggle(recipe_id, request.user)
        return Response(
            {
                "message": "Recipe added to favorites" if is_favourited else "Recipe removed from favorites",
                "isFavorited": is_favourited,
                "favoritesCount": count,
            }
        )


class FavouriteListApi(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        page, limit = page_params(request)
        return page_response(favourite_service.list_for_user(request.user, page=page, limit=limit), RecipeSerializer)


class MyRecipesApi(APIView):
    """All of the signed-in user's recipes, private ones included."""
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        page = listing_service.list_for_author(request.user.pk, request.query_params, include_private=True)
        return page_response(page, RecipeSerializer)


class UserListApi(APIView):
    """User discovery with optional name search."""
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        page, limit = page_params(request, default_limit=20)
        search = (request.query_params.get("search") or "").strip()
        return page_response(user_service.discover(search, page=page, limit=limit), PublicProfileSerializer, key="users")


class UserDetailApi(APIView):
    """Another user's public profile; recipe count covers public recipes only."""
    permission_classes = [permissions.AllowAny]

    def get(self, request, user_id):
        user = user_service.fetch(user_id)
        data = dict(PublicProfileSerializer(user).data)
        data["recipesCreated"] = user_service.public_recipe_count(user)
        return Response(data)
