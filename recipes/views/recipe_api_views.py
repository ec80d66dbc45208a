"""JSON API for recipes: listing, CRUD and rating."""

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from recipes.serializers import RecipeDetailSerializer, RecipeSerializer
from recipes.services import RatingService, RecipeListingService, RecipeService, UserService
from recipes.views.view_utils import current_user, page_response

recipe_service = RecipeService()
rating_service = RatingService()
listing_service = RecipeListingService()
user_service = UserService()


class RecipeListApi(APIView):
    """List public recipes with filters/search/sort/paging, or create one."""
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request):
        page = listing_service.list_public(request.query_params)
        return page_response(page, RecipeSerializer)

    def post(self, request):
        recipe = recipe_service.create(request.data, request.user)
        return Response(
            {"message": "Recipe created successfully", "recipe": RecipeDetailSerializer(recipe).data},
            status=status.HTTP_201_CREATED,
        )


class RecipeDetailApi(APIView):
    """Read (counts a view), update or delete a single recipe."""
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get(self, request, recipe_id):
        recipe = recipe_service.view(recipe_id, viewer=current_user(request))
        return Response(RecipeDetailSerializer(recipe).data)

    def put(self, request, recipe_id):
        recipe = recipe_service.update(recipe_id, request.data, request.user)
        return Response({"message": "Recipe updated successfully", "recipe": RecipeDetailSerializer(recipe).data})

    patch = put

    def delete(self, request, recipe_id):
        recipe_service.delete(recipe_id, request.user)
        return Response({"message": "Recipe deleted successfully"})


class RecipeRateApi(APIView):
    """Create or replace the current user's rating of a recipe."""
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, recipe_id):
        recipe = rating_service.submit_rating(
            recipe_id,
            request.user,
            request.data.get("rating"),
            request.data.get("comment"),
        )
        return Response({"message": "Rating added successfully", "recipe": RecipeDetailSerializer(recipe).data})


class UserRecipesApi(APIView):
    """Public recipes of one user, newest first."""
    permission_classes = [permissions.AllowAny]

    def get(self, request, user_id):
        author = user_service.fetch(user_id)
        page = listing_service.list_for_author(author.pk, request.query_params)
        return page_response(page, RecipeSerializer)
