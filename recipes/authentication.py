import logging

from firebase_admin import auth
from django.contrib.auth import get_user_model
from rest_framework import authentication
from rest_framework import exceptions
from .firebase_admin_client import get_app

logger = logging.getLogger(__name__)

User = get_user_model()


class FirebaseAuthentication(authentication.BaseAuthentication):
    """
    DRF authentication backend validating Firebase ID tokens.

    Only establishes identity; whether the user may touch a recipe is
    decided by the services.
    """
    keyword = "Bearer"

    def authenticate(self, request):
        """Validate Authorization header token and return (user, token)."""
        auth_header = request.META.get('HTTP_AUTHORIZATION')
        if not auth_header:
            return None

        id_token = auth_header.split(' ').pop()

        try:
            get_app()
            decoded_token = auth.verify_id_token(id_token)
        except Exception as e:
            logger.info("Rejected Firebase token: %s", e)
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        user = self._user_for(decoded_token)
        if user is None:
            raise exceptions.AuthenticationFailed('User not found')
        return (user, decoded_token)

    def _user_for(self, decoded_token):
        uid = decoded_token.get("uid")
        user = User.objects.filter(username=uid).first() if uid else None
        if user is None and decoded_token.get("email"):
            user = User.objects.filter(email=decoded_token["email"]).first()
        return user

    def authenticate_header(self, request):
        return self.keyword
