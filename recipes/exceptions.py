"""Domain errors raised by recipe services and their HTTP rendering."""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class RecipeAPIError(exceptions.APIException):
    """Base class; subclasses only pick a status code and default message."""

    def __init__(self, message=None):
        super().__init__(detail=message or self.default_detail)
        self.message = str(self.detail)


class ValidationError(RecipeAPIError):
    """Malformed or out-of-range input; carries every violation, not just the first."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation failed"
    default_code = "invalid"

    def __init__(self, errors=None, message=None):
        super().__init__(message)
        self.errors = list(errors or [])

    @classmethod
    def from_serializer_errors(cls, serializer_errors, message=None):
        """Flatten DRF's nested error dict into a [{field, message}] list."""
        return cls(errors=list(_flatten(serializer_errors)), message=message)


class NotFoundError(RecipeAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Recipe not found"
    default_code = "not_found"


class AuthorizationError(RecipeAPIError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized to modify this recipe"
    default_code = "forbidden"


class ConflictError(RecipeAPIError):
    """A concurrent request won a race on a unique row; the client should retry."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Concurrent update detected, please retry"
    default_code = "conflict"


def _flatten(errors, prefix=""):
    if isinstance(errors, dict):
        for field, value in errors.items():
            name = f"{prefix}.{field}" if prefix else str(field)
            if field == "non_field_errors":
                name = prefix or "non_field_errors"
            yield from _flatten(value, name)
    elif isinstance(errors, list):
        for index, value in enumerate(errors):
            if isinstance(value, (dict, list)):
                if value:
                    yield from _flatten(value, f"{prefix}[{index}]")
            else:
                yield {"field": prefix, "message": str(value)}
    else:
        yield {"field": prefix, "message": str(errors)}


def api_exception_handler(exc, context):
    """
    Render errors as {"message": ..., "errors": [...]}.

    DRF's own exceptions keep their status codes; anything unexpected is
    logged and turned into a generic 500.
    """
    if isinstance(exc, ValidationError):
        return Response({"message": exc.message, "errors": exc.errors}, status=exc.status_code)

    if isinstance(exc, exceptions.ValidationError):
        exc = ValidationError.from_serializer_errors(exc.detail)
        return Response({"message": exc.message, "errors": exc.errors}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        response.data = {"message": str(detail or getattr(exc, "detail", "Request failed"))}
        return response

    set_rollback()
    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "api", exc_info=exc)
    return Response({"message": "Server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
