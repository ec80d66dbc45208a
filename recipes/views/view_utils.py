from django.conf import settings
from rest_framework.response import Response

from recipes.exceptions import ValidationError


def current_user(request):
    """Return the authenticated user or None for anonymous requests."""
    user = getattr(request, "user", None)
    return user if user is not None and user.is_authenticated else None


def _safe_int(value, name, errors):
    try:
        num = int(value)
    except (TypeError, ValueError):
        errors.append({"field": name, "message": f"{name} must be a positive integer"})
        return None
    if num < 1:
        errors.append({"field": name, "message": f"{name} must be a positive integer"})
        return None
    return num


def page_params(request, default_limit=None):
    """Parse ?page=&limit= (1-indexed page, limit capped at RECIPES_MAX_PAGE_SIZE)."""
    default_limit = default_limit or getattr(settings, "RECIPES_PAGE_SIZE", 12)
    errors = []
    raw_page = (request.query_params.get("page") or "").strip()
    raw_limit = (request.query_params.get("limit") or "").strip()
    page = _safe_int(raw_page, "page", errors) if raw_page else 1
    limit = _safe_int(raw_limit, "limit", errors) if raw_limit else default_limit
    if errors:
        raise ValidationError(errors=errors)
    return page, min(limit, getattr(settings, "RECIPES_MAX_PAGE_SIZE", 100))


def page_response(page, serializer_class, key="recipes"):
    """Render a Page in the listing envelope used by every paged endpoint."""
    return Response(
        {
            key: serializer_class(page.items, many=True).data,
            "currentPage": page.page,
            "totalPages": page.total_pages,
            "total": page.total,
        }
    )
