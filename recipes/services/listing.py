"""
Recipe listing: parse filter/search/sort/page parameters, compile them into a
deterministic query plan and execute it with offset pagination.

Search matches any term of the query against the recipe's search document
(title, description, ingredient names, tags, cuisine). Results are ranked by
relevance unless the caller asked for an explicit sort field, which always
wins. Every ordering ends with newest-first and id so pages are stable.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from django.conf import settings
from django.db import connection
from django.db.models import Case, F, IntegerField, Q, Value, When

from recipes.exceptions import ValidationError
from recipes.models import Recipe
from recipes.models.recipe import AUTHOR_CREATED_INDEX, CATEGORY_RATING_INDEX, SEARCH_INDEX
from recipes.repos.recipe_repo import RecipeRepo

SORT_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "averageRating": "average_rating",
    "totalRatings": "total_ratings",
    "views": "views",
    "favorites": "favourites",
    "title": "title",
    "cookingTime": "cooking_time",
    "prepTime": "prep_time",
}
DEFAULT_SORT = "createdAt"
MAX_SEARCH_TERMS = 10
TITLE_WEIGHT = 3
DOCUMENT_WEIGHT = 1

CATEGORIES = {value for value, _ in Recipe.CATEGORY_CHOICES}
DIFFICULTIES = {value for value, _ in Recipe.DIFFICULTY_CHOICES}


def _page_size_default():
    return getattr(settings, "RECIPES_PAGE_SIZE", 12)


def _page_size_max():
    return getattr(settings, "RECIPES_MAX_PAGE_SIZE", 100)


def search_terms(search: Optional[str]) -> Tuple[str, ...]:
    """Lowercase word tokens of a search string, de-duplicated, in order."""
    terms = []
    for token in re.findall(r"\w+", (search or "").lower()):
        if token not in terms:
            terms.append(token)
    return tuple(terms[:MAX_SEARCH_TERMS])


@dataclass(frozen=True)
class RecipeQuery:
    category: Optional[str] = None
    difficulty: Optional[str] = None
    cuisine: Optional[str] = None
    min_rating: Optional[float] = None
    search: Optional[str] = None
    # None means "not given": relevance when searching, else createdAt
    sort_by: Optional[str] = None
    sort_order: str = "desc"
    page: int = 1
    limit: int = 12
    author_id: Any = None
    include_private: bool = False

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_params(cls, params: Mapping[str, Any], **overrides) -> "RecipeQuery":
        """Build a query from raw query-string values, reporting every bad value at once."""
        errors = []

        def text(name):
            value = params.get(name)
            if value is None:
                return None
            value = str(value).strip()
            return value or None

        def positive_int(name, default):
            raw = text(name)
            if raw is None:
                return default
            try:
                value = int(raw)
            except ValueError:
                errors.append({"field": name, "message": f"{name} must be a positive integer"})
                return default
            if value < 1:
                errors.append({"field": name, "message": f"{name} must be a positive integer"})
                return default
            return value

        category = text("category")
        if category and category.lower() == "all":
            category = None
        if category and category not in CATEGORIES:
            errors.append({"field": "category", "message": "Invalid category"})

        difficulty = text("difficulty")
        if difficulty and difficulty not in DIFFICULTIES:
            errors.append({"field": "difficulty", "message": "Invalid difficulty level"})

        min_rating = text("minRating")
        if min_rating is not None:
            try:
                min_rating = float(min_rating)
            except ValueError:
                errors.append({"field": "minRating", "message": "minRating must be a number"})
                min_rating = None
            else:
                if not 0 <= min_rating <= 5:
                    errors.append({"field": "minRating", "message": "minRating must be between 0 and 5"})

        sort_by = text("sortBy")
        if sort_by is not None and sort_by not in SORT_FIELDS:
            errors.append({"field": "sortBy", "message": f"Cannot sort by {sort_by}"})

        sort_order = (text("sortOrder") or "desc").lower()
        if sort_order not in ("asc", "desc"):
            errors.append({"field": "sortOrder", "message": "sortOrder must be asc or desc"})

        page = positive_int("page", 1)
        limit = min(positive_int("limit", _page_size_default()), _page_size_max())

        if errors:
            raise ValidationError(errors=errors)

        values = dict(
            category=category,
            difficulty=difficulty,
            cuisine=text("cuisine"),
            min_rating=min_rating,
            search=text("search"),
            sort_by=sort_by,
            sort_order=sort_order,
            page=page,
            limit=limit,
        )
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class QueryPlan:
    """The concrete filter, annotations, ordering and serving index for one listing."""
    filters: Q
    ordering: Tuple[Any, ...]
    index: Optional[str]
    offset: int
    limit: int
    annotations: Mapping[str, Any] = field(default_factory=dict)
    ranked_by_relevance: bool = False


class RecipeQueryCompiler:
    """Turns a RecipeQuery into a QueryPlan for the current database vendor."""

    def __init__(self, vendor: Optional[str] = None):
        self.vendor = vendor or connection.vendor

    def compile(self, query: RecipeQuery) -> QueryPlan:
        filters = Q()
        if not query.include_private:
            filters &= Q(is_public=True)
        if query.author_id is not None:
            filters &= Q(author_id=query.author_id)
        if query.category:
            filters &= Q(category=query.category)
        if query.difficulty:
            filters &= Q(difficulty=query.difficulty)
        if query.cuisine:
            filters &= Q(cuisine__icontains=query.cuisine)
        if query.min_rating is not None:
            filters &= Q(average_rating__gte=query.min_rating)

        annotations = {}
        terms = search_terms(query.search)
        if terms:
            text_filter, annotations = self._text_search(terms)
            filters &= text_filter

        ranked = bool(terms) and query.sort_by is None
        if ranked:
            ordering = (F("relevance").desc(),)
        else:
            column = SORT_FIELDS[query.sort_by or DEFAULT_SORT]
            ordering = (f"-{column}" if query.sort_order == "desc" else column,)
        ordering += tuple(o for o in ("-created_at", "-id") if o not in ordering)

        return QueryPlan(
            filters=filters,
            ordering=ordering,
            index=self._choose_index(query, bool(terms)),
            offset=query.offset,
            limit=query.limit,
            annotations=annotations,
            ranked_by_relevance=ranked,
        )

    def _text_search(self, terms):
        if self.vendor == "postgresql":
            return self._postgres_text_search(terms)
        matches = Q()
        for term in terms:
            matches |= Q(search_document__icontains=term)
        score = Value(0, output_field=IntegerField())
        for term in terms:
            score = score + Case(
                When(title__icontains=term, then=Value(TITLE_WEIGHT)),
                default=Value(0),
                output_field=IntegerField(),
            ) + Case(
                When(search_document__icontains=term, then=Value(DOCUMENT_WEIGHT)),
                default=Value(0),
                output_field=IntegerField(),
            )
        return matches, {"relevance": score}

    def _postgres_text_search(self, terms):
        from django.contrib.postgres.search import SearchQuery, SearchRank

        from recipes.search import SEARCH_CONFIG, search_vector

        vector = search_vector()
        search_query = SearchQuery(" | ".join(terms), config=SEARCH_CONFIG, search_type="raw")
        annotations = {
            "search_vector": vector,
            "relevance": SearchRank(vector, search_query),
        }
        return Q(search_vector=search_query), annotations

    def _choose_index(self, query: RecipeQuery, searching: bool) -> Optional[str]:
        if query.author_id is not None:
            return AUTHOR_CREATED_INDEX
        if searching:
            return SEARCH_INDEX
        if query.category or query.difficulty or query.sort_by == "averageRating":
            return CATEGORY_RATING_INDEX
        return None


@dataclass
class Page:
    items: list
    page: int
    total_pages: int
    total: int


def paginate(repo, *, qs=None, filters=None, order_by=(), page=1, limit=12) -> Page:
    """Offset pagination: skip (page-1)*limit rows and report totals."""
    total = repo.count(filters, qs=qs)
    items = list(repo.list(filters=filters, order_by=order_by, offset=(page - 1) * limit, limit=limit, qs=qs))
    return Page(items=items, page=page, total_pages=math.ceil(total / limit) if limit else 0, total=total)


class RecipeListingService:
    """Execute listing queries through the recipe repository."""

    def __init__(self, recipe_repo=None, compiler=None):
        self.recipe_repo = recipe_repo or RecipeRepo()
        self.compiler = compiler

    def plan(self, query: RecipeQuery) -> QueryPlan:
        return (self.compiler or RecipeQueryCompiler()).compile(query)

    def list(self, query: RecipeQuery) -> Page:
        plan = self.plan(query)
        qs = self.recipe_repo.queryset().prefetch_related("ingredients", "steps")
        if plan.annotations:
            qs = qs.annotate(**plan.annotations)
        return paginate(
            self.recipe_repo,
            qs=qs,
            filters=plan.filters,
            order_by=plan.ordering,
            page=query.page,
            limit=query.limit,
        )

    def list_public(self, params: Mapping[str, Any]) -> Page:
        return self.list(RecipeQuery.from_params(params))

    def list_for_author(self, author_id, params: Mapping[str, Any], *, include_private=False) -> Page:
        """A user's recipes, newest first; private ones only when it is their own list."""
        query = RecipeQuery.from_params(
            {k: params.get(k) for k in ("page", "limit")},
            author_id=author_id,
            include_private=include_private,
        )
        return self.list(query)
