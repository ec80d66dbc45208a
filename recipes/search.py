"""PostgreSQL full-text search expressions for recipes.

The listing query and the GIN index are built from the same expression so
the planner can serve text searches from the index. Only imported when the
database vendor is PostgreSQL.
"""

from django.contrib.postgres.indexes import GinIndex
from django.contrib.postgres.search import SearchVector

from recipes.models.recipe import SEARCH_INDEX

SEARCH_CONFIG = "english"


def search_vector():
    return SearchVector("search_document", config=SEARCH_CONFIG)


def search_index():
    return GinIndex(search_vector(), name=SEARCH_INDEX)
