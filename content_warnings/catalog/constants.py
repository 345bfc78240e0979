"""Constants for the DoesTheDogDie catalog API."""

from enum import Enum

# Query parameter names on the search endpoint
SEARCH_PARAM_IMDB = "imdb"
SEARCH_PARAM_TEXT = "q"

# Header carrying the user's API key
API_KEY_HEADER = "X-API-KEY"


class CatalogEndpoint(str, Enum):
    """Catalog API endpoints, as named in metrics."""

    SEARCH = "search"
    MEDIA = "media"
    CATEGORIES = "categories"
