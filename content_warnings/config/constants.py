"""Constants for configuration defaults."""

# DoesTheDogDie endpoints
DTDD_BASE_URL = "https://www.doesthedogdie.com"
DTDD_SEARCH_URL = f"{DTDD_BASE_URL}/dddsearch"
DTDD_MEDIA_URL = f"{DTDD_BASE_URL}/media"
DTDD_CATEGORIES_URL = f"{DTDD_BASE_URL}/categories"

# Component names used in log context
COMPONENT_CLI = "cli"
COMPONENT_CONFIG = "config"
