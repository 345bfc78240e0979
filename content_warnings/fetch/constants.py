"""HTTP constants for the fetch layer."""

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_UNAUTHORIZED = 401
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_TOO_MANY_REQUESTS = 429
HTTP_STATUS_SERVER_ERROR_MIN = 500
HTTP_STATUS_SERVER_ERROR_MAX = 600

# Catalog responses are small JSON documents
DEFAULT_MAX_RESPONSE_SIZE_BYTES = 2 * 1024 * 1024  # 2 MB

# Chunk size for streaming reads
DEFAULT_CHUNK_SIZE = 8192

# Maximum wait honoured from a Retry-After header (seconds)
MAX_RETRY_AFTER_SECONDS = 30
