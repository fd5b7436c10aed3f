"""
Application constants.
"""

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 100

# Sorting
SORT_DIRECTIONS = frozenset({"asc", "desc"})

# Ticket issuance
MAX_TICKETS_PER_REQUEST = 100

# Cache key prefixes
VENUE_CACHE_PREFIX = "venue"
EVENT_CACHE_PREFIX = "event"

# JWT token types
ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"
RESET_TOKEN_TYPE = "reset"
