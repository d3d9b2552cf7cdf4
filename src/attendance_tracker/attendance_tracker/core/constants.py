"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

import string

CODE_LENGTH = 6
# Base-36 alphabet; generated codes are stored uppercased.
CODE_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_MAX_CODE_ATTEMPTS = 20

DEFAULT_HISTORY_LIMIT = 30

# ISO date prefix length of a stored timestamp ("YYYY-MM-DD").
DATE_PREFIX_LENGTH = 10

# Largest value SQLite stores as INTEGER.
MAX_SQLITE_INTEGER = 2**63 - 1
