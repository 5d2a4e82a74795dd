"""Shared constants for the qcat home directory and defaults."""

QCAT_HOME_EXT = ".qcat"  # user-level state/config directory suffix

QCAT_HOME_DISPLAY = f"~/{QCAT_HOME_EXT}"  # user-readable path hint

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE_NAME = "plp_bookstore"
DEFAULT_COLLECTION_NAME = "books"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
