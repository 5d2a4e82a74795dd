"""Error raised for malformed configuration or catalog input."""


class ArgumentError(ValueError):
    """Configuration or catalog input is invalid; nothing was executed."""
