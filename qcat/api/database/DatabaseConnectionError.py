"""Error raised when the database cannot be reached."""


class DatabaseConnectionError(ConnectionError):
    """The database could not be reached; the connection was never opened.

    Attributes:
        target: Human-readable description of what we tried to reach
    """

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Could not connect to {target}: {reason}")
