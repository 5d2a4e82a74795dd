"""Error raised when a single catalog operation fails."""

from .Operation import Operation


class OperationError(RuntimeError):
    """A query, update, delete, aggregate or index call failed.

    Attributes:
        operation: The catalog entry that failed
        description: ``"<ExceptionType>: <message>"`` of the underlying fault
    """

    def __init__(self, operation: Operation, cause: Exception):
        self.operation = operation
        self.description = f"{type(cause).__name__}: {cause}"
        super().__init__(f"Operation {operation.name!r} ({operation.kind.value}) failed: {self.description}")
