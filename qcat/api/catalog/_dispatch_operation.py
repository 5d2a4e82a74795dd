"""Call the database capability matching an operation's kind."""

from typing import Any

from ..database.Database import Database
from ._to_plain import _to_plain
from .Operation import Operation
from .OperationError import OperationError
from .OperationKind import OperationKind


def _dispatch_operation(database: Database, operation: Operation) -> Any:
    """Run one operation and return its plain result payload.

    Raises:
        OperationError: If the database call fails for any reason
    """
    args = operation.arguments
    try:
        if operation.kind is OperationKind.FIND:
            result: Any = database.find(
                args.get("filter", {}),
                args.get("projection"),
                operation.sort_pairs(),
                args.get("limit", 0),
            )
        elif operation.kind is OperationKind.UPDATE_ONE:
            result = database.update_one(args["filter"], args["update"], upsert=args.get("upsert", False))
        elif operation.kind is OperationKind.DELETE_ONE:
            result = database.delete_one(args["filter"])
        elif operation.kind is OperationKind.AGGREGATE:
            result = database.aggregate(args["pipeline"])
        elif operation.kind is OperationKind.CREATE_INDEX:
            options = {key: args[key] for key in ("name", "unique") if key in args}
            result = {"name": database.create_index(operation.index_keys(), **options)}
        elif operation.kind is OperationKind.LIST_INDEXES:
            result = database.list_indexes()
        else:  # pragma: no cover - OperationKind is exhaustive
            raise ValueError(f"Unsupported operation kind: {operation.kind!r}")
    except Exception as exc:
        raise OperationError(operation, exc) from exc
    return _to_plain(result)
