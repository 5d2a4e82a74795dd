"""Render an outcome as one console line."""

from .OperationKind import OperationKind
from .Outcome import Outcome


def describe_outcome(outcome: Outcome) -> str:
    """One human-readable line per operation.

    Example:
        >>> describe_outcome(outcome)
        "Update price of '1984': 1 document(s) updated."
    """
    if not outcome.success:
        return f"{outcome.name}: failed - {outcome.error}"

    result = outcome.result
    if outcome.kind is OperationKind.FIND:
        return f"{outcome.name}: {len(result)} document(s) found."
    if outcome.kind is OperationKind.UPDATE_ONE:
        return f"{outcome.name}: {result['modified_count']} document(s) updated."
    if outcome.kind is OperationKind.DELETE_ONE:
        return f"{outcome.name}: {result['deleted_count']} document(s) removed."
    if outcome.kind is OperationKind.AGGREGATE:
        return f"{outcome.name}: {len(result)} result(s)."
    if outcome.kind is OperationKind.CREATE_INDEX:
        return f"{outcome.name}: index {result['name']} ready."
    names = ", ".join(index["name"] for index in result)
    return f"{outcome.name}: {len(result)} index(es): {names}"
