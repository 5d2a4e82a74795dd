"""Kinds of operation a catalog entry can run."""

from enum import Enum


class OperationKind(str, Enum):
    """Database capability an operation dispatches to.

    Values use the MongoDB shell method names so catalog files read like the
    queries they stand for.
    """

    FIND = "find"
    UPDATE_ONE = "updateOne"
    DELETE_ONE = "deleteOne"
    AGGREGATE = "aggregate"
    CREATE_INDEX = "createIndex"
    LIST_INDEXES = "listIndexes"
