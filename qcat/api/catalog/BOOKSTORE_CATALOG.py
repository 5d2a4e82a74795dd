"""Built-in catalog: CRUD, aggregation and index demo against plp_bookstore.books."""

from .Operation import Operation
from .OperationKind import OperationKind

BOOKSTORE_CATALOG: tuple[Operation, ...] = (
    # Basic reads
    Operation(name="All Fiction books", kind=OperationKind.FIND, arguments={"filter": {"genre": "Fiction"}}),
    Operation(
        name="Books published after 1950",
        kind=OperationKind.FIND,
        arguments={"filter": {"published_year": {"$gt": 1950}}},
    ),
    Operation(name="Books by George Orwell", kind=OperationKind.FIND, arguments={"filter": {"author": "George Orwell"}}),
    # Writes
    Operation(
        name="Update price of '1984'",
        kind=OperationKind.UPDATE_ONE,
        arguments={"filter": {"title": "1984"}, "update": {"$set": {"price": 13.99}}},
    ),
    Operation(name="Delete 'Moby Dick'", kind=OperationKind.DELETE_ONE, arguments={"filter": {"title": "Moby Dick"}}),
    # Aggregations
    Operation(
        name="Average price per genre",
        kind=OperationKind.AGGREGATE,
        arguments={
            "pipeline": [
                {"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}}},
                {"$sort": {"avgPrice": -1, "_id": 1}},
            ]
        },
    ),
    Operation(
        name="Author with the most books",
        kind=OperationKind.AGGREGATE,
        arguments={
            "pipeline": [
                {"$group": {"_id": "$author", "count": {"$sum": 1}}},
                {"$sort": {"count": -1, "_id": 1}},
                {"$limit": 1},
            ]
        },
    ),
    Operation(
        name="Books grouped by decade",
        kind=OperationKind.AGGREGATE,
        arguments={
            "pipeline": [
                {"$project": {"decade": {"$multiply": [{"$floor": {"$divide": ["$published_year", 10]}}, 10]}}},
                {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
                {"$sort": {"_id": 1}},
            ]
        },
    ),
    # Indexing
    Operation(name="Index on title", kind=OperationKind.CREATE_INDEX, arguments={"keys": {"title": 1}}),
    Operation(
        name="Index on author and published_year",
        kind=OperationKind.CREATE_INDEX,
        arguments={"keys": [["author", 1], ["published_year", -1]]},
    ),
    Operation(name="Current indexes", kind=OperationKind.LIST_INDEXES),
)
