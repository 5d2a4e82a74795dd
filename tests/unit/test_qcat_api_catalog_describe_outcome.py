import pytest

from qcat.api.catalog.describe_outcome import describe_outcome
from qcat.api.catalog.OperationKind import OperationKind
from qcat.api.catalog.Outcome import Outcome

pytestmark = pytest.mark.catalog


def _ok(kind: OperationKind, result) -> Outcome:
    return Outcome(name="Op", kind=kind, success=True, result=result)


@pytest.mark.parametrize(
    "outcome, line",
    [
        (_ok(OperationKind.FIND, [{"title": "1984"}, {"title": "Animal Farm"}]), "Op: 2 document(s) found."),
        (
            _ok(OperationKind.UPDATE_ONE, {"matched_count": 1, "modified_count": 1, "upserted_id": None}),
            "Op: 1 document(s) updated.",
        ),
        (_ok(OperationKind.DELETE_ONE, {"deleted_count": 0}), "Op: 0 document(s) removed."),
        (_ok(OperationKind.AGGREGATE, [{"_id": "Fiction", "avgPrice": 10.74}]), "Op: 1 result(s)."),
        (_ok(OperationKind.CREATE_INDEX, {"name": "title_1"}), "Op: index title_1 ready."),
        (
            _ok(
                OperationKind.LIST_INDEXES,
                [{"name": "_id_", "key": [["_id", 1]]}, {"name": "title_1", "key": [["title", 1]]}],
            ),
            "Op: 2 index(es): _id_, title_1",
        ),
    ],
)
def test_describe_success(outcome, line):
    assert describe_outcome(outcome) == line


def test_describe_failure():
    outcome = Outcome(name="Op", kind=OperationKind.UPDATE_ONE, success=False, error="ValueError: bad update")
    assert describe_outcome(outcome) == "Op: failed - ValueError: bad update"
