"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file holds the fake pymongo client used to exercise the mongo backend.
"""

from typing import Any

import mongomock
import pytest
from pymongo.errors import InvalidName, ServerSelectionTimeoutError

from tests.conftest import minimal_config_dict, run_cmd

__all__ = ["FakeMongoClient", "minimal_config_dict", "run_cmd"]


class FakeMongoClient:
    """Stands in for pymongo.MongoClient; counts connections and closes.

    Collections come from one mongomock client shared by every instance so
    data seeded through ``backing`` is visible to the code under test.
    """

    backing: Any = None
    fail_ping = False
    fail_lookup = False
    instances: list["FakeMongoClient"] = []

    def __init__(self, uri: str, **kwargs: Any):
        self.uri = uri
        self.kwargs = kwargs
        self.close_calls = 0
        self.admin = self
        type(self).instances.append(self)

    def command(self, name: str) -> dict:
        if type(self).fail_ping:
            raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
        return {"ok": 1.0}

    def __getitem__(self, name: str):
        if type(self).fail_lookup:
            raise InvalidName(f"database names cannot contain the character '.' (found: {name!r})")
        return type(self).backing[name]

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def fake_mongo(monkeypatch) -> type[FakeMongoClient]:
    """Patch the mongo backend to use FakeMongoClient and return the class."""
    client_class = type(
        "FakeMongoClient",
        (FakeMongoClient,),
        {"backing": mongomock.MongoClient(), "fail_ping": False, "fail_lookup": False, "instances": []},
    )
    monkeypatch.setattr("qcat.api.database._mongo._Impl.MongoClient", client_class)
    return client_class
