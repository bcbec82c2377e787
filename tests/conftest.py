"""
Shared fixtures. The driver's client is mocked and collections are backed by
`InMemoryCollection`, so no MongoDB server is needed.
"""

import copy
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from pytest_mock import MockerFixture

from docstore.db.mongodb import MongoConnection, MongoCrud


class InMemoryCollection:
    """
    Single-document subset of `pymongo.collection.Collection`: equality filters
    and `$set` updates, returning the driver's own result types.
    """

    def __init__(self, acknowledged: bool = True):
        self.docs: List[Dict[str, Any]] = []
        self.acknowledged = acknowledged

    def _match(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for doc in self.docs:
            if all(doc.get(key) == value for key, value in filter.items()):
                return doc
        return None

    def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        # the driver stamps _id onto the mapping it is given
        document.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], self.acknowledged)

    def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        doc = self._match(filter)
        return copy.deepcopy(doc) if doc is not None else None

    def update_one(self, filter: Dict[str, Any], update: Dict[str, Any]) -> UpdateResult:
        doc = self._match(filter)
        modified = 0
        if doc is not None:
            changes = update["$set"]
            if any(doc.get(key) != value for key, value in changes.items()):
                doc.update(copy.deepcopy(changes))
                modified = 1
        raw = {"n": int(doc is not None), "nModified": modified}
        return UpdateResult(raw, self.acknowledged)

    def delete_one(self, filter: Dict[str, Any]) -> DeleteResult:
        doc = self._match(filter)
        if doc is not None:
            self.docs.remove(doc)
        return DeleteResult({"n": int(doc is not None)}, self.acknowledged)


@pytest.fixture()
def collection() -> InMemoryCollection:
    return InMemoryCollection()


@pytest.fixture()
def mongo_client(mocker: MockerFixture, collection: InMemoryCollection):
    """A mocked MongoClient whose client[db][coll] always resolves to `collection`"""
    client = mocker.MagicMock(name="MongoClient")
    database = mocker.MagicMock(name="Database")
    database.name = "rust-cosmos-demo"
    database.__getitem__.return_value = collection
    client.__getitem__.return_value = database
    return client


@pytest.fixture()
def connection(mongo_client) -> MongoConnection:
    return MongoConnection(mongo_client)


@pytest.fixture()
def crud(connection: MongoConnection) -> MongoCrud:
    return MongoCrud("rust-cosmos-demo", "tasks", connection)
