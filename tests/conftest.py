"""
Shared test fixtures.

Provides: an in-memory stand-in for the pymongo students collection,
a StudentService over it, and a TestClient for an app built around that service.
"""

import copy
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from student_api.main import create_app
from student_api.services.student_service import StudentService


class InMemoryCursor:
    """Iterable result of find(); tracks whether it was closed."""

    def __init__(self, docs):
        self.docs = docs
        self.closed = False

    def __iter__(self):
        return iter(self.docs)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class InMemoryCollection:
    """
    The subset of pymongo.collection.Collection that StudentService calls,
    with exact-match filters on top-level fields only.
    """

    def __init__(self):
        self.docs = {}
        self.cursors = []

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def _select(self, query):
        return [copy.deepcopy(d) for d in self.docs.values() if self._matches(d, query or {})]

    def find(self, query=None):
        cursor = InMemoryCursor(self._select(query))
        self.cursors.append(cursor)
        return cursor

    def find_one(self, query=None):
        found = self._select(query)
        return found[0] if found else None

    def insert_one(self, doc):
        if doc["_id"] in self.docs:
            raise DuplicateKeyError(f"E11000 duplicate key error _id: {doc['_id']}")
        self.docs[doc["_id"]] = copy.deepcopy(doc)
        return SimpleNamespace(inserted_id=doc["_id"], acknowledged=True)

    def update_one(self, query, update):
        for doc in self.docs.values():
            if self._matches(doc, query):
                doc.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_one(self, query):
        for key, doc in list(self.docs.items()):
            if self._matches(doc, query):
                del self.docs[key]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


@pytest.fixture
def collection():
    return InMemoryCollection()


@pytest.fixture
def student_service(collection):
    return StudentService(collection)


@pytest.fixture
def client(student_service):
    app = create_app(student_service)
    return TestClient(app)


@pytest.fixture
def broken_collection():
    """
    Collection mock whose calls can be set to raise.

    Returns:
        MagicMock: spec'd on pymongo Collection
    """
    return MagicMock(spec=Collection)


@pytest.fixture
def broken_client(broken_collection):
    app = create_app(StudentService(broken_collection))
    return TestClient(app)
