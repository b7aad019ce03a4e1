"""
Shared fixtures for the employee service tests.

No MongoDB is needed: ``InMemoryCollection`` implements the handful of Motor
collection calls the repository makes and returns real ``pymongo.results``
objects, so counts and acknowledgements behave like the driver's.
"""

import copy
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from pymongo.errors import DuplicateKeyError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from app.database import get_employee_repository
from app.repositories.employee import EmployeeRepository


def _matches(document, query):
    return all(document.get(key) == value for key, value in query.items())


class InMemoryCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self._documents)
        return list(self._documents[:length])


class InMemoryCollection:
    def __init__(self):
        self.documents = []

    async def insert_one(self, document):
        if any(d["_id"] == document["_id"] for d in self.documents):
            raise DuplicateKeyError(f"duplicate key: {document['_id']}")
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def find_one(self, query):
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    def find(self, query=None):
        query = query or {}
        return InMemoryCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query)])

    async def update_one(self, query, update):
        fields = update["$set"]
        for document in self.documents:
            if _matches(document, query):
                changed = any(document.get(k) != v for k, v in fields.items())
                document.update(fields)
                return UpdateResult({"n": 1, "nModified": int(changed)}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def delete_one(self, query):
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)

    async def delete_many(self, query):
        kept = [d for d in self.documents if not _matches(d, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return DeleteResult({"n": deleted}, True)


@pytest.fixture
def collection():
    return InMemoryCollection()


@pytest.fixture
def repository(collection):
    return EmployeeRepository(collection)


@pytest.fixture
def failing_collection():
    """A collection whose every call raises the given driver error."""
    def build(error):
        failing = AsyncMock()
        for name in ("insert_one", "find_one", "update_one", "delete_one", "delete_many"):
            getattr(failing, name).side_effect = error
        failing.find = lambda *args, **kwargs: FailingCursor(error)
        return failing
    return build


class FailingCursor:
    def __init__(self, error):
        self._error = error

    async def to_list(self, length=None):
        raise self._error


async def _client_for(repo):
    from app.main import app
    app.dependency_overrides[get_employee_repository] = lambda: repo
    transport = ASGITransport(app=app)
    return app, AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(repository):
    """HTTP client wired to the app with the in-memory repository injected."""
    app, client = await _client_for(repository)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_factory():
    """Build an HTTP client around an arbitrary repository."""
    created = []

    async def build(repo):
        app, client = await _client_for(repo)
        created.append((app, client))
        return client

    yield build
    for app, client in created:
        await client.aclose()
        app.dependency_overrides.clear()
