"""
Pytest configuration and shared fixtures

FakeFirestore is an in-memory stand-in for the part of google.cloud.firestore.Client
the services use. Every mutation is recorded in `calls` so tests can count them.
"""
import copy

import pytest
from google.api_core.exceptions import InternalServerError, NotFound
from google.cloud import firestore

import database


class FakeSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, client, collection, doc_id):
        self._client = client
        self._collection = collection
        self.id = doc_id

    @property
    def _docs(self):
        return self._client.data.setdefault(self._collection, {})

    def get(self):
        return FakeSnapshot(self, self._docs.get(self.id))

    def set(self, data, merge=False):
        self._client.calls.append(("set", self._collection, self.id, merge))
        current = dict(self._docs.get(self.id) or {}) if merge else {}
        for key, value in data.items():
            if value is firestore.DELETE_FIELD:
                current.pop(key, None)
            else:
                current[key] = copy.deepcopy(value)
        self._docs[self.id] = current

    def update(self, data):
        self._client.calls.append(("update", self._collection, self.id))
        if self.id in self._client.fail_ids:
            raise self._client.failure(self.id)
        if self.id not in self._docs:
            raise NotFound(f"No document to update: {self.id}")
        self._docs[self.id].update(copy.deepcopy(data))

    def delete(self):
        self._client.calls.append(("delete", self._collection, self.id))
        if self.id in self._client.fail_ids:
            raise self._client.failure(self.id)
        self._docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, client, collection, filters=(), limit_count=None):
        self._client = client
        self._collection = collection
        self._filters = tuple(filters)
        self._limit = limit_count

    def where(self, field, op, value):
        assert op == "==", "only equality filters are used"
        self._client.calls.append(("query", self._collection, field, value))
        return FakeQuery(self._client, self._collection, self._filters + ((field, value),), self._limit)

    def limit(self, count):
        return FakeQuery(self._client, self._collection, self._filters, count)

    def stream(self):
        docs = self._client.data.get(self._collection, {})
        results = []
        for doc_id, data in list(docs.items()):
            if all(field in data and data[field] == value for field, value in self._filters):
                ref = FakeDocumentReference(self._client, self._collection, doc_id)
                results.append(FakeSnapshot(ref, copy.deepcopy(data)))
        if self._limit is not None:
            results = results[:self._limit]
        return iter(results)


class FakeCollectionReference(FakeQuery):
    def __init__(self, client, collection):
        super().__init__(client, collection)
        self.id = collection

    def document(self, doc_id):
        return FakeDocumentReference(self._client, self._collection, doc_id)


class FakeWriteBatch:
    def __init__(self, client):
        self._client = client
        self._refs = []

    def delete(self, reference):
        self._refs.append(reference)

    def commit(self):
        self._client.calls.append(("commit", len(self._refs)))
        for ref in self._refs:
            ref.delete()
        self._refs = []


class FakeFirestore:
    def __init__(self, data=None):
        self.data = copy.deepcopy(data or {})
        self.calls = []
        self.fail_ids = set()
        self.failure = lambda doc_id: InternalServerError(f"write failed for {doc_id}")

    def collection(self, name):
        return FakeCollectionReference(self, name)

    def collections(self):
        return [FakeCollectionReference(self, name) for name in self.data]

    def batch(self):
        return FakeWriteBatch(self)

    def count(self, kind, collection=None):
        return sum(
            1 for call in self.calls
            if call[0] == kind and (collection is None or call[1] == collection)
        )


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def pricing_db():
    """Pricing collection with the label field spread across historical names"""
    return FakeFirestore({
        "pricing": {
            "monthly_gym": {"Particulars": "Monthly Gym Membership", "price": 1500},
            "coach_session": {"Particulars": "Coach Session", "price": 300},
            "daily_coach": {"name": "Daily Coach", "price": 150, "notes": "old note", "meta": {"v": 1}},
            "legacy_pt": {"name": "Coach Session Only", "price": 250},
        }
    })


@pytest.fixture(autouse=True)
def reset_client(monkeypatch):
    """Each test starts without a cached client or credential environment"""
    database.reset_db()
    for name in ("GOOGLE_APPLICATION_CREDENTIALS", "GOOGLE_APPLICATION_CREDENTIALS_JSON", "GOOGLE_CLOUD_PROJECT"):
        monkeypatch.delenv(name, raising=False)
    yield
    database.reset_db()
