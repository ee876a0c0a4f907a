"""
Pytest configuration and fixtures.
The MongoDB database is replaced by an in-memory double that implements the
collection calls the repositories make.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo import DESCENDING

from classroom_backend.main import create_app


class InMemoryCollection:
    def __init__(self, name):
        self.name = name
        self.documents = {}

    def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents[document["_id"]] = copy.deepcopy(document)
        return SimpleNamespace(inserted_id=document["_id"])

    def find_one(self, query):
        document = self.documents.get(query["_id"])
        return copy.deepcopy(document) if document is not None else None

    def find(self, query=None):
        return InMemoryCursor([copy.deepcopy(d) for d in self.documents.values()])

    def find_one_and_update(self, query, update, return_document=None):
        document = self.documents.get(query["_id"])
        if document is None:
            return None
        document.update(copy.deepcopy(update["$set"]))
        return copy.deepcopy(document)

    def delete_one(self, query):
        removed = self.documents.pop(query["_id"], None)
        return SimpleNamespace(deleted_count=0 if removed is None else 1)

    def count_documents(self, query):
        return len(self.documents)


class InMemoryCursor(list):
    def sort(self, field, direction):
        return InMemoryCursor(
            sorted(self, key=lambda d: d[field], reverse=direction == DESCENDING)
        )


class InMemoryDatabase(dict):
    def __missing__(self, name):
        collection = self[name] = InMemoryCollection(name)
        return collection


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def app(db):
    app = create_app({"API_PREFIX": "/api", "LOG_LEVEL": "WARNING"}, db=db)
    app.config["TESTING"] = True
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def answers():
    return [
        {"text": "Paris", "isCorrect": False},
        {"text": "Rome", "isCorrect": False},
        {"text": "Madrid", "isCorrect": True},
        {"text": "Berlin", "isCorrect": False},
    ]


@pytest.fixture
def quiz_payload(answers):
    return {
        "title": "Capitals",
        "course": "Geography 101",
        "topic": "Europe",
        "dueDate": "2024-03-20T15:00:00Z",
        "questions": [{"description": "Capital of Spain?", "answers": answers}],
    }


def _stored_quiz(correct_flags):
    return {
        "_id": ObjectId(),
        "questions": [
            {
                "_id": ObjectId(),
                "description": f"Question {i}",
                "answers": [
                    {"_id": ObjectId(), "text": f"Answer {j}", "isCorrect": flag}
                    for j, flag in enumerate(flags)
                ],
            }
            for i, flags in enumerate(correct_flags)
        ],
    }


@pytest.fixture
def make_quiz():
    """Build a stored-looking quiz: one question per entry in ``correct_flags``,
    each entry being the list of isCorrect values for its answers."""
    return _stored_quiz
