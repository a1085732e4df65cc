"""
Shared fixtures. No real MongoDB or HTTP connections are made.
"""

from unittest.mock import MagicMock

import pytest

from similarity.app import create_app
from similarity.config import Settings
from similarity.store import MemoryStore


@pytest.fixture
def settings():
    return Settings(use_mongodb=False, min_words=10, recent_limit=10, memory_store_capacity=0)


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def app(settings, memory_store):
    app = create_app(settings=settings, store=memory_store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def mongo_client():
    """MagicMock standing in for pymongo.MongoClient."""
    return MagicMock()


@pytest.fixture
def mongo_collection(mongo_client):
    return mongo_client.get_default_database.return_value.__getitem__.return_value
