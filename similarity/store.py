"""
Submission storage: MongoDB when reachable, in-process list otherwise.

Every backend exposes the same small interface (save / recent / is_connected /
check_connection / name).  FallbackStore owns the choice between a durable
primary and a volatile fallback so handlers never inspect connection state.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone

from pymongo import DESCENDING, MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

from .text import SimilarityResult

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "textSimilarity"
COLLECTION = "submissions"


class PersistenceFailure(Exception):
    pass


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Submission:
    text1: str
    text2: str
    result: SimilarityResult
    timestamp: datetime = field(default_factory=_utcnow)

    def to_document(self):
        return {
            "text1": self.text1,
            "text2": self.text2,
            "result": self.result.to_dict(),
            "timestamp": self.timestamp,
        }

    def to_dict(self):
        doc = self.to_document()
        doc["timestamp"] = self.timestamp.isoformat()
        return doc

    @classmethod
    def from_document(cls, doc):
        ts = doc.get("timestamp")
        if isinstance(ts, datetime) and ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return cls(
            text1=doc.get("text1", ""),
            text2=doc.get("text2", ""),
            result=SimilarityResult.from_dict(doc.get("result") or {}),
            timestamp=ts or _utcnow(),
        )


class SubmissionStore:
    name = "unknown"

    def save(self, submission: Submission) -> str:
        raise NotImplementedError

    def recent(self, limit: int) -> list:
        raise NotImplementedError

    def is_connected(self) -> bool:
        return True

    def check_connection(self) -> bool:
        return self.is_connected()


class MemoryStore(SubmissionStore):
    name = "In-Memory"

    def __init__(self, capacity=0):
        # capacity 0 = crece sin limite
        self._items = deque(maxlen=capacity or None)

    def __len__(self):
        return len(self._items)

    def save(self, submission):
        self._items.append(submission)
        return self.name

    def recent(self, limit):
        if limit <= 0:
            return []
        items = list(self._items)
        return items[-limit:][::-1]


class MongoStore(SubmissionStore):
    name = "MongoDB"

    def __init__(self, uri, timeout_ms=2000, client=None):
        self.uri = uri
        self.timeout_ms = timeout_ms
        self.client = client
        self._connected = False

    @property
    def collection(self):
        db = self.client.get_default_database(default=DEFAULT_DATABASE)
        return db[COLLECTION]

    def connect(self) -> bool:
        """Create the client if needed and ping the server."""
        try:
            if self.client is None:
                self.client = MongoClient(
                    self.uri,
                    serverSelectionTimeoutMS=self.timeout_ms,
                    tz_aware=True,
                )
            self.client.admin.command("ping")
        except PyMongoError as e:
            if self._connected:
                logger.warning(f"[store] MongoDB connection lost: {e}")
            else:
                logger.info(f"[store] MongoDB unavailable, using in-memory storage: {e}")
            self._connected = False
            return False

        if not self._connected:
            logger.info("[store] Connected to MongoDB")
        self._connected = True
        return True

    def is_connected(self):
        return self._connected

    def check_connection(self):
        return self.connect()

    def _failed(self, e):
        # solo errores de conexion cambian el estado; el resto es por operacion
        if isinstance(e, ConnectionFailure) and self._connected:
            logger.warning(f"[store] MongoDB connection lost: {e}")
            self._connected = False
        return PersistenceFailure(str(e))

    def save(self, submission):
        try:
            self.collection.insert_one(submission.to_document())
        except PyMongoError as e:
            raise self._failed(e) from e
        return self.name

    def recent(self, limit):
        if limit <= 0:
            return []
        try:
            cursor = (
                self.collection.find({}, {"_id": 0})
                .sort("timestamp", DESCENDING)
                .limit(limit)
            )
            docs = list(cursor)
        except PyMongoError as e:
            raise self._failed(e) from e
        return [Submission.from_document(doc) for doc in docs]


class FallbackStore(SubmissionStore):
    """Durable primary with a volatile fallback.

    Writes try the primary while it is connected; any failure is logged and the
    record goes to the fallback instead.  Reads use whichever backend is active;
    a failed primary read is served from the fallback.  The two are never merged.
    """

    def __init__(self, primary, fallback):
        self.primary = primary
        self.fallback = fallback

    @property
    def active(self):
        return self.primary if self.primary.is_connected() else self.fallback

    @property
    def name(self):
        return self.active.name

    def save(self, submission):
        if self.primary.is_connected():
            try:
                return self.primary.save(submission)
            except Exception as e:
                logger.warning(f"[store] {self.primary.name} save failed, using {self.fallback.name}: {e}")
        return self.fallback.save(submission)

    def recent(self, limit):
        if self.primary.is_connected():
            try:
                return self.primary.recent(limit)
            except PersistenceFailure as e:
                logger.warning(f"[store] {self.primary.name} read failed, using {self.fallback.name}: {e}")
        return self.fallback.recent(limit)

    def check_connection(self):
        self.primary.check_connection()
        return True


def build_store(settings):
    fallback = MemoryStore(capacity=settings.memory_store_capacity)
    if settings.memory_store_capacity:
        logger.info(f"[store] In-memory store capped at {settings.memory_store_capacity} submissions")
    if not settings.use_mongodb:
        return fallback

    primary = MongoStore(settings.mongodb_uri, timeout_ms=settings.mongodb_timeout_ms)
    primary.connect()
    return FallbackStore(primary, fallback)
