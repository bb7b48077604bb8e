"""
MongoDB Connection Utility + MongoStore

Each entity store is one collection. The store key lives in `_id`, the
record fields sit next to it:

    {"_id": "<job id>", "id": "<job id>", "company_id": "...", "post_status": "open", ...}

WHY MongoDB for these?
- Point lookups by _id and full scans are all the managers need
- No joins: integrity between collections is enforced in the managers
"""
import logging
from typing import List, Optional, Type

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from jobportal.core.config import get_settings
from jobportal.core.errors import StorageError
from jobportal.db.store import EntityStore, V

logger = logging.getLogger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the portal database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection. Names come from COLLECTIONS."""
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "education_history": "education_history",
    "work_history": "work_history",
    "companies": "companies",
    "jobs": "jobs",
    "job_applications": "job_applications"
}


class MongoStore(EntityStore[V]):
    """EntityStore backed by one MongoDB collection."""

    def __init__(self, name: str, model: Type[V], collection: Optional[Collection] = None):
        super().__init__(name, model)
        self.collection: Collection = (
            collection if collection is not None else get_collection(COLLECTIONS[name])
        )

    def _from_doc(self, doc: Optional[dict]) -> Optional[V]:
        if doc is None:
            return None
        doc.pop("_id", None)
        return self._load(doc)

    def get(self, key: str) -> Optional[V]:
        try:
            doc = self.collection.find_one({"_id": key})
        except PyMongoError as exc:
            raise StorageError(f"{self.name}: {exc}") from exc
        return self._from_doc(doc)

    def insert(self, key: str, value: V) -> V:
        doc = {"_id": key, **self._dump(value)}
        try:
            self.collection.replace_one({"_id": key}, doc, upsert=True)
        except PyMongoError as exc:
            raise StorageError(f"{self.name}: {exc}") from exc
        return value

    def remove(self, key: str) -> Optional[V]:
        try:
            doc = self.collection.find_one_and_delete({"_id": key})
        except PyMongoError as exc:
            raise StorageError(f"{self.name}: {exc}") from exc
        return self._from_doc(doc)

    def values(self) -> List[V]:
        try:
            docs = list(self.collection.find().sort("_id", ASCENDING))
        except PyMongoError as exc:
            raise StorageError(f"{self.name}: {exc}") from exc
        return [self._from_doc(doc) for doc in docs]
