"""
db.py - MongoDB store gateway for the curriculum API

- One client per process, opened in the app lifespan and closed on shutdown.
- Connection failure is reported to the caller (the lifespan logs it and keeps serving).
- The courses collection is owned here; the load cycle only goes through CourseStore.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pymongo
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from config import Settings
from errors import StoreConnectionError

logger = logging.getLogger("curriculum-api")


def connect_to_mongodb(url: str, db: str, timeout_ms: int = 5000, **kwargs):
    """
    Returns a MongoDB Database handle after a successful ping.
    """
    connection_params = {
        "host": url,
        "serverSelectionTimeoutMS": int(timeout_ms),
        "tz_aware": True,
        "document_class": dict,
        **kwargs,
    }
    client = None
    try:
        client = pymongo.MongoClient(**connection_params)
        client.admin.command("ping")
    except PyMongoError as e:
        if client is not None:
            client.close()
        raise StoreConnectionError(f"MongoDB connection failed ({url}): {e}") from e
    return client[db]


class CourseStore:
    def __init__(self, collection: Collection, client: Any = None) -> None:
        self.collection = collection
        self.client = client

    # -----------------------------
    # load pipeline
    # -----------------------------
    def clear_all(self) -> int:
        res = self.collection.delete_many({})
        return int(res.deleted_count)

    def insert_many(self, courses: Sequence[Dict[str, Any]]) -> int:
        docs = [dict(c) for c in courses]
        if not docs:
            # insert_many rejects an empty batch
            return 0
        res = self.collection.insert_many(docs, ordered=True)
        return len(res.inserted_ids)

    def ensure_indexes(self) -> None:
        self.collection.create_index([("tags", pymongo.ASCENDING)], name="tags_1")
        self.collection.create_index([("description", pymongo.ASCENDING)], name="description_1")

    # -----------------------------
    # reads
    # -----------------------------
    def find(
        self,
        query: Dict[str, Any],
        fields: Iterable[str],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        projection = {"_id": False}
        for name in fields:
            projection[name] = True
        cursor = self.collection.find(query, projection)
        if sort:
            cursor = cursor.sort(sort)
        return list(cursor)

    def count(self) -> int:
        return int(self.collection.count_documents({}))

    def health(self) -> Dict[str, Any]:
        try:
            return {"connected": True, "courses": self.count()}
        except PyMongoError as e:
            return {"connected": False, "reason": str(e)}

    def close(self) -> None:
        if self.client is not None:
            try:
                self.client.close()
            except PyMongoError:
                logger.warning("MongoDB client close failed", exc_info=True)


def connect_store(settings: Settings) -> CourseStore:
    database = connect_to_mongodb(
        settings.mongo_url, settings.mongo_db, timeout_ms=settings.mongo_timeout_ms
    )
    return CourseStore(database[settings.mongo_collection], client=database.client)


@dataclass
class AppContext:
    """Process-wide state: settings, the store handle, and the readiness flag."""

    settings: Settings
    store: Optional[CourseStore] = None
    ready: bool = False
    last_load: Dict[str, Any] = field(default_factory=dict)

    def close(self) -> None:
        self.ready = False
        if self.store is not None:
            self.store.close()
            self.store = None
