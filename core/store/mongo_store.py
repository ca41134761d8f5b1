# Path: core/store/mongo_store.py
# Purpose: Provide a MongoDB-backed ImageStore using pymongo aggregation pipelines.
# Layer: core/store.
# Details: Joins the users collection to populate authors and maps driver failures to StoreUnavailable.

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Union

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from core.models.domain import ImageRecord

from .base import ImageStore, StoreUnavailable

if TYPE_CHECKING:
    from config.settings import AppSettings
    from core.search.filters import GalleryFilter

logger = logging.getLogger(__name__)

HEALTHCHECK_COLLECTION = "__healthchecks"
NEWEST_FIRST = {"updatedAt": -1, "_id": -1}
MAX_BSON_INT = 2**63 - 1


def _as_object_id(value: str) -> Union[ObjectId, str]:
    """Return an ObjectId for hex ids, leaving other identifiers untouched."""

    return ObjectId(value) if ObjectId.is_valid(value) else value


def _paging_stages(skip: int, limit: int) -> List[Dict[str, Any]]:
    """$skip/$limit stages clamped to what BSON int64 can carry."""

    return [{"$skip": min(skip, MAX_BSON_INT)}, {"$limit": min(limit, MAX_BSON_INT)}]


def author_lookup_stages(users_collection: str) -> List[Dict[str, Any]]:
    """Stages replacing the ``author`` reference with the selected user fields."""

    return [
        {
            "$lookup": {
                "from": users_collection,
                "localField": "author",
                "foreignField": "_id",
                "as": "author",
                "pipeline": [{"$project": {"_id": 1, "firstName": 1, "lastName": 1, "clerkId": 1}}],
            }
        },
        {"$unwind": {"path": "$author", "preserveNullAndEmptyArrays": True}},
    ]


class MongoImageStore(ImageStore):
    """Gallery store reading image documents from MongoDB."""

    def __init__(
        self,
        database: Database,
        images_collection: str = "images",
        users_collection: str = "users",
        timeout_ms: int = 5000,
        client: Optional[MongoClient] = None,
    ) -> None:
        self.name = "mongo"
        self._database = database
        self._images = database[images_collection]
        self._users_collection = users_collection
        self._timeout_ms = timeout_ms
        self._client = client

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "MongoImageStore":
        """Connect using the configured URL; the driver connects lazily on first use."""

        timeout_ms = settings.search.query_timeout_ms
        client: MongoClient = MongoClient(settings.require_mongodb_url(), serverSelectionTimeoutMS=timeout_ms)
        return cls(
            client[settings.database_name],
            images_collection=settings.images_collection,
            users_collection=settings.users_collection,
            timeout_ms=timeout_ms,
            client=client,
        )

    def close(self) -> None:
        """Close the owned client connection, if any."""

        if self._client is not None:
            self._client.close()

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as exc:
            logger.error(f"MongoDB {operation} failed: {exc}")
            raise StoreUnavailable(f"Image store {operation} failed: {exc}") from exc

    def _aggregate(self, operation: str, pipeline: List[Dict[str, Any]]) -> List[ImageRecord]:
        with self._guard(operation):
            documents = list(self._images.aggregate(pipeline, maxTimeMS=self._timeout_ms))
        return [ImageRecord.from_document(document) for document in documents]

    # Reads
    def find_matching(self, gallery_filter: "GalleryFilter", limit: Optional[int] = None) -> List[ImageRecord]:
        pipeline = author_lookup_stages(self._users_collection)
        pipeline.append({"$match": gallery_filter.to_mongo()})
        # The cap keeps the newest matches and gives ties a fixed order.
        pipeline.append({"$sort": NEWEST_FIRST})
        if limit is not None:
            pipeline.append({"$limit": limit})
        return self._aggregate("search", pipeline)

    def find_page(self, skip: int, limit: int) -> List[ImageRecord]:
        pipeline: List[Dict[str, Any]] = [{"$sort": NEWEST_FIRST}, *_paging_stages(skip, limit)]
        pipeline.extend(author_lookup_stages(self._users_collection))
        return self._aggregate("page read", pipeline)

    def count(self) -> int:
        with self._guard("count"):
            return self._images.count_documents({}, maxTimeMS=self._timeout_ms)

    def get_by_id(self, image_id: str) -> Optional[ImageRecord]:
        if not ObjectId.is_valid(image_id):
            return None
        pipeline: List[Dict[str, Any]] = [{"$match": {"_id": ObjectId(image_id)}}, {"$limit": 1}]
        pipeline.extend(author_lookup_stages(self._users_collection))
        records = self._aggregate("lookup", pipeline)
        return records[0] if records else None

    def find_by_author(self, author_id: str, skip: int, limit: int) -> List[ImageRecord]:
        pipeline: List[Dict[str, Any]] = [
            {"$match": {"author": _as_object_id(author_id)}},
            {"$sort": NEWEST_FIRST},
            *_paging_stages(skip, limit),
        ]
        pipeline.extend(author_lookup_stages(self._users_collection))
        return self._aggregate("author page read", pipeline)

    def count_by_author(self, author_id: str) -> int:
        with self._guard("author count"):
            return self._images.count_documents({"author": _as_object_id(author_id)}, maxTimeMS=self._timeout_ms)

    def ping(self) -> bool:
        with self._guard("ping"):
            response = self._database.command("ping")
        return bool(response.get("ok"))

    # Maintenance
    def insert_many(self, documents: Iterable[Dict[str, Any]]) -> int:
        """Insert raw image documents and return how many were written."""

        batch = list(documents)
        if not batch:
            return 0
        with self._guard("insert"):
            result = self._images.insert_many(batch)
        return len(result.inserted_ids)

    def self_test(self) -> Dict[str, Any]:
        """Ping the server and run an insert/read/delete roundtrip on a scratch collection."""

        collection = self._database[HEALTHCHECK_COLLECTION]
        payload = {"kind": "selftest", "ts": datetime.now(timezone.utc), "rand": uuid.uuid4().hex}
        ping = self.ping()
        with self._guard("self-test"):
            inserted_id = collection.insert_one(payload).inserted_id
            try:
                fetched = collection.find_one({"_id": inserted_id})
            finally:
                collection.delete_one({"_id": inserted_id})
        return {
            "ping": ping,
            "database": self._database.name,
            "insertedId": str(inserted_id),
            "fetchedExists": fetched is not None,
        }
