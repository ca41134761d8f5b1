# Path: core/store/__init__.py
# Purpose: Package initializer for image store interfaces and implementations.
# Layer: core/store.
# Details: Exposes the store contract, its error type, and the MongoDB and in-memory backends.

from .base import ImageStore, StoreUnavailable
from .memory_store import InMemoryImageStore
from .mongo_store import MongoImageStore

__all__ = ["ImageStore", "StoreUnavailable", "InMemoryImageStore", "MongoImageStore"]
