"""In-memory bucket/object storage hierarchy."""

from __future__ import annotations

from .bucket import Bucket
from .object import StoredObject
from .service import ObjectStoreService

__all__ = ["Bucket", "ObjectStoreService", "StoredObject"]
