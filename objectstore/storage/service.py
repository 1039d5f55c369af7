"""Top-level entry point owning every bucket of the store."""

from __future__ import annotations

from typing import Any

from loguru import logger

from objectstore.exceptions import (
    BucketAlreadyExistsError,
    BucketNotFoundError,
    InvalidOperationError,
    ObjectNotFoundError,
)

from .bucket import Bucket
from .object import StoredObject


def _as_payload(bucket_name: str, key: str, data: Any) -> bytes:
    # bytes(n) would allocate n zero bytes, bytes(str) needs an encoding
    if isinstance(data, (int, str)):
        raise InvalidOperationError(
            f"Payload for '{key}' must be a byte sequence, not {type(data).__name__}",
            {"bucket": bucket_name, "key": key},
        )
    try:
        return bytes(data)
    except (TypeError, ValueError) as exc:
        raise InvalidOperationError(
            f"Payload for '{key}' must be a byte sequence: {exc}",
            {"bucket": bucket_name, "key": key},
        ) from exc


class ObjectStoreService:
    """In-memory collection of named buckets.

    Bucket-level rules are enforced here, and every object operation is
    forwarded unchanged to the addressed :class:`Bucket`. Missing buckets and
    objects surface as exceptions from :mod:`objectstore.exceptions`.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, Bucket] = {}

    def _bucket(self, name: str) -> Bucket:
        bucket = self._buckets.get(name)
        if bucket is None:
            raise BucketNotFoundError(name)
        return bucket

    # --- Bucket operations ---

    def create_bucket(self, name: str) -> None:
        if name in self._buckets:
            raise BucketAlreadyExistsError(name)
        self._buckets[name] = Bucket(name)
        logger.info("Bucket '{}' created", name)

    def delete_bucket(self, name: str) -> None:
        """Remove a bucket together with every object it still holds."""
        bucket = self._buckets.pop(name, None)
        if bucket is None:
            raise BucketNotFoundError(name)
        logger.info("Bucket '{}' deleted ({} objects discarded)", name, len(bucket))

    def list_buckets(self) -> list[str]:
        return list(self._buckets)

    def bucket_exists(self, name: str) -> bool:
        return name in self._buckets

    # --- Object operations (delegated to the bucket) ---

    def put_object(self, bucket_name: str, key: str, data: bytes) -> StoredObject:
        """Store ``data`` under ``key``, replacing any previous object.

        Args:
            bucket_name: Name of an existing bucket.
            key: Object key; any string, matched exactly.
            data: Payload; any bytes-like value or iterable of ints in 0..255.

        Returns:
            The object now stored under ``key``.

        Raises:
            BucketNotFoundError: If the bucket does not exist.
            InvalidOperationError: If ``data`` is not a byte sequence.
        """
        bucket = self._bucket(bucket_name)
        obj = StoredObject(key=key, data=_as_payload(bucket_name, key, data))
        bucket.put(key, obj)
        logger.debug("Object '{}' stored in bucket '{}' ({} bytes)", key, bucket_name, obj.size())
        return obj

    def get_object(self, bucket_name: str, key: str) -> StoredObject:
        obj = self._bucket(bucket_name).get(key)
        if obj is None:
            raise ObjectNotFoundError(bucket_name, key)
        logger.debug("Object '{}' retrieved from bucket '{}'", key, bucket_name)
        return obj

    def delete_object(self, bucket_name: str, key: str) -> None:
        if not self._bucket(bucket_name).delete(key):
            raise ObjectNotFoundError(bucket_name, key)
        logger.debug("Object '{}' deleted from bucket '{}'", key, bucket_name)

    def list_objects(self, bucket_name: str) -> list[str]:
        return self._bucket(bucket_name).list()

    # --- Integrity ---

    def check_consistency(self) -> None:
        """Verify that every bucket and object sits under its own name.

        Raises:
            InvalidOperationError: Listing every violation found.
        """
        issues: list[str] = []
        for name, bucket in self._buckets.items():
            if bucket.name != name:
                issues.append(f"Bucket '{bucket.name}' registered under name '{name}'")
            issues.extend(bucket.check_consistency())
        if issues:
            raise InvalidOperationError(
                f"Consistency check failed: {'; '.join(issues)}",
                {"issues": str(len(issues))},
            )
        logger.debug("Consistency check passed for {} buckets", len(self._buckets))


__all__ = ["ObjectStoreService"]
