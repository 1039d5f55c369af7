"""Custom exception hierarchy for the object store."""

from __future__ import annotations


class ObjectStoreError(Exception):
    """Base exception for all object-store errors."""

    kind = "ObjectStoreError"

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ObjectStoreError):
    """Raised when configuration is invalid or missing."""

    kind = "ConfigurationError"


class BucketError(ObjectStoreError):
    """Base class for bucket-level errors."""
    pass


class BucketAlreadyExistsError(BucketError):
    """Raised when creating a bucket whose name is already taken."""

    kind = "BucketAlreadyExists"

    def __init__(self, bucket: str) -> None:
        super().__init__(f"Bucket '{bucket}' already exists", {"bucket": bucket})
        self.bucket = bucket


class BucketNotFoundError(BucketError):
    """Raised when an operation addresses a bucket that does not exist."""

    kind = "BucketNotFound"

    def __init__(self, bucket: str) -> None:
        super().__init__(f"Bucket '{bucket}' not found", {"bucket": bucket})
        self.bucket = bucket


class ObjectError(ObjectStoreError):
    """Base class for object-level errors."""
    pass


class ObjectNotFoundError(ObjectError):
    """Raised when get/delete addresses a missing key in an existing bucket."""

    kind = "ObjectNotFound"

    def __init__(self, bucket: str, key: str) -> None:
        super().__init__(
            f"Object '{key}' not found in bucket '{bucket}'",
            {"bucket": bucket, "key": key},
        )
        self.bucket = bucket
        self.key = key


class InvalidOperationError(ObjectStoreError):
    """Raised for conditions not covered by the other kinds."""

    kind = "InvalidOperation"


__all__ = [
    "ObjectStoreError",
    "ConfigurationError",
    "BucketError",
    "BucketAlreadyExistsError",
    "BucketNotFoundError",
    "ObjectError",
    "ObjectNotFoundError",
    "InvalidOperationError",
]
