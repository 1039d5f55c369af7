from __future__ import annotations

from typing import Optional

from .object import StoredObject


class Bucket:
    """Owns the object namespace of a single bucket.

    Lookups report absence as ``None`` / ``False``; turning that into an
    error is left to the service.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._objects: dict[str, StoredObject] = {}

    @property
    def name(self) -> str:
        return self._name

    def put(self, key: str, obj: StoredObject) -> None:
        self._objects[key] = obj

    def get(self, key: str) -> Optional[StoredObject]:
        return self._objects.get(key)

    def delete(self, key: str) -> bool:
        return self._objects.pop(key, None) is not None

    def list(self) -> list[str]:
        return list(self._objects)

    def is_empty(self) -> bool:
        return not self._objects

    def check_consistency(self) -> list[str]:
        """Describe every entry that breaks the key invariant.

        Returns:
            One message per offending entry; empty when the bucket is sound.
        """
        issues: list[str] = []
        for key, obj in self._objects.items():
            if obj.key != key:
                issues.append(
                    f"Bucket '{self._name}' stores object '{obj.key}' under key '{key}'"
                )
        return issues

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, key: object) -> bool:
        return key in self._objects

    def __repr__(self) -> str:
        return f"Bucket(name={self._name!r}, objects={len(self._objects)})"


__all__ = ["Bucket"]
