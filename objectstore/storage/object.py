from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """A keyed binary payload held by exactly one bucket."""

    key: str
    data: bytes

    def size(self) -> int:
        return len(self.data)


__all__ = ["StoredObject"]
