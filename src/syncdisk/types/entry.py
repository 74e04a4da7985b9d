from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class CacheEntry:
    """Result of a cache lookup.

    A hit carries the decoded ``value`` and the resolved file path in ``key``.
    A miss carries neither; all misses compare equal to :data:`MISS`.
    """

    is_cached: bool
    value: Optional[str] = None
    key: Optional[Path] = None

    @classmethod
    def hit(cls, path: Path, value: str) -> "CacheEntry":
        return cls(is_cached=True, value=value, key=path)


MISS = CacheEntry(is_cached=False)
