"""syncdisk — synchronous, filesystem-backed key/value cache."""

from __future__ import annotations

from syncdisk.cache import DESCRIPTIVE_NAME, Cache
from syncdisk.errors import (
    CacheError,
    CodecError,
    InvalidKeyError,
    UnsupportedCompressionError,
)
from syncdisk.events import CacheEvent, CacheEventType, CacheStats
from syncdisk.types.config import DEFAULT_NAMESPACE, CacheConfig, Compression, load_config
from syncdisk.types.entry import MISS, CacheEntry

__all__ = [
    "Cache",
    "CacheConfig",
    "CacheEntry",
    "CacheError",
    "CacheEvent",
    "CacheEventType",
    "CacheStats",
    "CodecError",
    "Compression",
    "DEFAULT_NAMESPACE",
    "DESCRIPTIVE_NAME",
    "InvalidKeyError",
    "MISS",
    "UnsupportedCompressionError",
    "load_config",
]
