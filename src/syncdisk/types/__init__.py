from __future__ import annotations

from syncdisk.types.config import (
    DEFAULT_NAMESPACE,
    CacheConfig,
    Compression,
    load_config,
)
from syncdisk.types.entry import MISS, CacheEntry

__all__ = [
    # config
    "DEFAULT_NAMESPACE",
    "CacheConfig",
    "Compression",
    "load_config",
    # entry
    "CacheEntry",
    "MISS",
]
