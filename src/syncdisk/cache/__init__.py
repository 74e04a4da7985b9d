from __future__ import annotations

from syncdisk.cache.cache import Cache
from syncdisk.cache.codecs import Codec, resolve_codec
from syncdisk.cache.keys import DESCRIPTIVE_NAME, cache_root, fingerprint

__all__ = [
    "Cache",
    "Codec",
    "DESCRIPTIVE_NAME",
    "cache_root",
    "fingerprint",
    "resolve_codec",
]
