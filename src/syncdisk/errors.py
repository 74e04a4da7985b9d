"""Error hierarchy for the disk cache.

Missing entries are never errors: ``get`` returns a miss and ``remove`` is a
no-op. Filesystem failures other than "not found" propagate as the original
``OSError``.
"""

from __future__ import annotations


class CacheError(Exception):
    """Base class for all cache errors."""


class InvalidKeyError(CacheError, ValueError):
    """A key or namespace cannot be turned into a path under the cache root."""


class UnsupportedCompressionError(CacheError, ValueError):
    """The requested compression scheme is unknown or unavailable at runtime."""

    def __init__(self, name: object, reason: str = "unknown compression scheme"):
        self.name = name
        self.reason = reason
        super().__init__(f"{reason}: {name!r}")


class CodecError(CacheError):
    """Stored bytes could not be decompressed with the configured codec."""
