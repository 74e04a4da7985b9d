"""Key-to-path resolution.

Every key is fingerprinted with SHA-1, so any string (URLs, keys with
separators, keys hundreds of characters long) maps to one fixed-length
segment directly under the cache root.
"""

from __future__ import annotations

import hashlib
import tempfile
from pathlib import Path, PurePath
from typing import Any, Optional

from syncdisk.errors import InvalidKeyError

# Directory under the temp dir that holds every namespace. Kept descriptive
# so someone browsing the temp dir knows who owns it.
DESCRIPTIVE_NAME = "if-you-need-to-delete-this-open-an-issue-sync-disk-cache"


def fingerprint(key: Any) -> str:
    """SHA-1 hex digest of *key*, used as its on-disk file name."""
    if key is None:
        raise InvalidKeyError("cache key is required")
    if not isinstance(key, str):
        raise InvalidKeyError(f"cache key must be a str, got {type(key).__name__}")
    return hashlib.sha1(key.encode("utf-8", "surrogatepass")).hexdigest()


def cache_root(namespace: str, location: Optional[Path] = None) -> Path:
    """Absolute root directory for *namespace* under *location*."""
    if not namespace:
        raise InvalidKeyError("cache namespace must not be empty")
    ns = PurePath(namespace)
    if not ns.parts or ns.is_absolute() or ns.anchor or ".." in ns.parts:
        raise InvalidKeyError(f"cache namespace must be a plain relative name: {namespace!r}")

    base = Path(location) if location is not None else Path(tempfile.gettempdir())
    return base.absolute() / DESCRIPTIVE_NAME / ns


def resolve(root: Path, key: Any) -> Path:
    return root / fingerprint(key)
