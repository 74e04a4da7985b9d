"""Synchronous, file-per-key disk cache."""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import time
from pathlib import Path
from typing import Any, Iterator, Optional

from syncdisk.cache.codecs import resolve_codec
from syncdisk.cache.keys import cache_root, resolve
from syncdisk.errors import CodecError
from syncdisk.events import CacheEvent, CacheEventCallback, CacheEventType
from syncdisk.types.config import CacheConfig, Compression
from syncdisk.types.entry import MISS, CacheEntry

logger = logging.getLogger(__name__)

_FILE_MODE = 0o600
_DIR_MODE = 0o777
_WRITE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)


class Cache:
    """Key/value cache that stores one file per key under a namespace root.

    The root is ``<location>/<DESCRIPTIVE_NAME>/<namespace>``; ``location``
    defaults to the system temp directory. Keys are fingerprinted so any
    string is a valid key. Values are strings, optionally compressed on disk.

    Every operation is a blocking call that resolves the key and performs a
    single filesystem operation. There is no locking: concurrent writers to
    the same key race, and ``clear()`` must not run alongside other calls on
    the same namespace.
    """

    def __init__(
        self,
        namespace: Optional[str] = None,
        config: Optional[CacheConfig] = None,
        *,
        location: Optional[str | os.PathLike[str]] = None,
        compression: Any = None,
        on_event: Optional[CacheEventCallback] = None,
    ):
        config = config or CacheConfig()
        # Validate the codec before touching any paths.
        self._compression = Compression.parse(
            compression if compression is not None else config.compression
        )
        self._codec = resolve_codec(self._compression)

        self._namespace = namespace or config.namespace
        self._location = Path(location) if location is not None else config.location
        self._root = cache_root(self._namespace, self._location)
        self._on_event = on_event

        logger.info(
            "new Cache { root: %s, compression: %s }", self._root, self._compression.value
        )

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        namespace: Optional[str] = None,
        on_event: Optional[CacheEventCallback] = None,
    ) -> "Cache":
        return cls(namespace, config, on_event=on_event)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def compression(self) -> Compression:
        return self._compression

    def __repr__(self) -> str:
        return f"Cache(root={str(self._root)!r}, compression={self._compression.value!r})"

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def path_for(self, key: str) -> Path:
        """Return the path where *key*'s value lives (whether or not it exists).

        Raises:
            InvalidKeyError: If *key* is ``None`` or not a string.
        """
        with self._track(CacheEventType.PATH_FOR) as event:
            event.path = resolve(self._root, key)
            return event.path

    def get(self, key: str) -> CacheEntry:
        """Read *key*. Returns :data:`MISS` when nothing is stored under it.

        Raises:
            CodecError: If the stored bytes cannot be decoded.
            OSError: For any filesystem failure other than a missing file.
        """
        with self._track(CacheEventType.GET) as event:
            path = event.path = resolve(self._root, key)
            logger.debug("get: %s", path)

            try:
                raw = path.read_bytes()
            except FileNotFoundError:
                logger.debug("miss: %s", path)
                event.hit = False
                return MISS

            value = self._decode(self.decompress(raw))
            event.hit = True
            return CacheEntry.hit(path, value)

    def set(self, key: str, value: str) -> Path:
        """Store *value* under *key*, replacing any previous value.

        The file is written in one pass and left readable and writable by
        the owner only.

        Returns:
            The path the value was written to.
        """
        with self._track(CacheEventType.SET) as event:
            if not isinstance(value, str):
                raise TypeError(f"cache value must be a str, got {type(value).__name__}")
            path = event.path = resolve(self._root, key)
            logger.debug("set: %s", path)

            data = self.compress(value.encode("utf-8", "surrogatepass"))
            path.parent.mkdir(parents=True, exist_ok=True, mode=_DIR_MODE)
            fd = os.open(path, _WRITE_FLAGS, _FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            # os.open honours the umask; force the mode regardless.
            os.chmod(path, _FILE_MODE)
            return path

    def has(self, key: str) -> bool:
        """Return whether a value is currently stored under *key*."""
        with self._track(CacheEventType.HAS) as event:
            path = event.path = resolve(self._root, key)
            logger.debug("has: %s", path)
            return path.exists()

    def remove(self, key: str) -> bool:
        """Delete *key*. Returns ``False`` if nothing was stored under it."""
        with self._track(CacheEventType.REMOVE) as event:
            path = event.path = resolve(self._root, key)
            logger.debug("remove: %s", path)

            try:
                path.unlink()
            except FileNotFoundError:
                return False
            return True

    def clear(self) -> None:
        """Delete every entry in this namespace, including the root itself."""
        with self._track(CacheEventType.CLEAR) as event:
            event.path = self._root
            logger.debug("clear: %s", self._root)

            try:
                shutil.rmtree(self._root)
            except FileNotFoundError:
                pass

    # ------------------------------------------------------------------
    # Codec
    # ------------------------------------------------------------------

    def compress(self, data: bytes) -> bytes:
        return self._codec.compress(data)

    def decompress(self, data: bytes) -> bytes:
        return self._codec.decompress(data)

    def _decode(self, data: bytes) -> str:
        try:
            return data.decode("utf-8", "surrogatepass")
        except UnicodeDecodeError as exc:
            raise CodecError("stored value is not valid UTF-8") from exc

    # ------------------------------------------------------------------
    # Instrumentation
    # ------------------------------------------------------------------

    @contextlib.contextmanager
    def _track(self, event_type: CacheEventType) -> Iterator[CacheEvent]:
        event = CacheEvent(event_type)
        start = time.monotonic()
        try:
            yield event
        except Exception as exc:
            event.succeeded = False
            event.error = exc
            raise
        else:
            event.succeeded = True
        finally:
            event.duration = time.monotonic() - start
            if self._on_event is not None:
                self._on_event(event)
