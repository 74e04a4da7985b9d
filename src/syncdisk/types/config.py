from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from syncdisk.errors import UnsupportedCompressionError

DEFAULT_NAMESPACE = "default-disk-cache"


class Compression(str, Enum):
    """Compression schemes understood by the cache, keyed by their stored name."""

    NONE = "none"
    DEFLATE = "deflate"
    DEFLATE_RAW = "deflateRaw"
    GZIP = "gzip"

    @classmethod
    def parse(cls, name: Any) -> "Compression":
        """Map a scheme name (or ``None`` for identity) onto a member.

        Raises:
            UnsupportedCompressionError: If the name is not a known scheme.
        """
        if name is None:
            return cls.NONE
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedCompressionError(name) from None


class CacheConfig(BaseModel):
    """Cache configuration."""

    model_config = ConfigDict(frozen=True)

    namespace: str = DEFAULT_NAMESPACE
    location: Optional[Path] = None
    """Parent of the cache directory; the system temp directory when unset."""

    compression: Compression = Compression.NONE

    @field_validator("compression", mode="before")
    @classmethod
    def _known_compression(cls, value: Any) -> Compression:
        return Compression.parse(value)


def load_config(path: Optional[str] = None) -> CacheConfig:
    """Load the ``[cache]`` table of a syncdisk.toml file, falling back to defaults.

    Uses ``tomllib`` on Python 3.11+ and ``tomli`` on older versions.
    """

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        import tomli as tomllib  # type: ignore[no-redef]

    config_path = Path(path) if path else Path("syncdisk.toml")

    if not config_path.exists():
        return CacheConfig()

    with open(config_path, "rb") as f:
        raw = tomllib.load(f)

    return CacheConfig(**raw.get("cache", {}))
