"""Compression codecs applied to stored bytes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from syncdisk.errors import CodecError, UnsupportedCompressionError
from syncdisk.types.config import Compression

try:
    import zlib
except ImportError:  # pragma: no cover - interpreter built without zlib
    zlib = None  # type: ignore[assignment]

# zlib window sizes: positive for a zlib header, negative for a raw stream,
# +16 for a gzip header and trailer.
_WBITS = {
    Compression.DEFLATE: 15,
    Compression.DEFLATE_RAW: -15,
    Compression.GZIP: 31,
}


@dataclass(frozen=True)
class Codec:
    """A (compress, decompress) pair for one compression scheme."""

    compression: Compression
    compress: Callable[[bytes], bytes]
    decompress: Callable[[bytes], bytes]


def _identity(data: bytes) -> bytes:
    return data


def _zlib_codec(compression: Compression) -> Codec:
    wbits = _WBITS[compression]

    def compress(data: bytes) -> bytes:
        co = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, wbits)
        return co.compress(data) + co.flush()

    def decompress(data: bytes) -> bytes:
        try:
            return zlib.decompress(data, wbits)
        except zlib.error as exc:
            raise CodecError(
                f"could not decompress {len(data)} bytes as {compression.value}"
            ) from exc

    return Codec(compression, compress, decompress)


IDENTITY = Codec(Compression.NONE, _identity, _identity)


def resolve_codec(compression: Compression) -> Codec:
    """Return the codec for *compression*.

    Raises:
        UnsupportedCompressionError: If the runtime cannot compress synchronously.
    """
    if compression is Compression.NONE:
        return IDENTITY
    if zlib is None:
        raise UnsupportedCompressionError(
            compression.value, "zlib is not available in this interpreter"
        )
    return _CODECS[compression]


_CODECS: Dict[Compression, Codec] = (
    {c: _zlib_codec(c) for c in _WBITS} if zlib is not None else {}
)
