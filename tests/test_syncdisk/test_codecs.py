"""Tests for compression codecs and their use by Cache."""

from __future__ import annotations

import gzip
import zlib

import pytest

from syncdisk.cache import codecs
from syncdisk.cache.codecs import IDENTITY, resolve_codec
from syncdisk.errors import CodecError, UnsupportedCompressionError
from syncdisk.types.config import Compression

KEY = "path/to/file.js"
VALUE = "Some test value"

# How a stock zlib/gzip reader would decode each scheme's on-disk bytes.
READERS = {
    "deflate": zlib.decompress,
    "deflateRaw": lambda data: zlib.decompress(data, -15),
    "gzip": gzip.decompress,
}


class TestCompressionParse:
    def test_none_is_identity(self):
        assert Compression.parse(None) is Compression.NONE
        assert Compression.parse("none") is Compression.NONE

    def test_known_names(self):
        assert Compression.parse("deflate") is Compression.DEFLATE
        assert Compression.parse("deflateRaw") is Compression.DEFLATE_RAW
        assert Compression.parse("gzip") is Compression.GZIP
        assert Compression.parse(Compression.GZIP) is Compression.GZIP

    @pytest.mark.parametrize("name", ["brotli", "GZIP", "deflate-raw", ""])
    def test_unknown_names(self, name):
        with pytest.raises(UnsupportedCompressionError) as exc_info:
            Compression.parse(name)
        assert exc_info.value.name == name


class TestResolveCodec:
    def test_identity(self):
        assert resolve_codec(Compression.NONE) is IDENTITY
        assert IDENTITY.compress(b"abc") == b"abc"

    def test_resolved_once(self):
        assert resolve_codec(Compression.GZIP) is resolve_codec(Compression.GZIP)

    def test_missing_zlib_is_unsupported(self, monkeypatch):
        monkeypatch.setattr(codecs, "zlib", None)
        with pytest.raises(UnsupportedCompressionError):
            resolve_codec(Compression.DEFLATE)
        assert resolve_codec(Compression.NONE) is IDENTITY

    def test_truncated_stream(self):
        codec = resolve_codec(Compression.GZIP)
        data = codec.compress(VALUE.encode())
        with pytest.raises(CodecError):
            codec.decompress(data[:-6])


class TestCompressedCache:
    @pytest.mark.parametrize("name", ["deflate", "deflateRaw", "gzip"])
    def test_set_writes_compressed_bytes(self, make_cache, name):
        cache = make_cache("my-testing-cache", compression=name)
        path = cache.set(KEY, VALUE)
        assert READERS[name](path.read_bytes()).decode() == VALUE
        assert cache.get(KEY).value == VALUE

    @pytest.mark.parametrize("name", [None, "deflate", "deflateRaw", "gzip"])
    def test_round_trip(self, make_cache, name):
        cache = make_cache(compression=name)
        value = "line\n" * 1000 + "ünïcode"
        path = cache.set(KEY, value)
        entry = cache.get(KEY)
        assert entry.is_cached
        assert entry.value == value
        assert entry.key == path

    def test_compression_shrinks_repetitive_values(self, make_cache):
        cache = make_cache(compression="gzip")
        value = "a" * 10_000
        assert cache.set(KEY, value).stat().st_size < 1000

    @pytest.mark.parametrize("name", ["deflate", "deflateRaw", "gzip"])
    def test_corrupt_bytes_raise_codec_error(self, make_cache, name):
        cache = make_cache(compression=name)
        path = cache.set(KEY, VALUE)
        path.write_bytes(b"definitely not compressed")
        with pytest.raises(CodecError):
            cache.get(KEY)

    def test_mismatched_scheme(self, make_cache):
        writer = make_cache("shared", compression="gzip")
        reader = make_cache("shared", compression="deflate")
        writer.set(KEY, VALUE)
        with pytest.raises(CodecError):
            reader.get(KEY)

    def test_unsupported_scheme_fails_before_disk(self, tmp_cache_dir):
        from syncdisk.cache import Cache

        location = tmp_cache_dir / "never-created"
        with pytest.raises(UnsupportedCompressionError):
            Cache("ns", location=location, compression="brotli")
        assert not location.exists()
