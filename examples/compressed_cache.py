"""Demo: transparent compression of long keys and values.

Run with:
    uv run python examples/compressed_cache.py [--compression gzip]
"""

import argparse

from syncdisk import Cache, Compression

parser = argparse.ArgumentParser(description="Write a URL-keyed entry with compression.")
parser.add_argument(
    "--compression",
    default=Compression.GZIP.value,
    choices=[c.value for c in Compression],
)
args = parser.parse_args()

cache = Cache("compressed-demo", compression=args.compression)

# Keys may contain anything a URL can; they are fingerprinted on disk.
key = "GET|https://api.example.com/lorem/ipsum?donec=in&consequat=nibh&mauris=condimentum"
value = "lorem ipsum dolor sit amet " * 200

path = cache.set(key, value)
stored = path.stat().st_size
print(f"Key:        {key}")
print(f"Path:       {path}")
print(f"Raw size:   {len(value.encode())} bytes")
print(f"On disk:    {stored} bytes ({args.compression})")
print(f"Round trip: {cache.get(key).value == value}")

cache.clear()
