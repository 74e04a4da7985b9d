"""Demo: store, read back and invalidate values in a disk cache.

Run with:
    uv run python examples/basic_cache.py

The cache lives under the system temp directory, so a second run still
finds the value written by the first.
"""

import logging

from syncdisk import Cache

# Show the resolved paths each operation touches
logging.basicConfig(level=logging.DEBUG, format="%(name)s | %(message)s")

cache = Cache("basic-demo")
key = "path/to/file.js"

entry = cache.get(key)
if entry.is_cached:
    print(f"Found from a previous run: {entry.value!r} at {entry.key}")
else:
    path = cache.set(key, "console.log('hello');")
    print(f"Stored under {path}")

print(f"has({key!r}) -> {cache.has(key)}")

cache.remove(key)
print(f"after remove: has({key!r}) -> {cache.has(key)}")
