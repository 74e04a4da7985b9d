"""Demo: collect per-operation counters with CacheStats.

Run with:
    uv run python examples/cache_stats.py
"""

from rich.console import Console
from rich.table import Table

from syncdisk import Cache, CacheStats

stats = CacheStats()
cache = Cache("stats-demo", on_event=stats)

for i in range(5):
    cache.set(f"item/{i}", f"value {i}")
for i in range(8):
    cache.get(f"item/{i}")
cache.clear()

table = Table(title=f"hits={stats.hits} misses={stats.misses}")
table.add_column("operation")
table.add_column("calls", justify="right")
table.add_column("errors", justify="right")
table.add_column("time (ms)", justify="right")
for event_type, op in stats.operations.items():
    table.add_row(event_type.value, str(op.calls), str(op.errors), f"{op.total_time * 1000:.2f}")

Console().print(table)
