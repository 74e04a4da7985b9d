"""Operation events for observing cache activity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional


class CacheEventType(Enum):
    """Public cache operations that emit an event."""

    PATH_FOR = "path_for"
    GET = "get"
    SET = "set"
    HAS = "has"
    REMOVE = "remove"
    CLEAR = "clear"


class CacheEvent:
    """Lightweight event emitted once per public cache operation.

    Emitted whether or not the operation succeeded; ``duration`` is always
    the time spent inside the call.
    """

    __slots__ = (
        "event_type",
        "path",
        "hit",
        "succeeded",
        "duration",
        "error",
    )

    def __init__(
        self,
        event_type: CacheEventType,
        path: Optional[Path] = None,
        hit: Optional[bool] = None,
        succeeded: Optional[bool] = None,
        duration: float = 0.0,
        error: Optional[BaseException] = None,
    ):
        self.event_type = event_type
        self.path = path
        self.hit = hit
        self.succeeded = succeeded
        self.duration = duration
        self.error = error


CacheEventCallback = Callable[[CacheEvent], None]


@dataclass
class OperationStats:
    calls: int = 0
    errors: int = 0
    total_time: float = 0.0


class CacheStats:
    """Event callback that aggregates per-operation counters.

    Pass an instance as ``on_event`` when constructing a cache::

        stats = CacheStats()
        cache = Cache("builds", on_event=stats)
        cache.get("missing")
        assert stats.misses == 1
    """

    def __init__(self):
        self.operations: Dict[CacheEventType, OperationStats] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, event: CacheEvent) -> None:
        op = self.operations.setdefault(event.event_type, OperationStats())
        op.calls += 1
        op.total_time += event.duration
        if not event.succeeded:
            op.errors += 1
        if event.hit is True:
            self.hits += 1
        elif event.hit is False:
            self.misses += 1

    def for_operation(self, event_type: CacheEventType) -> OperationStats:
        return self.operations.get(event_type, OperationStats())

    def reset(self) -> None:
        self.operations.clear()
        self.hits = 0
        self.misses = 0
