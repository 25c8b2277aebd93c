from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_at: int  # epoch ms


@dataclass
class _Bucket:
    tokens: int
    last_refill_ms: int


class MemoryTokenBucket:
    """
    Per-key token bucket held in process memory.

    Refills `refill_rate` tokens every `refill_interval_ms`, capped at `max_tokens`. At most
    `max_keys` buckets are tracked: once over, buckets that have refilled to full are dropped
    (a fresh bucket is identical), then the least recently used ones.
    """

    def __init__(
        self,
        max_tokens: int = 20,
        refill_rate: int = 2,
        refill_interval_ms: int = 1000,
        *,
        max_keys: int = 10_000,
        clock_ms: Callable[[], int] = lambda: int(time.time() * 1000),
    ) -> None:
        self.max_tokens = max(1, int(max_tokens))
        self.refill_rate = max(0, int(refill_rate))
        self.refill_interval_ms = max(1, int(refill_interval_ms))
        self.max_keys = max(1, int(max_keys))
        self._clock_ms = clock_ms
        self._buckets: "OrderedDict[str, _Bucket]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._buckets)

    def _refilled_tokens(self, b: _Bucket, now: int) -> int:
        to_add = ((now - b.last_refill_ms) // self.refill_interval_ms) * self.refill_rate
        return min(self.max_tokens, b.tokens + max(0, to_add))

    def _prune(self, limit: int) -> None:
        now = self._clock_ms()
        full = [k for k, b in self._buckets.items() if self._refilled_tokens(b, now) >= self.max_tokens]
        for k in full:
            del self._buckets[k]
        while len(self._buckets) > limit:
            self._buckets.popitem(last=False)

    def _bucket(self, key: str) -> _Bucket:
        b = self._buckets.get(key)
        if b is None:
            if len(self._buckets) >= self.max_keys:
                self._prune(self.max_keys - 1)
            b = _Bucket(tokens=self.max_tokens, last_refill_ms=self._clock_ms())
            self._buckets[key] = b
        else:
            self._buckets.move_to_end(key)
        return b

    def _refill(self, b: _Bucket) -> None:
        now = self._clock_ms()
        to_add = ((now - b.last_refill_ms) // self.refill_interval_ms) * self.refill_rate
        if to_add > 0:
            b.tokens = min(self.max_tokens, b.tokens + to_add)
            b.last_refill_ms = now

    def check(self, key: str) -> RateLimitResult:
        with self._lock:
            b = self._bucket(key)
            self._refill(b)
            return RateLimitResult(b.tokens > 0, b.tokens, b.last_refill_ms + self.refill_interval_ms)

    def consume(self, key: str) -> RateLimitResult:
        with self._lock:
            b = self._bucket(key)
            self._refill(b)
            reset_at = b.last_refill_ms + self.refill_interval_ms
            if b.tokens > 0:
                b.tokens -= 1
                return RateLimitResult(True, b.tokens, reset_at)
            return RateLimitResult(False, 0, reset_at)


__all__ = ["MemoryTokenBucket", "RateLimitResult"]
