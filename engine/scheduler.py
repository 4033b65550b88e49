"""
scheduler.py — Cancellable Timers
=================================
The playback controller never sleeps and never polls.  It asks a scheduler
for ONE delayed callback at a time and keeps the returned handle so it can
cancel it the moment playback is paused, reset, or replaced.

Schedulers:
    ManualScheduler   – virtual millisecond clock; time only moves when the
                        caller calls advance().  Deterministic, so it is the
                        one to use for headless replay and in tests.
    AsyncioScheduler  – thin wrapper over loop.call_later for an app that
                        already runs an asyncio event loop.

Both return handles with a cancel() method.
"""

import asyncio
import heapq
import itertools
from typing import Callable, List, Optional, Protocol, Tuple


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


# ---------------------------------------------------------------------------
# Manual clock
# ---------------------------------------------------------------------------
class ManualHandle:
    __slots__ = ("when", "callback", "cancelled")

    def __init__(self, when: int, callback: Callable[[], None]):
        self.when:      int                  = when
        self.callback:  Callable[[], None]   = callback
        self.cancelled: bool                 = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"ManualHandle(when={self.when}, {state})"


class ManualScheduler:
    """
    Attributes:
        now : Current virtual time in milliseconds.
    """

    def __init__(self):
        self.now: int = 0
        self._queue: List[Tuple[int, int, ManualHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(self.now + max(0, int(delay_ms)), callback)
        heapq.heappush(self._queue, (handle.when, next(self._seq), handle))
        return handle

    @property
    def pending(self) -> int:
        """Number of live (not cancelled) callbacks still queued."""
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def next_due(self) -> Optional[int]:
        for when, _, handle in sorted(self._queue):
            if not handle.cancelled:
                return when
        return None

    def advance(self, ms: int) -> int:
        """Move the clock forward, firing every callback that comes due.
        Returns how many callbacks ran."""
        deadline = self.now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= deadline:
            when, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = when
            handle.callback()
            fired += 1
        self.now = deadline
        return fired

    def run_until_idle(self, limit: int = 100_000) -> int:
        """Fire callbacks until nothing is pending (bounded by `limit`)."""
        fired = 0
        while fired < limit:
            due = self.next_due()
            if due is None:
                break
            fired += self.advance(due - self.now)
        return fired


# ---------------------------------------------------------------------------
# asyncio
# ---------------------------------------------------------------------------
class AsyncioScheduler:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000.0, callback)
