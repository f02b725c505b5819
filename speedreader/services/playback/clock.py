"""
Clock abstraction for the playback scheduler.

The scheduler never sleeps or reads wall-clock time itself. It asks a
Clock to run a callback once after a delay and keeps the returned handle
so it can cancel it. Two clocks are provided:

- AsyncioClock: production clock backed by ``loop.call_later``.
- ManualClock: deterministic clock for tests; time only moves when the
  test advances it.

All callbacks run on the thread that drives the clock, so the scheduler
state has a single writer and needs no locking.
"""

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol

TimerCallback = Callable[[], None]


class TimerHandle(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback. A cancelled callback never runs."""
        ...


class Clock(Protocol):
    """Schedules one-shot callbacks."""

    def schedule_once(self, delay_ms: float, callback: TimerCallback) -> TimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        ...


class AsyncioClock:
    """Clock backed by an asyncio event loop.

    Args:
        loop: Event loop to schedule on. Defaults to the running loop at
              the time of each ``schedule_once`` call.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule_once(self, delay_ms: float, callback: TimerCallback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay_ms) / 1000.0, callback)


@dataclass(order=True)
class _ManualTimer:
    due_ms: float
    seq: int
    callback: TimerCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """
    Deterministic clock driven explicitly by the caller.

    Timers fire in due order; timers due at the same instant fire in the
    order they were scheduled.

    Example:
        >>> clock = ManualClock()
        >>> fired = []
        >>> _ = clock.schedule_once(200, lambda: fired.append(clock.now_ms))
        >>> _ = clock.advance(199)
        >>> fired
        []
        >>> _ = clock.advance(1)
        >>> fired
        [200.0]
    """

    def __init__(self) -> None:
        self.now_ms = 0.0
        self._timers: List[_ManualTimer] = []
        self._seq = itertools.count()

    def schedule_once(self, delay_ms: float, callback: TimerCallback) -> _ManualTimer:
        timer = _ManualTimer(
            due_ms=self.now_ms + max(0.0, delay_ms),
            seq=next(self._seq),
            callback=callback,
        )
        heapq.heappush(self._timers, timer)
        return timer

    @property
    def pending_count(self) -> int:
        """Number of scheduled, not yet cancelled timers."""
        return sum(1 for timer in self._timers if not timer.cancelled)

    @property
    def next_due_ms(self) -> Optional[float]:
        """Due time of the earliest live timer, or None."""
        self._drop_cancelled()
        return self._timers[0].due_ms if self._timers else None

    def advance(self, delta_ms: float) -> int:
        """
        Move time forward, firing every timer that comes due.

        Timers scheduled by fired callbacks also fire if they fall due
        inside the window.

        Returns:
            Number of callbacks fired.
        """
        target = self.now_ms + delta_ms
        fired = 0
        while True:
            self._drop_cancelled()
            if not self._timers or self._timers[0].due_ms > target:
                break
            self._fire(heapq.heappop(self._timers))
            fired += 1
        self.now_ms = target
        return fired

    def fire_next(self) -> bool:
        """
        Jump to the earliest live timer and fire it.

        Returns:
            False if nothing was pending.
        """
        self._drop_cancelled()
        if not self._timers:
            return False
        self._fire(heapq.heappop(self._timers))
        return True

    def _fire(self, timer: _ManualTimer) -> None:
        self.now_ms = max(self.now_ms, timer.due_ms)
        timer.cancelled = True
        timer.callback()

    def _drop_cancelled(self) -> None:
        while self._timers and self._timers[0].cancelled:
            heapq.heappop(self._timers)
