"""
Playback package for RSVP pacing.

- clock: Clock protocol, asyncio-backed clock and a manual clock for tests
- listener: Presentation callbacks
- progress: Index <-> normalized position mapping for scrubbing
- scheduler: The play/pause/seek/rate state machine
- controls: Keyboard bindings
"""

from .clock import AsyncioClock, Clock, ManualClock, TimerHandle
from .controls import FASTER_KEY, SLOWER_KEY, TOGGLE_KEY, KeyControls, build_key_bindings
from .listener import PlaybackListener
from .progress import fraction_to_index, index_to_fraction
from .scheduler import PlaybackScheduler

__all__ = [
    # Clock
    "Clock",
    "TimerHandle",
    "AsyncioClock",
    "ManualClock",
    # Scheduler
    "PlaybackScheduler",
    "PlaybackListener",
    # Progress
    "fraction_to_index",
    "index_to_fraction",
    # Controls
    "KeyControls",
    "build_key_bindings",
    "TOGGLE_KEY",
    "SLOWER_KEY",
    "FASTER_KEY",
]
