"""Keyboard bindings for the playback controls."""

import logging
from typing import Callable, Dict

from .scheduler import PlaybackScheduler

logger = logging.getLogger(__name__)

# Key codes as reported by the presentation layer (DOM ``KeyboardEvent.code``)
TOGGLE_KEY = "Space"
SLOWER_KEY = "KeyZ"
FASTER_KEY = "KeyX"


def build_key_bindings(scheduler: PlaybackScheduler) -> Dict[str, Callable[[], None]]:
    """Map key codes to scheduler actions."""
    return {
        TOGGLE_KEY: scheduler.toggle,
        SLOWER_KEY: scheduler.decrease_rate,
        FASTER_KEY: scheduler.increase_rate,
    }


class KeyControls:
    """
    Dispatch key presses to a scheduler.

    Args:
        scheduler: The scheduler to control.

    Example:
        >>> controls = KeyControls(scheduler)
        >>> controls.handle_key("Space")
        True
        >>> controls.handle_key("KeyQ")
        False
    """

    def __init__(self, scheduler: PlaybackScheduler) -> None:
        self._bindings = build_key_bindings(scheduler)

    def handle_key(self, code: str) -> bool:
        """
        Run the action bound to ``code``.

        Returns:
            True if the key was consumed, False if it is unbound.
        """
        action = self._bindings.get(code)
        if action is None:
            return False
        logger.debug("Key %s -> %s", code, action.__name__)
        action()
        return True
