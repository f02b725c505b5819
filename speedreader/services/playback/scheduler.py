"""
Playback scheduler: the RSVP state machine.

The scheduler owns a PlaybackState and at most one pending timer. Each
time the timer fires it advances to the next token, tells the listener
what to show and arms the next timer for that token's delay. Every
transition that affects timing cancels the pending timer before doing
anything else, so two ticks can never be in flight at once.

States:
    IDLE      article loaded (or nothing loaded), playback not started
    PLAYING   a timer is armed for the current token
    PAUSED    stopped mid-article, index kept
    FINISHED  advanced past the last token; index parked on the last one

Example usage:
    >>> clock = ManualClock()
    >>> scheduler = PlaybackScheduler(clock, rate=300)
    >>> scheduler.load(tokenize("Hello world."))
    >>> scheduler.play()
    >>> _ = clock.advance(200)  # "Hello" held for one base duration
    >>> scheduler.index
    1
"""

import logging
import math
from typing import Optional, Sequence

from speedreader.config import get_settings
from speedreader.models.enums import PlaybackStatus
from speedreader.models.state import PlaybackState
from speedreader.models.token import ParagraphBreak, Token
from speedreader.services.tokenizer.constants import RATE_STEP
from speedreader.services.tokenizer.orp import ORPCalculator
from speedreader.services.tokenizer.timing import TimingCalculator, clamp_rate

from .clock import Clock, TimerHandle
from .listener import PlaybackListener
from .progress import fraction_to_index, index_to_fraction

logger = logging.getLogger(__name__)


class PlaybackScheduler:
    """
    Drive word advancement over time for one reader.

    None of the public operations raise: rates and indices are clamped,
    and every operation is a no-op while no tokens are loaded. All calls
    must come from the thread that drives the clock.

    Args:
        clock: Source of one-shot timers.
        listener: Presentation callbacks. Defaults to a no-op listener.
        rate: Initial rate in WPM. Defaults to ``Settings.default_wpm``.
        timing: Delay calculator.
        orp_calculator: Fixation point calculator used to split words.
    """

    def __init__(
        self,
        clock: Clock,
        listener: Optional[PlaybackListener] = None,
        *,
        rate: Optional[int] = None,
        timing: Optional[TimingCalculator] = None,
        orp_calculator: Optional[ORPCalculator] = None,
    ) -> None:
        self._clock = clock
        self._listener = listener or PlaybackListener()
        self._timing = timing or TimingCalculator()
        self._orp = orp_calculator or ORPCalculator()
        initial_rate = get_settings().default_wpm if rate is None else rate
        self._state = PlaybackState(rate=clamp_rate(initial_rate))
        self._pending: Optional[TimerHandle] = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._state.tokens

    @property
    def index(self) -> int:
        return self._state.index

    @property
    def rate(self) -> int:
        return self._state.rate

    @property
    def status(self) -> PlaybackStatus:
        return self._state.status

    @property
    def is_playing(self) -> bool:
        return self._state.status is PlaybackStatus.PLAYING

    @property
    def current_token(self) -> Optional[Token]:
        return self._state.current_token

    @property
    def has_pending_timer(self) -> bool:
        return self._pending is not None

    @property
    def progress(self) -> float:
        return index_to_fraction(self._state.index, len(self._state.tokens))

    def current_delay_ms(self) -> Optional[float]:
        """Hold time of the current token at the current rate, if any."""
        token = self._state.current_token
        if token is None:
            return None
        return self._timing.calculate_delay_ms(token, self._state.rate)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def load(self, tokens: Sequence[Token]) -> None:
        """Replace the token sequence; any state -> IDLE at index 0."""
        self._cancel_pending()
        previous = self._state.status
        self._state.reset(tokens)
        logger.debug("Loaded %d tokens", len(self._state.tokens))
        if previous is not PlaybackStatus.IDLE:
            self._listener_call("on_status_changed", PlaybackStatus.IDLE)
        self._render()

    def play(self) -> None:
        """
        Start or resume playback.

        IDLE/PAUSED/FINISHED -> PLAYING. Entering from FINISHED restarts at
        the first token. No-op without tokens or when already playing.
        """
        state = self._state
        if state.is_empty or state.status is PlaybackStatus.PLAYING:
            return

        if state.status is PlaybackStatus.FINISHED:
            state.index = 0
            self._render()

        self._set_status(PlaybackStatus.PLAYING)
        if self.is_playing:
            self._arm()

    def pause(self) -> None:
        """PLAYING -> PAUSED; the index is kept."""
        if self._state.status is not PlaybackStatus.PLAYING:
            return
        self._cancel_pending()
        self._set_status(PlaybackStatus.PAUSED)

    def toggle(self) -> None:
        """Pause when playing, play otherwise."""
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def tick(self) -> None:
        """
        Advance to the next token. Invoked when the armed timer fires.

        Past the last token the index stays on the last one and playback
        finishes. A paragraph break is held for its delay without being
        shown; only the progress moves.
        """
        state = self._state
        self._cancel_pending()
        if state.is_empty or state.status is not PlaybackStatus.PLAYING:
            return

        tokens = state.tokens
        state.index += 1

        if state.index > state.last_index:
            state.index = state.last_index
            self._set_status(PlaybackStatus.FINISHED)
            self._emit_progress()
            return

        if isinstance(state.current_token, ParagraphBreak):
            self._emit_progress()
        else:
            self._render()

        # The listener may have paused, reloaded or restarted playback.
        if self.is_playing and state.tokens is tokens and self._pending is None:
            self._arm()

    def set_rate(self, new_rate: float) -> None:
        """
        Change the rate, clamped to the allowed range and step.

        While playing, the in-flight delay is discarded and a full delay
        for the current token is armed at the new rate.
        """
        if math.isnan(new_rate):
            return

        self._state.rate = clamp_rate(new_rate)
        logger.debug("Rate set to %d WPM", self._state.rate)
        self._listener_call("on_rate_changed", self._state.rate)

        if self.is_playing:
            self._cancel_pending()
            self._arm()

    def increase_rate(self) -> None:
        self.set_rate(self._state.rate + RATE_STEP)

    def decrease_rate(self) -> None:
        self.set_rate(self._state.rate - RATE_STEP)

    def seek(self, index: int) -> None:
        """
        Jump to a token index, clamped into range.

        The status is unchanged and a pending timer stays armed as is: a
        seek during playback takes effect on the next tick.
        """
        state = self._state
        if state.is_empty:
            return
        if isinstance(index, float):
            if math.isnan(index):
                return
            if math.isinf(index):
                index = state.last_index if index > 0 else 0
        state.index = state.clamp_index(int(index))
        self._render()

    def seek_fraction(self, fraction: float) -> None:
        """Jump to a normalized position in ``[0.0, 1.0]``."""
        if self._state.is_empty:
            return
        self.seek(fraction_to_index(fraction, len(self._state.tokens)))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _arm(self) -> None:
        token = self._state.current_token
        if token is None:
            return
        self._cancel_pending()
        delay_ms = self._timing.calculate_delay_ms(token, self._state.rate)
        self._pending = self._clock.schedule_once(delay_ms, self._on_timer)

    def _on_timer(self) -> None:
        self._pending = None
        self.tick()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _set_status(self, status: PlaybackStatus) -> None:
        if self._state.status is status:
            return
        logger.debug("Status %s -> %s", self._state.status.value, status.value)
        self._state.status = status
        self._listener_call("on_status_changed", status)

    def _render(self) -> None:
        token = self._state.current_token
        if token is None or isinstance(token, ParagraphBreak):
            parts = ("", "", "")
        else:
            parts = self._orp.split_for_display(token.text)
        self._listener_call("on_word_changed", *parts)
        self._emit_progress()

    def _emit_progress(self) -> None:
        self._listener_call("on_progress", self.progress)

    def _listener_call(self, method: str, *args) -> None:
        try:
            getattr(self._listener, method)(*args)
        except Exception:
            logger.exception("Playback listener %s failed", method)
