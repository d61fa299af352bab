"""Countdown to launching the default shell."""

import logging
import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from sshells.constants import DEFAULT_TIMEOUT

log = logging.getLogger(__name__)


class TimerState(Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


@dataclass(frozen=True)
class Tick:
    """Outcome of one expiry check."""

    state: TimerState
    remaining: int = 0
    transitioned: bool = False


class TimerController:
    """One-shot countdown shared by the refresh tick and the highlight handler.

    The timer starts ACTIVE with a fixed deadline. It leaves ACTIVE at most
    once, either to CANCELLED (user moved the highlight) or to EXPIRED
    (deadline reached), and never comes back.
    """

    def __init__(
        self,
        grace_period: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._deadline = clock() + grace_period
        self._state = TimerState.ACTIVE

    @property
    def state(self) -> TimerState:
        with self._lock:
            return self._state

    @property
    def deadline(self) -> float:
        return self._deadline

    def cancel(self) -> bool:
        """Cancel the countdown. Return True only for the call that cancelled it."""
        with self._lock:
            if self._state is not TimerState.ACTIVE:
                return False
            self._state = TimerState.CANCELLED
        log.debug("countdown cancelled")
        return True

    def tick(self) -> Tick:
        """Check the deadline and report the state with the seconds left."""
        with self._lock:
            if self._state is not TimerState.ACTIVE:
                return Tick(self._state)
            now = self._clock()
            if now >= self._deadline:
                self._state = TimerState.EXPIRED
                log.debug("countdown expired")
                return Tick(TimerState.EXPIRED, transitioned=True)
            return Tick(TimerState.ACTIVE, remaining=math.ceil(self._deadline - now))
