"""Debounced comparison trigger.

Each qualifying input change restarts a delay timer; only the last change in
the window invokes the action. A cycle that is superseded while its fetch is
still running has its outcome discarded when it settles.
"""

from __future__ import annotations

import enum
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from ..domain import ComparisonResult
from ..utils import ComparisonError, get_logger

logger = get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

ComparisonAction = Callable[[str, str, str], ComparisonResult]


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], Any]], Timer]


class TriggerState(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    FETCHING = "fetching"


@dataclass(frozen=True, slots=True)
class TriggerSnapshot:
    state: TriggerState
    result: ComparisonResult | None
    error: str

    @property
    def loading(self) -> bool:
        return self.state is not TriggerState.IDLE


def _daemon_timer(delay: float, callback: Callable[[], Any]) -> Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


def error_message(err: BaseException) -> str:
    """User-facing text for a failed comparison."""
    if isinstance(err, ComparisonError):
        return str(err)
    return str(err) or UNKNOWN_ERROR_MESSAGE


class DebouncedTrigger:
    """Idle/Pending/Fetching state machine around a comparison action."""

    def __init__(
        self,
        action: ComparisonAction,
        delay: float = 0.5,
        timer_factory: TimerFactory = _daemon_timer,
    ) -> None:
        self._action = action
        self._delay = delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._settled = threading.Condition(self._lock)
        self._generation = 0
        self._timer: Timer | None = None
        self._state = TriggerState.IDLE
        self._result: ComparisonResult | None = None
        self._error = ""

    @property
    def state(self) -> TriggerState:
        with self._lock:
            return self._state

    @property
    def result(self) -> ComparisonResult | None:
        with self._lock:
            return self._result

    @property
    def error(self) -> str:
        with self._lock:
            return self._error

    @property
    def loading(self) -> bool:
        return self.state is not TriggerState.IDLE

    def snapshot(self) -> TriggerSnapshot:
        with self._lock:
            return TriggerSnapshot(state=self._state, result=self._result, error=self._error)

    def update(self, ticker1: str, ticker2: str, timeframe: str) -> None:
        """Record new inputs, clearing the current outcome and restarting the delay."""
        ticker1 = (ticker1 or "").strip().upper()
        ticker2 = (ticker2 or "").strip().upper()
        with self._lock:
            generation = self._invalidate()
            self._result = None
            self._error = ""

            if not (ticker1 and ticker2):
                self._state = TriggerState.IDLE
                self._settled.notify_all()
                return

            self._state = TriggerState.PENDING
            self._timer = self._timer_factory(
                self._delay, lambda: self._fire(generation, ticker1, ticker2, timeframe)
            )
            self._timer.start()
        logger.debug("Scheduled comparison %s/%s (%s) in %.3fs", ticker1, ticker2, timeframe, self._delay)

    def cancel(self) -> None:
        """Drop the pending timer and ignore any fetch still in flight."""
        with self._lock:
            self._invalidate()
            self._state = TriggerState.IDLE
            self._settled.notify_all()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the trigger is idle. Returns ``False`` on timeout."""
        with self._settled:
            return self._settled.wait_for(lambda: self._state is TriggerState.IDLE, timeout=timeout)

    def _invalidate(self) -> int:
        # Caller holds the lock.
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1
        return self._generation

    def _fire(self, generation: int, ticker1: str, ticker2: str, timeframe: str) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            self._state = TriggerState.FETCHING

        result: ComparisonResult | None = None
        error = ""
        try:
            result = self._action(ticker1, ticker2, timeframe)
        except Exception as err:
            if isinstance(err, ComparisonError):
                logger.warning("Comparison failed: %s", err)
            else:
                logger.exception("Unexpected error comparing %s and %s", ticker1, ticker2)
            error = error_message(err)

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding superseded comparison %s/%s", ticker1, ticker2)
                return
            self._result = result
            self._error = error
            self._state = TriggerState.IDLE
            self._settled.notify_all()
