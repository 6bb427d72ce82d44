from __future__ import annotations

import time
from enum import Enum
from typing import Callable

from ..observability.logging import get_logger
from .errors import DomainError

Clock = Callable[[], float]
Action = Callable[[int], object]


class Window(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    @property
    def seconds(self) -> float:
        return _WINDOW_SECONDS[self]

    @property
    def time_factor(self) -> float:
        # Real division: 1 / 60 etc. must not truncate to zero.
        return 1.0 / _WINDOW_SECONDS[self]


_WINDOW_SECONDS: dict[Window, float] = {
    Window.SECOND: 1.0,
    Window.MINUTE: 60.0,
    Window.HOUR: 60.0 * 60.0,
    Window.DAY: 60.0 * 60.0 * 24.0,
}


def _resolve_window(window: Window | str) -> Window:
    if isinstance(window, Window):
        return window
    try:
        return Window(str(window).strip().lower())
    except ValueError:
        raise DomainError(
            code="INVALID_ARGUMENT",
            message="window must be one of: second, minute, hour, day.",
            details={"window": window},
        ) from None


def _validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise DomainError(code="INVALID_ARGUMENT", message="limit must be an integer.", details={"limit": limit})
    if limit < 1:
        raise DomainError(code="INVALID_ARGUMENT", message="limit must be at least 1.", details={"limit": limit})
    return limit


class WindowedLimiter:
    """Fixed-window call counter that gates a callback.

    At most ``limit`` calls run per window. The window is measured from the last
    *permitted* call and is only checked when a new attempt arrives, so there is
    no background timer. Skipped attempts still increment the counter.

    Not thread-safe: wrap ``attempt`` in a lock if the instance is shared.
    """

    def __init__(
        self,
        limit: int,
        window: Window | str = Window.SECOND,
        *,
        name: str = "default",
        bypass: bool = False,
        clock: Clock | None = None,
        logger=None,
    ) -> None:
        self._window = _resolve_window(window)
        self._limit = float(_validate_limit(limit))
        self._time_factor = self._window.time_factor
        self._count = 0
        self._last_call: float | None = None
        self._name = name
        self._bypass = bypass
        self._clock: Clock = clock or time.monotonic
        if logger is None:
            logger = get_logger().bind(component="limiter")
        self._logger = logger.bind(limiter=name)

    @classmethod
    def per_second(cls, max_per_second: int, **kwargs) -> "WindowedLimiter":
        return cls(max_per_second, Window.SECOND, **kwargs)

    @classmethod
    def per_minute(cls, max_per_minute: int, **kwargs) -> "WindowedLimiter":
        return cls(max_per_minute, Window.MINUTE, **kwargs)

    @classmethod
    def per_hour(cls, max_per_hour: int, **kwargs) -> "WindowedLimiter":
        return cls(max_per_hour, Window.HOUR, **kwargs)

    @classmethod
    def per_day(cls, max_per_day: int, **kwargs) -> "WindowedLimiter":
        return cls(max_per_day, Window.DAY, **kwargs)

    @property
    def count(self) -> int:
        """Attempts seen since the last window reset, skipped ones included."""
        return self._count

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def window(self) -> Window:
        return self._window

    @property
    def time_factor(self) -> float:
        return self._time_factor

    @property
    def last_call(self) -> float | None:
        return self._last_call

    @property
    def name(self) -> str:
        return self._name

    @property
    def bypass(self) -> bool:
        return self._bypass

    def attempt(self, action: Action) -> None:
        """Run ``action(count)`` if the current window still has room.

        ``count`` is the pre-increment value, so it is always in ``[0, limit)``
        when the action runs. Nothing is returned; the action is the only
        observable effect.
        """

        if self._bypass:
            action(self._count)
            return

        if self._last_call is not None:
            elapsed = (self._clock() - self._last_call) * self._time_factor
            if elapsed >= 1.0:
                if self._count:
                    self._logger.debug("throttle.window_reset", previous_count=self._count)
                self._count = 0

        if self._count < self._limit:
            action(self._count)
            self._last_call = self._clock()
        elif self._count == self._limit:
            # First skip of this window.
            self._logger.debug("throttle.saturated", limit=int(self._limit), window=self._window.value)

        self._count += 1

    def __repr__(self) -> str:
        return (
            f"WindowedLimiter(name={self._name!r}, limit={int(self._limit)}, "
            f"window={self._window.value!r}, count={self._count})"
        )
