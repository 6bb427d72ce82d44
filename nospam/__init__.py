"""Call throttling primitives.

Two independent gates: a coarse fixed-window counter (``WindowedLimiter``) and a
time-free probabilistic sampler (``per_time``). Skipped calls are dropped, never
queued.
"""

from __future__ import annotations

from .config.loader import LoadedSettings, load_settings
from .config.settings import Settings
from .domain.errors import DomainError
from .domain.sampler import per_time
from .domain.window import Window, WindowedLimiter
from .observability.logging import configure_logging, configure_logging_from, get_logger
from .registry import LimiterRegistry

__all__ = [
    "DomainError",
    "LimiterRegistry",
    "LoadedSettings",
    "Settings",
    "Window",
    "WindowedLimiter",
    "__version__",
    "configure_logging",
    "configure_logging_from",
    "get_logger",
    "load_settings",
    "per_day",
    "per_hour",
    "per_minute",
    "per_second",
    "per_time",
]

__version__ = "0.1.0"

per_second = WindowedLimiter.per_second
per_minute = WindowedLimiter.per_minute
per_hour = WindowedLimiter.per_hour
per_day = WindowedLimiter.per_day
