from __future__ import annotations

from typing import Iterator

from .config.settings import Settings
from .domain.errors import DomainError
from .domain.window import Action, Clock, WindowedLimiter
from .observability.logging import configure_logging_from, get_logger


class LimiterRegistry:
    """Named, independent limiters built from ``Settings.limiters``.

    Each name owns its own ``WindowedLimiter``; nothing is shared between them.
    """

    def __init__(self, limiters: dict[str, WindowedLimiter] | None = None) -> None:
        self._limiters: dict[str, WindowedLimiter] = dict(limiters or {})

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        clock: Clock | None = None,
        logger=None,
        apply_logging: bool = False,
    ) -> "LimiterRegistry":
        """Build one limiter per `limiters:` entry.

        With ``apply_logging`` the `logging:` section is installed first, so the
        limiters bind loggers at the configured level.
        """
        if apply_logging:
            configure_logging_from(settings.logging)
        base_logger = logger if logger is not None else get_logger().bind(component="limiter")
        limiters = {
            name: WindowedLimiter(
                cfg.limit,
                cfg.window,
                name=name,
                bypass=settings.throttle.bypass,
                clock=clock,
                logger=base_logger,
            )
            for name, cfg in settings.limiters.items()
        }
        base_logger.info(
            "registry.loaded",
            limiters=sorted(limiters),
            bypass=settings.throttle.bypass,
        )
        return cls(limiters)

    def get(self, name: str) -> WindowedLimiter:
        try:
            return self._limiters[name]
        except KeyError:
            raise DomainError(
                code="NOT_FOUND",
                message=f"Unknown limiter: {name!r}.",
                details={"name": name, "available": sorted(self._limiters)},
            ) from None

    def attempt(self, name: str, action: Action) -> None:
        self.get(name).attempt(action)

    def names(self) -> list[str]:
        return sorted(self._limiters)

    def __contains__(self, name: object) -> bool:
        return name in self._limiters

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._limiters)
