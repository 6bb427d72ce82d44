from __future__ import annotations

import pytest

from nospam.config.settings import Settings
from nospam.domain.errors import DomainError
from nospam.domain.window import Window
from nospam.observability.logging import configure_logging
from nospam.registry import LimiterRegistry


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


def _settings(**extra) -> Settings:
    return Settings.model_validate(
        {
            "limiters": {
                "render_errors": {"window": "second", "limit": 2},
                "chat": {"window": "minute", "limit": 1},
            },
            **extra,
        }
    )


def test_registry_builds_independent_limiters():
    configure_logging(level="ERROR", json_logs=True)
    clock = FakeClock()
    registry = LimiterRegistry.from_settings(_settings(), clock=clock)

    assert registry.names() == ["chat", "render_errors"]
    assert "chat" in registry
    assert len(registry) == 2
    assert registry.get("chat").window is Window.MINUTE

    render: list[int] = []
    chat: list[int] = []
    for _ in range(4):
        registry.attempt("render_errors", render.append)
        registry.attempt("chat", chat.append)

    assert render == [0, 1]
    assert chat == [0]

    clock.now += 2.0
    registry.attempt("render_errors", render.append)
    registry.attempt("chat", chat.append)

    assert render == [0, 1, 0]
    assert chat == [0]


def test_bypass_applies_to_every_limiter():
    configure_logging(level="ERROR", json_logs=True)
    registry = LimiterRegistry.from_settings(_settings(throttle={"bypass": True}), clock=FakeClock())

    chat: list[int] = []
    for _ in range(3):
        registry.attempt("chat", chat.append)

    assert chat == [0, 0, 0]
    assert all(registry.get(name).bypass for name in registry)


def test_unknown_limiter_name():
    registry = LimiterRegistry()

    with pytest.raises(DomainError) as exc_info:
        registry.attempt("missing", lambda _c: None)

    err = exc_info.value
    assert err.code == "NOT_FOUND"
    assert err.details == {"name": "missing", "available": []}
    assert err.to_dict()["ok"] is False
