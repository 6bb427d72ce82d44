from __future__ import annotations

import random
from typing import Callable

from .errors import DomainError


def per_time(
    target: int,
    estimate: int,
    action: Callable[[int], object],
    *,
    rng: random.Random | None = None,
) -> None:
    """Call ``action(target)`` on average ``target`` times per ``estimate`` calls.

    ``estimate`` is how many times this function is expected to be called over
    the same period. A 30 fps render loop that wants to report an error about
    once per second uses ``per_time(1, 30, report)``.

    The factor is ``estimate // target``. Floor division biases the achieved
    rate slightly above ``target`` when ``estimate`` is not a multiple of it.
    If ``estimate <= target`` the action always runs.
    """

    if isinstance(target, bool) or not isinstance(target, int) or target < 1:
        raise DomainError(
            code="INVALID_ARGUMENT",
            message="target must be a positive integer.",
            details={"target": target},
        )

    if isinstance(estimate, bool) or not isinstance(estimate, int):
        raise DomainError(
            code="INVALID_ARGUMENT",
            message="estimate must be an integer.",
            details={"estimate": estimate},
        )

    factor = estimate // target
    if factor <= 1:
        action(target)
        return

    draw = (rng or random).randrange(factor)
    if draw == 0:
        action(target)
