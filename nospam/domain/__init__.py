from .errors import DomainError
from .sampler import per_time
from .window import Window, WindowedLimiter

__all__ = ["DomainError", "Window", "WindowedLimiter", "per_time"]
