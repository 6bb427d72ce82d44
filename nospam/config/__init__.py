from .loader import LoadedSettings, load_settings
from .settings import LimiterSettings, LoggingSettings, Settings, ThrottleSettings

__all__ = ["LimiterSettings", "LoadedSettings", "LoggingSettings", "Settings", "ThrottleSettings", "load_settings"]
