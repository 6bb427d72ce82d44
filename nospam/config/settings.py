from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class LoggingSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_logs: bool = Field(True, alias="json")


class ThrottleSettings(BaseModel):
    # Run every action regardless of counters (useful while debugging).
    bypass: bool = False


class LimiterSettings(BaseModel):
    window: Literal["second", "minute", "hour", "day"] = "second"
    limit: int = Field(..., ge=1)

    @field_validator("window", mode="before")
    @classmethod
    def _normalize_window(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class Settings(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    throttle: ThrottleSettings = Field(default_factory=ThrottleSettings)
    limiters: dict[str, LimiterSettings] = Field(default_factory=dict)

    @field_validator("limiters")
    @classmethod
    def _non_empty_names(cls, v: dict[str, LimiterSettings]) -> dict[str, LimiterSettings]:
        for name in v:
            if not name.strip():
                raise ValueError("limiter names must be non-empty")
        return v
