from datetime import timedelta
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from recent_core.window import TimeWindow, resolve_duration


class ConfigError(ValueError):
    """Fatal configuration problem, detected before any matching starts."""


class RecentConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    window: TimeWindow = Field(default_factory=TimeWindow)
    invert: bool = False
    include_dots: bool = False
    no_slash: bool = False
    output: Literal["lines", "print0", "quiet"] = "lines"
    log_level: Literal["debug", "info", "warn", "error"] = "warn"

    @property
    def recent(self) -> timedelta:
        return resolve_duration(self.window)
