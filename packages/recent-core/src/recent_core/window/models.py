"""Pydantic models for the recency window."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WindowOverflowError(ValueError):
    """The combined window is too large to represent safely."""

    def __init__(self, years: int, limit: int) -> None:
        self.years = years
        self.limit = limit
        super().__init__(f"Maximum duration is {limit} years. How old are your files?")


class TimeWindow(BaseModel):
    """Separate time counts that add up to one recency window."""

    model_config = ConfigDict(frozen=True)

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
