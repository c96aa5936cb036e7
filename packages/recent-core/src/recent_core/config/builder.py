"""Build a validated RecentConfig from raw command-line values."""

from pydantic import ValidationError

from recent_core.window import TimeWindow, overflow_check

from .models import ConfigError, RecentConfig


def build_config(
    *,
    years: int = 0,
    months: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    invert: bool = False,
    include_dots: bool = False,
    no_slash: bool = False,
    quiet: bool = False,
    print0: bool = False,
    log_level: str = "warn",
) -> RecentConfig:
    """Validate flag values and combine them into one config.

    Raises ConfigError for contradictory or invalid values, and
    WindowOverflowError when the window is too large.
    """
    try:
        window = TimeWindow(
            years=years, months=months, days=days, hours=hours, minutes=minutes
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid time window: {e}") from e

    overflow_check(window)
    if quiet and print0:
        raise ConfigError("-print0 and -q are fundamentally opposed ideas.")

    output = "quiet" if quiet else "print0" if print0 else "lines"
    try:
        return RecentConfig(
            window=window,
            invert=invert,
            include_dots=include_dots,
            no_slash=no_slash,
            output=output,
            log_level=log_level,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid options: {e}") from e
