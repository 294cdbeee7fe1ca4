"""
Settings for eventbus tooling, read from environment variables.

The bus itself has no settings; these drive logging and the demo CLI.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = ("1", "true", "True", "yes", "on")


@dataclass
class Settings:
    """
    Runtime settings.

    Args:
        log_level: Log level name
        json_logs: Render logs as JSON instead of console output
        tick_interval: Seconds to sleep between demo ticks
        tick_count: Number of demo ticks to post
    """

    log_level: str = "INFO"
    json_logs: bool = False
    tick_interval: float = 0.1
    tick_count: int = 10

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.tick_interval < 0:
            raise ValueError("tick_interval must be >= 0")
        if self.tick_count < 0:
            raise ValueError("tick_count must be >= 0")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``EVENTBUS_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get("EVENTBUS_LOG_LEVEL", "INFO"),
            json_logs=env.get("EVENTBUS_LOG_JSON", "") in TRUE_VALUES,
            tick_interval=_env_number(env, "EVENTBUS_TICK_INTERVAL", "0.1", float),
            tick_count=_env_number(env, "EVENTBUS_TICK_COUNT", "10", int),
        )


def _env_number(env: Mapping[str, str], key: str, default: str, cast: type):
    raw = env.get(key, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{key} must be {cast.__name__}, got {raw!r}") from None
