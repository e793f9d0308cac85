"""
Session configuration.

Values come from the environment (a .env file is loaded by the CLI via
python-dotenv); command-line flags override them. Everything is fixed for
the lifetime of a session.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .domain.constants import ROWS, COLS, STARTING_SIZE, FOOD_REWARD, TICK_MS
from .errors import ConfigError

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    rows: int = ROWS
    cols: int = COLS
    starting_length: int = STARTING_SIZE
    food_reward: int = FOOD_REWARD
    tick_ms: int = TICK_MS
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = "WARNING"

    def validate(self) -> "Settings":
        """Return self, or raise ConfigError if any value is unusable."""
        if self.rows < 1 or self.cols < 1:
            raise ConfigError(f"Grid must be at least 1x1, got {self.rows}x{self.cols}")
        if self.starting_length < 1:
            raise ConfigError(f"Starting length must be positive, got {self.starting_length}")
        if self.starting_length > self.cols:
            raise ConfigError(
                f"Starting length {self.starting_length} does not fit in {self.cols} columns"
            )
        if self.food_reward < 0:
            raise ConfigError(f"Food reward cannot be negative, got {self.food_reward}")
        if self.tick_ms < 1:
            raise ConfigError(f"Tick must be at least 1 ms, got {self.tick_ms}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level {self.log_level!r}")
        return self

    def with_overrides(self, **overrides) -> "Settings":
        """Copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes).validate()

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def _int_env(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from SNAKE_* environment variables.

    Args:
        env: mapping to read instead of os.environ (used by tests)
    """
    env = os.environ if env is None else env
    log_file = (env.get("SNAKE_LOG_FILE") or "").strip() or None
    return Settings(
        rows=_int_env(env, "SNAKE_ROWS", ROWS),
        cols=_int_env(env, "SNAKE_COLS", COLS),
        starting_length=_int_env(env, "SNAKE_STARTING_LENGTH", STARTING_SIZE),
        food_reward=_int_env(env, "SNAKE_FOOD_REWARD", FOOD_REWARD),
        tick_ms=_int_env(env, "SNAKE_TICK_MS", TICK_MS),
        seed=_int_env(env, "SNAKE_SEED", None),
        log_file=log_file,
        log_level=(env.get("SNAKE_LOG_LEVEL") or "WARNING").strip().upper(),
    ).validate()
