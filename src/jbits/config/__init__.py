"""
JBits Configuration Module.

Implements the Nested Settings Pattern for orthogonal configuration domains.
Each sub-module represents an independent concern with its own environment variable prefix.

Multi-Environment Support:
    Set `JB_ENV` to one of: development, testing, staging, production
    The system will load .env files in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from jbits.config import settings

    settings.environment.debug  # True outside production
    settings.logging.subsystem  # "jbits"
"""

from functools import cached_property
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import EnvironmentSettings
from .logging import ConsoleStream, LoggingSettings, OSFacility


def _get_env_files(env: str | None = None) -> tuple[str, ...]:
    """
    Determine which .env files to load for `env` (default: JB_ENV).

    Later files override earlier ones.
    """
    env = env or os.getenv("JB_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class Settings(BaseSettings):
    """
    Composite settings aggregating all configuration domains.

    Environment-aware loading:
        Settings are loaded from multiple .env files based on JB_ENV.
        See module docstring for file resolution order.
    """

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment detection (loaded first to determine other configs)
    @cached_property
    def environment(self) -> EnvironmentSettings:
        return EnvironmentSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings(_env_file=_get_env_files(self.environment.env))

    @property
    def debug_console_enabled(self) -> bool:
        """Whether `emit_debug_console` writes anything.

        An explicit `JB_LOG_DEBUG_CONSOLE` wins; otherwise the console sink is live only in
        debug environments of an interpreter not started with `-O`.
        """
        if self.logging.debug_console is not None:
            return self.logging.debug_console
        return __debug__ and self.environment.debug


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "EnvironmentSettings",
    "LoggingSettings",
    "ConsoleStream",
    "OSFacility",
]
