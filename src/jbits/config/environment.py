"""
Environment Configuration.

The environment is determined by the `JB_ENV` environment variable.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


Environment = Literal["development", "testing", "staging", "production"]


class EnvironmentSettings(BaseSettings):
    """
    Environment detection.

    `JB_ENV` may come from the process environment, `.env` or `.env.local`; the
    environment-specific files are chosen from it.
    """

    model_config = SettingsConfigDict(
        env_prefix="JB_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Environment = Field(
        default="development",
        description="Current environment (development, testing, staging, production)",
    )

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def debug(self) -> bool:
        """Debug mode is enabled in non-production environments by default."""
        return not self.is_production
