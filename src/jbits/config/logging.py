"""
Logging Configuration.
"""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleStream(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


class OSFacility(str, Enum):
    SYSLOG = "syslog"
    NONE = "none"


class LoggingSettings(BaseSettings):
    """
    Console and OS logging sink configuration.
    Prefix: JB_LOG_
    """

    model_config = SettingsConfigDict(
        env_prefix="JB_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    debug_console: Optional[bool] = Field(
        default=None,
        description="Enable the debug console sink (unset: follow environment and __debug__)",
    )
    console_stream: ConsoleStream = Field(default=ConsoleStream.STDOUT, description="Debug console stream")
    subsystem: str = Field(default="jbits", description="Identifier used by the OS logging facility")
    os_facility: OSFacility = Field(default=OSFacility.SYSLOG, description="OS logging backend")
    syslog_address: Optional[str] = Field(
        default=None,
        description="Syslog unix socket path or host:port (unset: autodetect)",
    )
    reveal_private: bool = Field(default=False, description="Show private arguments in OS logs")
    activity_mode: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("JB_LOG_ACTIVITY_MODE", "OS_ACTIVITY_MODE"),
        description="'disable' silences every sink",
    )

    @property
    def activity_disabled(self) -> bool:
        return (self.activity_mode or "").strip().lower() == "disable"
