"""
Emoji-prefixed logging helpers.

Two routes, each a structlog processor chain ending in its sinks:
- debug console: timestamped lines on stdout, present only in debug configurations
- OS log: private, severity-tagged records for the host logging facility (syslog)

Usage:
    from jbits.logging import Category, emit_debug_console, emit_os_log

    emit_debug_console("Expecting", "5 == 4", category=Category.DEBUG)
    emit_os_log("Upload failed", category=Category.FAILURE)
"""

from .category import Category, Severity
from .core import (
    Log,
    close_logging,
    configure_logging,
    emit_debug_console,
    emit_os_log,
    is_debug_console_enabled,
)
from .formatters import timestamp
from .sinks import BaseSink, ConsoleSink, OSLogFacility, OSLogSink, SyslogFacility

__all__ = [
    "Category",
    "Severity",
    "Log",
    "configure_logging",
    "close_logging",
    "emit_debug_console",
    "emit_os_log",
    "is_debug_console_enabled",
    "timestamp",
    "BaseSink",
    "ConsoleSink",
    "OSLogFacility",
    "OSLogSink",
    "SyslogFacility",
]
