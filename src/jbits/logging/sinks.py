"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from abc import ABC, abstractmethod
from typing import Any

from structlog.typing import EventDict

from .category import Severity
from .formatters import ConsoleFormatter, OSLogFormatter, render_template

# The whole payload is a single private argument.
OS_LOG_TEMPLATE = "%{private}s"

_SYSLOG_SOCKETS = ("/dev/log", "/var/run/syslog")


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks."""

    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        """Emit a log event to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class ConsoleSink(BaseSink):
    """Debug console sink.

    Args:
        stream: Output stream (default: stdout)
    """

    def __init__(self, stream: Any = None):
        self._stream = stream or sys.stdout

    def emit(self, event_dict: EventDict) -> None:
        # One write per line so concurrent callers never interleave inside a line.
        self._stream.write(ConsoleFormatter.format(event_dict))
        self._stream.flush()

    def close(self) -> None:
        pass


# =============================================================================
# OS Logging Facilities
# =============================================================================


class OSLogFacility(ABC):
    """Host logging system that owns buffering, retention and export."""

    @abstractmethod
    def submit(self, template: str, severity: Severity, *args: str) -> None:
        """Hand a templated record to the facility."""
        ...

    def close(self) -> None:
        pass


class _QuietSysLogHandler(logging.handlers.SysLogHandler):
    """Drops records the daemon cannot take instead of printing tracebacks."""

    def handleError(self, record: logging.LogRecord) -> None:
        pass


def _resolve_syslog_address(address: str | None) -> str | tuple[str, int]:
    if address:
        host, sep, port = address.rpartition(":")
        if sep and port.isdigit() and not address.startswith("/"):
            return host, int(port)
        return address
    for path in _SYSLOG_SOCKETS:
        if os.path.exists(path):
            return path
    return "localhost", logging.handlers.SYSLOG_UDP_PORT


class SyslogFacility(OSLogFacility):
    """Local syslog daemon, reached through `SysLogHandler`.

    Records go through a dedicated stdlib logger so they never reach the host
    application's root handlers.
    """

    def __init__(self, subsystem: str = "jbits", address: str | None = None, *, reveal_private: bool = False):
        self._reveal_private = reveal_private
        self._logger = logging.getLogger(f"jbits.oslog.{subsystem}")
        self._logger.propagate = False
        self._logger.setLevel(logging.DEBUG)
        self._handler: logging.handlers.SysLogHandler | None = None
        try:
            resolved = _resolve_syslog_address(address)
            if isinstance(resolved, str) and not os.path.exists(resolved):
                raise FileNotFoundError(resolved)
            handler = _QuietSysLogHandler(address=resolved)
            handler.ident = f"{subsystem}: "
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._handler = handler
            self._logger.handlers = [handler]
            self._available = True
        except Exception:
            self._available = False

    @property
    def available(self) -> bool:
        return self._available

    def submit(self, template: str, severity: Severity, *args: str) -> None:
        if not self._available:
            return
        message = render_template(template, args, reveal_private=self._reveal_private)
        self._logger.log(severity.level, message)

    def close(self) -> None:
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None
        self._available = False


class OSLogSink(BaseSink):
    """Sends each line to an OS logging facility as a private argument."""

    def __init__(self, facility: OSLogFacility):
        self._facility = facility

    @property
    def facility(self) -> OSLogFacility:
        return self._facility

    def emit(self, event_dict: EventDict) -> None:
        severity = event_dict.get("severity", Severity.DEFAULT)
        self._facility.submit(OS_LOG_TEMPLATE, severity, OSLogFormatter.format(event_dict))

    def close(self) -> None:
        self._facility.close()
