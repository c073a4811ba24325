"""
Core logging configuration and the public emission functions.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable, Optional

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from .category import Category
from .formatters import join_messages, timestamp
from .sinks import BaseSink, ConsoleSink, OSLogFacility, OSLogSink, SyslogFacility

# =============================================================================
# Global State
# =============================================================================

_console_sinks: list[BaseSink] = []
_os_sinks: list[BaseSink] = []
_console_logger: Any = None
_os_logger: Any = None
_configured = False
# Serialises configuration; emission itself never takes it once configured.
_lock = threading.RLock()


# =============================================================================
# Structlog Processors
# =============================================================================


def resolve_category(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Derive the line prefix and facility severity from the category."""
    category = Category(event_dict.get("category", Category.DEFAULT))
    prefix = event_dict.get("prefix")
    event_dict["category"] = category
    event_dict["prefix"] = category.emoji if prefix is None else prefix
    event_dict["severity"] = category.severity
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the HH:MM:SS.mmm console timestamp."""
    event_dict["timestamp"] = timestamp()
    return event_dict


def join_event_messages(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["message"] = join_messages(event_dict.pop("messages", ()))
    return event_dict


def sink_renderer(sinks: list[BaseSink]) -> Processor:
    """Build a final processor rendering to `sinks`. Returns empty to suppress default output."""

    def _render(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        for sink in sinks:
            try:
                sink.emit(event_dict)
            except Exception:
                pass  # Fail silently to avoid breaking the application
        return ""

    return _render


# =============================================================================
# Configuration Logic
# =============================================================================


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


def _build_logger(processors: list[Processor]) -> Any:
    return structlog.wrap_logger(
        structlog.PrintLogger(file=_NOP_FILE),
        processors=processors,
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def _close_sinks(sinks: list[BaseSink]) -> None:
    for sink in sinks:
        try:
            sink.close()
        except Exception:
            pass  # One failing sink must not keep the others open


def configure_logging(
    *,
    debug_console: Optional[bool] = None,
    console_stream: Any = None,
    subsystem: Optional[str] = None,
    os_facility: Optional[OSLogFacility | str] = None,
    syslog_address: Optional[str] = None,
    reveal_private: Optional[bool] = None,
    activity_disabled: Optional[bool] = None,
) -> None:
    """
    Configure the console and OS logging sinks.

    Arguments left as None fall back to `jbits.config.settings`.

    Args:
        debug_console: Enable `emit_debug_console`. When off its call path becomes a no-op.
        console_stream: Stream for the debug console (a stream object, "stdout" or "stderr")
        subsystem: Identifier the OS facility logs under
        os_facility: An `OSLogFacility` instance, or "syslog" / "none"
        syslog_address: Unix socket path or host:port for the syslog facility
        reveal_private: Show private arguments in the OS facility output
        activity_disabled: Silence both sinks, as when OS_ACTIVITY_MODE=disable
    """
    global _console_sinks, _os_sinks, _console_logger, _os_logger, _configured

    from jbits.config import settings

    log_settings = settings.logging
    if debug_console is None:
        debug_console = settings.debug_console_enabled
    if console_stream is None:
        console_stream = log_settings.console_stream.value
    if subsystem is None:
        subsystem = log_settings.subsystem
    if os_facility is None:
        os_facility = log_settings.os_facility.value
    if syslog_address is None:
        syslog_address = log_settings.syslog_address
    if reveal_private is None:
        reveal_private = log_settings.reveal_private
    if activity_disabled is None:
        activity_disabled = log_settings.activity_disabled

    with _lock:
        # 1. Create requested sinks
        console_sinks: list[BaseSink] = []
        os_sinks: list[BaseSink] = []
        if not activity_disabled:
            if debug_console:
                if isinstance(console_stream, str):
                    console_stream = sys.stderr if console_stream == "stderr" else sys.stdout
                console_sinks.append(ConsoleSink(stream=console_stream))

            if isinstance(os_facility, OSLogFacility):
                os_sinks.append(OSLogSink(os_facility))
            elif os_facility == "syslog":
                facility = SyslogFacility(subsystem, syslog_address, reveal_private=reveal_private)
                os_sinks.append(OSLogSink(facility))

        # 2. Build one processor chain per route
        console_logger = _build_logger(
            [resolve_category, add_timestamp, join_event_messages, sink_renderer(console_sinks)]
        )
        os_logger = _build_logger([resolve_category, join_event_messages, sink_renderer(os_sinks)])

        # 3. Swap in the new routes, then close the old sinks
        previous = _console_sinks + _os_sinks
        _console_sinks, _os_sinks = console_sinks, os_sinks
        _console_logger, _os_logger = console_logger, os_logger
        _set_debug_console(_emit_console if console_sinks else _noop)
        _configured = True
        _close_sinks(previous)


def close_logging() -> None:
    """Close every sink. The next emission reconfigures from settings."""
    global _console_sinks, _os_sinks, _configured
    with _lock:
        previous = _console_sinks + _os_sinks
        _console_sinks, _os_sinks = [], []
        _set_debug_console(_noop)
        _configured = False
        _close_sinks(previous)


def is_debug_console_enabled() -> bool:
    _ensure_configured()
    return _debug_console is not _noop


def _ensure_configured() -> None:
    if _configured:
        return
    with _lock:
        if not _configured:
            configure_logging()


# =============================================================================
# Emission
# =============================================================================


def _noop(messages: tuple[str, ...], category: Category, prefix: Optional[str], terminator: str) -> None:
    pass


def _emit_console(messages: tuple[str, ...], category: Category, prefix: Optional[str], terminator: str) -> None:
    _console_logger.msg(messages=messages, category=category, prefix=prefix, terminator=terminator)


_debug_console: Callable[[tuple[str, ...], Category, Optional[str], str], None] = _noop


def _set_debug_console(func: Callable[[tuple[str, ...], Category, Optional[str], str], None]) -> None:
    global _debug_console
    _debug_console = func


def emit_debug_console(
    *messages: str,
    category: Category,
    prefix: Optional[str] = None,
    terminator: str = "\n",
) -> None:
    """
    Temporarily log events to the debug console.

    The messages are written on one line, each preceded by a space, after the
    category emoji (or `prefix`) and a timestamp. Nothing is written, or even
    formatted, unless the debug console was enabled at configuration time.

    Args:
        messages: Strings to print.
        category: Groups the line and picks its emoji.
        prefix: Replaces the category emoji.
        terminator: Appended to the line. By default this is "\\n".
    """
    _ensure_configured()
    _debug_console(messages, category, prefix, terminator)


def emit_os_log(
    *messages: str,
    category: Category,
    prefix: Optional[str] = None,
    terminator: str = "\n",
) -> None:
    """
    Send one or more messages to the OS logging facility.

    The facility timestamps, buffers and exports records itself. The payload
    is submitted as a private argument, so it only appears in plain text where
    private data has been revealed.

    Nothing is logged if activity mode is disabled for the process
    (`OS_ACTIVITY_MODE=disable`).

    Args:
        messages: Strings joined into one record.
        category: Groups the record and picks its emoji and severity.
        prefix: Replaces the category emoji.
        terminator: Appended to the record. By default this is "\\n".
    """
    _ensure_configured()
    _os_logger.msg(messages=messages, category=category, prefix=prefix, terminator=terminator)


class Log:
    """Namespace mirroring the short call style: `Log.da(...)`, `Log.os(...)`."""

    Category = Category
    da = staticmethod(emit_debug_console)
    os = staticmethod(emit_os_log)
    timestamp = staticmethod(timestamp)
