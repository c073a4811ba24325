from jbits.logging import Category, Log, emit_debug_console, emit_os_log, timestamp

__all__ = ["Category", "Log", "emit_debug_console", "emit_os_log", "timestamp"]
