import io
import os
import socket
from typing import Iterator

import pytest

from jbits.logging import Severity, close_logging, configure_logging
from jbits.logging.sinks import OSLogFacility

FIXED_TIMESTAMP = "12:34:56.789"


class RecordingFacility(OSLogFacility):
    """In-memory stand-in for the OS logging facility."""

    def __init__(self):
        self.records: list[tuple[str, Severity, tuple[str, ...]]] = []
        self.closed = False

    def submit(self, template: str, severity: Severity, *args: str) -> None:
        self.records.append((template, severity, args))

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def isolate_logging(monkeypatch):
    """
    Clears JB_* and OS_ACTIVITY_MODE from the environment and closes sinks after each test,
    so no test depends on the host configuration or on the previous test's sinks.
    """
    for name in list(os.environ):
        if name.startswith("JB_") or name == "OS_ACTIVITY_MODE":
            monkeypatch.delenv(name, raising=False)
    yield
    close_logging()


@pytest.fixture
def facility() -> RecordingFacility:
    return RecordingFacility()


@pytest.fixture
def udp_listener() -> Iterator[socket.socket]:
    """A local UDP socket standing in for the syslog daemon."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


@pytest.fixture
def console() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def fixed_timestamp(monkeypatch) -> str:
    monkeypatch.setattr("jbits.logging.core.timestamp", lambda: FIXED_TIMESTAMP)
    return FIXED_TIMESTAMP


@pytest.fixture
def configured(console, facility):
    """Both routes live, writing to an in-memory console and facility."""
    configure_logging(
        debug_console=True,
        console_stream=console,
        os_facility=facility,
        activity_disabled=False,
    )
    return console, facility
