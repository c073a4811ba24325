"""
Log categories and the OS facility severities they map to.
"""

from __future__ import annotations

import logging
from enum import Enum


class Severity(str, Enum):
    """Level tag understood by the OS logging facility."""

    DEFAULT = "default"
    INFO = "info"
    DEBUG = "debug"
    ERROR = "error"
    FAULT = "fault"

    @property
    def level(self) -> int:
        """Equivalent stdlib logging level."""
        return _SEVERITY_LEVELS[self]


class Category(str, Enum):
    """
    Classification of a log line.

    The category picks the emoji that starts the line and the severity the
    OS logging facility files it under.
    """

    # General, usually temporary output tracking execution flow.
    DEFAULT = "default"
    # State information worth keeping once a feature is done.
    INFO = "info"
    # Self-contained expectations during development, e.g. "Expecting 5 == 4".
    DEBUG = "debug"
    # Unintended behaviour caused by bugs; code that should not have been reached.
    FAULT = "fault"
    # A failure to fulfil requirements.
    FAILURE = "failure"

    @property
    def emoji(self) -> str:
        """Marker placed at the beginning of a log line."""
        return _EMOJI[self]

    @property
    def severity(self) -> Severity:
        """Severity used when the line goes to the OS logging facility.

        Only some facility levels show up in log viewers, so the informal
        categories all collapse onto `Severity.DEFAULT`.
        """
        return _SEVERITY[self]


_EMOJI: dict[Category, str] = {
    Category.DEFAULT: "📎",
    Category.INFO: "ℹ️",
    Category.DEBUG: "🧑🏼‍💻",
    Category.FAULT: "⁉️",
    Category.FAILURE: "❌",
}

_SEVERITY: dict[Category, Severity] = {
    Category.DEFAULT: Severity.DEFAULT,
    Category.INFO: Severity.DEFAULT,
    Category.DEBUG: Severity.DEFAULT,
    Category.FAULT: Severity.FAULT,
    Category.FAILURE: Severity.ERROR,
}

_SEVERITY_LEVELS: dict[Severity, int] = {
    Severity.DEFAULT: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
    Severity.ERROR: logging.ERROR,
    Severity.FAULT: logging.CRITICAL,
}
