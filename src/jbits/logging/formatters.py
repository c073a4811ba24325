"""
Line formatters, timestamps and privacy-aware template rendering.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable

from structlog.typing import EventDict

PRIVATE_PLACEHOLDER = "<private>"

# %s is private by default, like dynamic strings handed to an OS log.
_PLACEHOLDER_RE = re.compile(r"%\{(public|private)\}s|%s")


def timestamp() -> str:
    """Local wall-clock time as HH:MM:SS.mmm."""
    now = datetime.now()
    # strftime only offers microseconds; build the fields explicitly to stay locale independent.
    return f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}.{now.microsecond // 1000:03d}"


def join_messages(messages: Iterable[str]) -> str:
    """Concatenate messages, each preceded by a single space."""
    return "".join(f" {message}" for message in messages)


def render_template(template: str, args: tuple[str, ...], *, reveal_private: bool = False) -> str:
    """Substitute `args` into an OS log template.

    `%{public}s` always shows its argument; `%{private}s` and plain `%s` show
    `<private>` unless `reveal_private` is set. Placeholders without a matching
    argument render empty.
    """
    remaining = iter(args)

    def _substitute(match: re.Match[str]) -> str:
        value = next(remaining, "")
        if match.group(1) == "public" or reveal_private:
            return str(value)
        return PRIVATE_PLACEHOLDER

    return _PLACEHOLDER_RE.sub(_substitute, template)


class ConsoleFormatter:
    """Renders debug console lines: `{prefix} {timestamp} –{messages}{terminator}`."""

    SEPARATOR = " –"

    @classmethod
    def format(cls, event_dict: EventDict) -> str:
        return "".join(
            [
                str(event_dict["prefix"]),
                " ",
                str(event_dict.get("timestamp") or timestamp()),
                cls.SEPARATOR,
                event_dict.get("message", ""),
                event_dict.get("terminator", "\n"),
            ]
        )


class OSLogFormatter:
    """Renders OS log payloads: `{prefix} -{messages}{terminator}`.

    No timestamp: the facility stamps records itself.
    """

    SEPARATOR = " -"

    @classmethod
    def format(cls, event_dict: EventDict) -> str:
        return "".join(
            [
                str(event_dict["prefix"]),
                cls.SEPARATOR,
                event_dict.get("message", ""),
                event_dict.get("terminator", "\n"),
            ]
        )
