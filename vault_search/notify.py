"""
User-facing notices raised by the search core.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Protocol, TextIO

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Report notices as warning log records."""

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self.logger = logger_ or logger

    def notify(self, message: str) -> None:
        self.logger.warning(message)


class ConsoleNotifier:
    """Print notices to stderr for command-line use."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stderr

    def notify(self, message: str) -> None:
        print(message, file=self.stream)


class RecordingNotifier:
    """Keep notices in memory so a caller can hand them back to the user."""

    def __init__(self, forward: Notifier | None = None) -> None:
        self.messages: List[str] = []
        self.forward = forward

    def notify(self, message: str) -> None:
        self.messages.append(message)
        if self.forward is not None:
            self.forward.notify(message)

    def drain(self) -> List[str]:
        messages, self.messages = self.messages, []
        return messages


__all__ = ["Notifier", "LoggingNotifier", "ConsoleNotifier", "RecordingNotifier"]
