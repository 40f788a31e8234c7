"""
Notification sinks.

Operations report outcomes as (message, severity) pairs through an
injected sink. Sinks provided here:

- ToastNotifier: keeps a single visible notification that expires after
  a fixed duration and is replaced immediately by a newer one
- LoggingSink: mirrors notifications into the log
- CompositeSink: fans one notification out to several sinks
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class Severity(Enum):
    """Notification styling."""
    SUCCESS = "success"
    ERROR = "error"


class NotificationSink(Protocol):
    """Anything callable with a message and a severity."""

    def __call__(self, message: str, severity: Severity) -> None: ...


@dataclass(frozen=True)
class Notification:
    """A single toast."""
    id: int
    message: str
    severity: Severity
    shown_at: float


class ToastNotifier:
    """
    Holds at most one active notification.

    A new notification replaces the current one immediately. The current
    notification disappears once ``duration`` seconds have passed since it
    was shown, or when dismissed.
    """

    def __init__(
        self,
        duration: float = 3.0,
        clock: Callable[[], float] = time.monotonic,
        on_show: Callable[[Notification], None] | None = None,
    ) -> None:
        self.duration = duration
        self._clock = clock
        self._on_show = on_show
        self._ids = count(1)
        self._current: Notification | None = None

    def __call__(self, message: str, severity: Severity) -> None:
        self._current = Notification(
            id=next(self._ids),
            message=message,
            severity=severity,
            shown_at=self._clock(),
        )
        if self._on_show is not None:
            self._on_show(self._current)

    @property
    def current(self) -> Notification | None:
        """The visible notification, or None once it has expired."""
        if self._current is None:
            return None
        if self._clock() - self._current.shown_at >= self.duration:
            self._current = None
        return self._current

    def dismiss(self) -> None:
        self._current = None


class LoggingSink:
    """Writes notifications to the log (success at INFO, error at WARNING)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def __call__(self, message: str, severity: Severity) -> None:
        if severity is Severity.ERROR:
            self._log.warning("Notification: %s", message)
        else:
            self._log.info("Notification: %s", message)


class CompositeSink:
    """Delivers each notification to every wrapped sink, in order."""

    def __init__(self, *sinks: NotificationSink) -> None:
        self.sinks = list(sinks)

    def __call__(self, message: str, severity: Severity) -> None:
        for sink in self.sinks:
            sink(message, severity)
