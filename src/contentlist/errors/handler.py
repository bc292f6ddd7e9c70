"""Routing of recoverable failures raised by caller-supplied code.

Filter predicates and item-action handlers belong to the application; when
they raise, the controller keeps running and hands the exception to an
:class:`ErrorHandler`, which logs it, republishes it on the event bus and,
for serious failures, notifies a UI callback.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from contentlist.events.bus import Event, EventBus


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}

_UI_SEVERITIES = frozenset({ErrorSeverity.ERROR, ErrorSeverity.CRITICAL})


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


class ErrorHandler:
    def __init__(self, logger: Optional[logging.Logger] = None, event_bus: Optional[EventBus] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._events = event_bus
        self._ui_callback: Optional[Callable[[str, ErrorSeverity], None]] = None

    def register_ui_callback(self, callback: Optional[Callable[[str, ErrorSeverity], None]]):
        self._ui_callback = callback

    def handle(
        self,
        error: Exception,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: Optional[dict] = None,
    ) -> ErrorOccurredEvent:
        event = ErrorOccurredEvent(error=error, severity=severity, context=dict(context or {}))
        self._logger.log(
            severity.log_level,
            "%s: %s",
            type(error).__name__,
            error,
            extra={"context": event.context},
            exc_info=severity in _UI_SEVERITIES,
        )
        if self._events is not None:
            self._events.publish(event)
        if self._ui_callback is not None and severity in _UI_SEVERITIES:
            self._ui_callback(str(error), severity)
        return event
