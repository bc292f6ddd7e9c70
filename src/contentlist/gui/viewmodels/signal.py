"""Observer primitives used by the controller to notify views.

``Signal`` mirrors the Qt signal vocabulary (connect / disconnect / emit)
without requiring a Qt event loop, so the controller stays importable and
testable headless.  ``ObservableProperty`` wraps one bindable value.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Tuple

_logger = logging.getLogger(__name__)


class Signal:
    """Ordered set of callbacks.

    The handler tuple is replaced rather than mutated, so an emission always
    runs against the handlers connected when it started.  A failing handler
    is logged and the remaining ones still run.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name or "<anonymous>"
        self._handlers: Tuple[Callable, ...] = ()

    def connect(self, handler: Callable) -> None:
        if handler not in self._handlers:
            self._handlers = self._handlers + (handler,)

    def disconnect(self, handler: Callable) -> None:
        if handler not in self._handlers:
            raise ValueError(f"{handler!r} is not connected to {self.name}")
        self._handlers = tuple(h for h in self._handlers if h != handler)

    def emit(self, *args: Any) -> None:
        for handler in self._handlers:
            try:
                handler(*args)
            except Exception as exc:
                _logger.error("Handler %r for signal %s failed: %s", handler, self.name, exc)

    @property
    def handler_count(self) -> int:
        return len(self._handlers)


class ObservableProperty:
    """Bindable value; emits ``changed(new_value, old_value)`` on change."""

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal("changed")

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value == new_value:
            return
        old_value, self._value = self._value, new_value
        self.changed.emit(new_value, old_value)
