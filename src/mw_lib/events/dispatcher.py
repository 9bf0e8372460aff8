"""Synchronous event dispatcher with execution-time ordering.

Handlers are registered per event name into one of three buckets. A trigger
runs every FIRST handler, then every DEFAULT handler, then every LAST
handler, each bucket in registration order. Dispatch happens inline on the
caller's stack; there is no queueing and no async delivery.

Error policy is fail-fast: the first handler that raises stops the trigger
and the error reaches the caller wrapped in HandlerExecutionError.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from threading import RLock
from typing import Any, Protocol

from mw_lib.errors import HandlerExecutionError, InvalidHandlerError

__all__ = [
    "EventDispatcher",
    "EventHandler",
    "ExecutionTime",
]

logger = logging.getLogger(__name__)


class ExecutionTime(StrEnum):
    """Execution-time bucket of an event handler."""

    FIRST = "first"
    DEFAULT = "default"
    LAST = "last"

    @classmethod
    def coerce(cls, value: object) -> ExecutionTime:
        """Map a registration hint to a bucket.

        Only FIRST and LAST (or their string values) are recognised hints;
        anything else, None included, selects DEFAULT.
        """
        if value == cls.FIRST:
            return cls.FIRST
        if value == cls.LAST:
            return cls.LAST
        return cls.DEFAULT


class EventHandler(Protocol):
    """Protocol for event handlers, called with the trigger's context and info."""

    def __call__(self, context: Any, info: Any, /) -> None: ...


class EventDispatcher:
    """Dispatch named events to handlers in FIRST, DEFAULT, LAST order.

    Thread-safety: registration and the handler snapshot taken at trigger
    time are guarded by a re-entrant lock. Handlers run while the lock is
    NOT held, so a handler may register further handlers; those take effect
    from the next trigger.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._handlers: dict[str, dict[ExecutionTime, list[EventHandler]]] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def on(
        self,
        event_name: str,
        handler: EventHandler,
        execution_time: ExecutionTime | str | None = None,
    ) -> None:
        """Register a handler for an event.

        Args:
            event_name: Name of the event
            handler: Callable invoked with ``(context, info)``
            execution_time: ExecutionTime.FIRST or ExecutionTime.LAST to run
                the handler before or after the default handlers

        Raises:
            InvalidHandlerError: If handler is not callable

        """
        if not callable(handler):
            raise InvalidHandlerError(f'"{handler!r}" is not a valid event handler.')

        bucket = ExecutionTime.coerce(execution_time)
        with self._lock:
            buckets = self._handlers.setdefault(event_name, _empty_buckets())
            buckets[bucket].append(handler)
        logger.debug("Registered %s handler for event '%s'", bucket, event_name)

    def clear(self, event_name: str) -> None:
        """Remove every handler registered for an event."""
        with self._lock:
            if event_name in self._handlers:
                self._handlers[event_name] = _empty_buckets()
        logger.debug("Cleared handlers for event '%s'", event_name)

    def handlers(self, event_name: str) -> tuple[EventHandler, ...]:
        """Get the handlers for an event in invocation order."""
        with self._lock:
            buckets = self._handlers.get(event_name)
            if buckets is None:
                return ()
            return (
                *buckets[ExecutionTime.FIRST],
                *buckets[ExecutionTime.DEFAULT],
                *buckets[ExecutionTime.LAST],
            )

    def has_handlers(self, event_name: str) -> bool:
        return bool(self.handlers(event_name))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def trigger(self, event_name: str, context: Any = None, info: Any = None) -> None:
        """Trigger an event and notify its handlers.

        Args:
            event_name: Name of the event
            context: Object in whose context the event was triggered
            info: Additional event information

        Raises:
            HandlerExecutionError: If a handler raises; remaining handlers
                are not invoked

        """
        handlers = self.handlers(event_name)
        if not handlers:
            return

        logger.debug("Triggering event '%s' (%d handlers)", event_name, len(handlers))
        for handler in handlers:
            try:
                handler(context, info)
            except Exception as e:
                logger.error(
                    "Handler %r failed for event '%s': %s", handler, event_name, e
                )
                raise HandlerExecutionError(event_name, handler, e) from e


def _empty_buckets() -> dict[ExecutionTime, list[EventHandler]]:
    return {time: [] for time in ExecutionTime}
