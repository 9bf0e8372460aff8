"""Synchronous event dispatching."""

from mw_lib.events.dispatcher import EventDispatcher, EventHandler, ExecutionTime

__all__ = [
    "EventDispatcher",
    "EventHandler",
    "ExecutionTime",
]
