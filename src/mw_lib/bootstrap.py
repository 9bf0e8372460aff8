"""Composition root wiring the toolkit's own services."""

from __future__ import annotations

import logging
from typing import Any

from mw_lib.configuration import ToolkitConfiguration
from mw_lib.events import EventDispatcher
from mw_lib.memory_log import MemoryLog
from mw_lib.services import ServiceContainer
from mw_lib.window import Window

logger = logging.getLogger(__name__)

CONFIG = "config"
MEMORY_LOG = "memory_log"
EVENT_DISPATCHER = "event_dispatcher"
WINDOW = "window"


def build_service_container(
    config: ToolkitConfiguration | None = None, window: Any = None
) -> ServiceContainer:
    """Build a ServiceContainer with the toolkit services registered.

    Registers:
    - "config": the ToolkitConfiguration
    - "memory_log": MemoryLog at the configured threshold
    - "event_dispatcher": a shared EventDispatcher
    - "window": Window wrapping the given host window object

    Args:
        config: Toolkit configuration; defaults are used when omitted
        window: Host window object (or mapping) with location and document

    Returns:
        Configured ServiceContainer. Services are created on first get().

    """
    resolved_config = config or ToolkitConfiguration.default()
    container = ServiceContainer()

    container.set(CONFIG, lambda c: resolved_config)
    container.set(MEMORY_LOG, lambda c: MemoryLog(c.get(CONFIG).memory_log_level))
    container.set(EVENT_DISPATCHER, lambda c: EventDispatcher())
    container.set(WINDOW, lambda c: Window(window))

    logger.debug(
        "ServiceContainer configured with services: %s",
        ", ".join(container.service_names),
    )
    return container
