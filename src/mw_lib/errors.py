"""Error classes for mw-lib.

This module provides:
- MWError: Base exception class for all toolkit errors
- ServiceError, UnknownServiceError, CircularDependencyError, InvalidFactoryError: Container exceptions
- EventError, InvalidHandlerError, HandlerExecutionError: Dispatcher exceptions
- ConfigurationError and its file-loading subclasses: Configuration exceptions
- LoggingError: Logging setup exception
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class MWError(Exception):
    """Base exception for all mw-lib errors."""

    pass


# Service container errors


class ServiceError(MWError):
    """Base exception for service container errors."""

    pass


class UnknownServiceError(ServiceError, KeyError):
    """Raised when a service is requested that was never registered."""

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name
        super().__init__(f"No factory registered for service '{service_name}'")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class CircularDependencyError(ServiceError):
    """Raised when a factory requests a service that is still being constructed."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(
            "Circular dependency detected while resolving services: "
            + " -> ".join(self.chain)
        )


class InvalidFactoryError(ServiceError, TypeError):
    """Raised when a non-callable factory is registered."""

    pass


# Event dispatcher errors


class EventError(MWError):
    """Base exception for event dispatcher errors."""

    pass


class InvalidHandlerError(EventError, TypeError):
    """Raised when a non-callable event handler is registered."""

    pass


class HandlerExecutionError(EventError):
    """Raised when an event handler fails during trigger.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, event_name: str, handler: Any, error: BaseException) -> None:
        self.event_name = event_name
        self.handler = handler
        handler_name = getattr(handler, "__qualname__", repr(handler))
        super().__init__(
            f"Handler {handler_name} failed for event '{event_name}': {error}"
        )


# Configuration errors


class ConfigurationError(MWError, ValueError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigFileError(ConfigurationError):
    """Raised when the config file is invalid."""


class InvalidYamlConfigFileError(InvalidConfigFileError):
    """Raised when the config file is invalid YAML."""


class InvalidConfigFileSchemaError(InvalidConfigFileError):
    """Raised when the config file is invalid schema."""


class LoggingError(MWError):
    """Exception raised for logging configuration errors."""

    pass
