"""Service container for dependency injection."""

import logging
from collections.abc import Iterator
from threading import RLock
from typing import Any

from mw_lib.errors import (
    CircularDependencyError,
    InvalidFactoryError,
    UnknownServiceError,
)
from mw_lib.services.protocols import ServiceFactory

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Dependency injection container for named singleton services.

    Services are created lazily by their factory on first ``get`` and cached
    for the lifetime of the container. Factories receive the container and
    may ``get`` their own dependencies from it.

    Thread-safety: a re-entrant lock is held for the whole check-then-create
    sequence, so concurrent first access creates a service exactly once. The
    resolving thread may still call ``get`` recursively from inside a factory.

    The lock stays held while a factory runs, so a slow factory delays every
    other lookup on the container. A factory must not wait on another thread
    that calls ``get`` on the same container: that thread blocks on the lock
    and the two deadlock.
    """

    def __init__(self) -> None:
        """Initialise an empty service container."""
        # Values are heterogeneous; type safety is left to the caller of get()
        self._factories: dict[str, ServiceFactory[Any]] = {}
        self._cache: dict[str, Any] = {}
        self._resolving: list[str] = []
        self._lock = RLock()
        logger.debug("ServiceContainer initialized")

    def set(self, name: str, factory: ServiceFactory[Any]) -> None:
        """Register (or replace) the factory for a service.

        Args:
            name: Service name
            factory: Callable taking the container and returning the service

        Raises:
            InvalidFactoryError: If factory is not callable

        """
        if not callable(factory):
            raise InvalidFactoryError(
                f"Factory for service '{name}' is not callable: {factory!r}"
            )
        with self._lock:
            self._factories[name] = factory
        logger.debug("Registered service factory: %s", name)

    def get(self, name: str) -> Any:
        """Get a service instance, creating it on first access.

        Args:
            name: Service name

        Returns:
            The cached service instance

        Raises:
            UnknownServiceError: If no factory is registered for name
            CircularDependencyError: If name is requested while it is being created

        """
        with self._lock:
            if name in self._cache:
                logger.debug("Returning cached service: %s", name)
                return self._cache[name]

            factory = self._factories.get(name)
            if factory is None:
                logger.error("Requested unknown service: %s", name)
                raise UnknownServiceError(name)

            if name in self._resolving:
                chain = [*self._resolving[self._resolving.index(name) :], name]
                logger.error("Circular dependency: %s", " -> ".join(chain))
                raise CircularDependencyError(chain)

            logger.debug("Creating service: %s", name)
            self._resolving.append(name)
            try:
                instance = factory(self)
            finally:
                self._resolving.pop()

            self._cache[name] = instance
            logger.debug("Service created and cached: %s", name)
            return instance

    def has(self, name: str) -> bool:
        """Check whether a factory is registered for name."""
        with self._lock:
            return name in self._factories

    @property
    def service_names(self) -> tuple[str, ...]:
        """Registered service names in registration order."""
        with self._lock:
            return tuple(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.service_names)
