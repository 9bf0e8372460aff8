"""Service protocols for dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from mw_lib.services.container import ServiceContainer


T = TypeVar("T")


class ServiceFactory(Protocol[T]):
    """Protocol for factories registered with the ServiceContainer.

    A factory is any callable taking the container and returning the service
    instance. Factories resolve their own dependencies by calling back into
    the container they are given:

    Example:
        ```python
        container.set("http_client", lambda c: HttpClient())
        container.set(
            "api",
            lambda c: ApiClient(client=c.get("http_client")),
        )
        ```

    The container invokes a factory at most once per name; the returned
    instance is cached for the container's lifetime.

    """

    def __call__(self, container: ServiceContainer, /) -> T:
        """Create the service instance.

        Args:
            container: Container to resolve further dependencies from

        Returns:
            Service instance

        """
        ...
