"""Service management and dependency injection infrastructure."""

from mw_lib.services.container import ServiceContainer
from mw_lib.services.protocols import ServiceFactory

__all__ = [
    "ServiceContainer",
    "ServiceFactory",
]
