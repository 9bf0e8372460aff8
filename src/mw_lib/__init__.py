"""mw-lib - Page-side utility toolkit.

This package provides a service container with implicit dependency
resolution, a synchronous event dispatcher with execution-time ordering,
template rendering, an in-memory leveled log and a wrapper around a page's
location, cookies and element lookup.
"""

__version__ = "0.1.0"

from mw_lib.bootstrap import build_service_container
from mw_lib.configuration import ToolkitConfiguration
from mw_lib.errors import (
    CircularDependencyError,
    ConfigurationError,
    EventError,
    HandlerExecutionError,
    InvalidConfigFileError,
    InvalidConfigFileSchemaError,
    InvalidFactoryError,
    InvalidHandlerError,
    InvalidYamlConfigFileError,
    LoggingError,
    MWError,
    ServiceError,
    UnknownServiceError,
)
from mw_lib.events import EventDispatcher, EventHandler, ExecutionTime
from mw_lib.memory_log import LogEntry, LogLevel, MemoryLog
from mw_lib.services import ServiceContainer, ServiceFactory
from mw_lib.template import Template, clean_placeholder, is_valid_placeholder
from mw_lib.utils import (
    generate_random_number_string,
    get_key_for_element,
    remove_line_breaks,
)
from mw_lib.window import Location, Window, is_valid_query_string

__all__ = [
    # Version
    "__version__",
    # Dependency Injection
    "ServiceContainer",
    "ServiceFactory",
    "build_service_container",
    # Events
    "EventDispatcher",
    "EventHandler",
    "ExecutionTime",
    # Configuration
    "ToolkitConfiguration",
    # Memory log
    "LogEntry",
    "LogLevel",
    "MemoryLog",
    # Templates
    "Template",
    "clean_placeholder",
    "is_valid_placeholder",
    # Window
    "Location",
    "Window",
    "is_valid_query_string",
    # Utilities
    "generate_random_number_string",
    "get_key_for_element",
    "remove_line_breaks",
    # Errors
    "MWError",
    "ServiceError",
    "UnknownServiceError",
    "CircularDependencyError",
    "InvalidFactoryError",
    "EventError",
    "InvalidHandlerError",
    "HandlerExecutionError",
    "ConfigurationError",
    "InvalidConfigFileError",
    "InvalidYamlConfigFileError",
    "InvalidConfigFileSchemaError",
    "LoggingError",
]
