"""Toolkit configuration.

ToolkitConfiguration holds the settings the bootstrap uses when wiring the
toolkit's own services. It can be built from a properties dictionary or a
YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mw_lib.errors import (
    InvalidConfigFileError,
    InvalidConfigFileSchemaError,
    InvalidYamlConfigFileError,
)
from mw_lib.memory_log import LogLevel


class ToolkitConfiguration(BaseModel):
    """Configuration for mw-lib services.

    Example:
        ```python
        config = ToolkitConfiguration.from_properties({"log_level": "debug"})
        config.log_level  # "DEBUG"
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    log_level: str = Field(
        default=LogLevel.WARNING.name,
        description="Threshold level name for the in-memory log",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError(f"log_level must be a level name, got {type(v).__name__}")
        name = v.upper()
        if name not in LogLevel.__members__:
            raise ValueError(
                f"Unknown log level {v!r}. Expected one of: "
                f"{', '.join(LogLevel.__members__)}"
            )
        return name

    @property
    def memory_log_level(self) -> LogLevel:
        return LogLevel[self.log_level]

    @classmethod
    def default(cls) -> Self:
        return cls()

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties dictionary with validation.

        Raises:
            ValidationError: If properties are invalid

        """
        return cls.model_validate(properties)

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a YAML file.

        An empty file yields the default configuration.

        Raises:
            InvalidYamlConfigFileError: If the file is not valid YAML
            InvalidConfigFileSchemaError: If the content does not validate
            InvalidConfigFileError: If the file cannot be read

        """
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidYamlConfigFileError(
                f"Error loading YAML config file {path}: {e}"
            ) from e
        except OSError as e:
            raise InvalidConfigFileError(
                f"Error loading config file {path}: {e}"
            ) from e

        if data is None:
            return cls.default()

        if not isinstance(data, dict):
            raise InvalidConfigFileSchemaError(
                f"Config file {path} must be a mapping, but got {type(data)}"
            )

        try:
            return cls.from_properties(data)
        except ValidationError as e:
            raise InvalidConfigFileSchemaError(
                f"Error validating config file {path}: {e}"
            ) from e
