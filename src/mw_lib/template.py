"""Merge placeholders into template strings.

Placeholders are written ``#{name}``. Only strings and numbers are merged;
any other value, or a missing placeholder, renders as an empty string.
"""

import re
from collections.abc import Mapping
from typing import Any

_PLACEHOLDER = re.compile(r"#\{([^{}]*)\}")


def is_valid_placeholder(value: Any) -> bool:
    """Check if a placeholder value is a string or a number."""
    if isinstance(value, bool):
        return False
    return isinstance(value, str | int | float)


def clean_placeholder(value: Any) -> str:
    """Convert a placeholder value to a string, or "" if it is not valid."""
    if not is_valid_placeholder(value):
        return ""
    return str(value)


class Template:
    """Template string with ``#{name}`` placeholders."""

    def __init__(self, template: str | None = None) -> None:
        self._template = template or ""

    @property
    def template(self) -> str:
        return self._template

    def render(self, placeholders: Mapping[str, Any] | None = None) -> str:
        """Merge placeholders into the template string.

        Args:
            placeholders: Placeholder values by name

        Returns:
            The rendered string

        """
        values = placeholders or {}
        return _PLACEHOLDER.sub(
            lambda match: clean_placeholder(values.get(match.group(1))),
            self._template,
        )

    def __repr__(self) -> str:
        return f"Template({self._template!r})"
