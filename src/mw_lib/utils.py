"""Utility functions for mw-lib."""

import random
import re
from collections.abc import Mapping
from typing import Any, TypeVar

DEFAULT_RANDOM_STRING_LENGTH = 13

_LINE_BREAKS = re.compile(r"[\r\n]")

K = TypeVar("K")


def generate_random_number_string(length: int = DEFAULT_RANDOM_STRING_LENGTH) -> str:
    """Generate a random string of decimal digits.

    Args:
        length: Number of digits; non-positive values fall back to the default

    Returns:
        String of exactly ``length`` digits

    """
    if length <= 0:
        length = DEFAULT_RANDOM_STRING_LENGTH
    return "".join(random.choices("0123456789", k=length))


def get_key_for_element(mapping: Mapping[K, Any], element: Any) -> K | None:
    """Get the first key whose value equals element, or None if absent."""
    for key, value in mapping.items():
        if value == element:
            return key
    return None


def remove_line_breaks(text: str) -> str:
    """Remove all line breaks (\\n, \\r\\n, \\r) from text."""
    return _LINE_BREAKS.sub("", text)
