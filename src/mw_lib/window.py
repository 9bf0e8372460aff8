"""Wrapper around a page's location, cookies and element lookup.

The wrapper never holds on to the host location object: the relevant
fields are copied into an immutable Location so callers cannot tamper with
the original through the wrapper. The document is used directly, since
cookie writes must reach it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import unquote

logger = logging.getLogger(__name__)

_QUERY_STRING = re.compile(r"\?(\w+=[^&=]*)(&(\w+=[^&=]*))*", re.ASCII)

COOKIE_EXPIRED = "expires= Thu, 01-Jan-1970 00:00:01 GMT;"


class Document(Protocol):
    """Structural type for the document object the Window wraps."""

    cookie: str

    def get_element_by_id(self, element_id: str) -> Any: ...

    def get_elements_by_class_name(self, class_name: str) -> Sequence[Any]: ...

    def get_elements_by_tag_name(self, tag_name: str) -> Sequence[Any]: ...


def is_valid_query_string(query_string: str) -> bool:
    """Check if a query string has the form ``?x=y&z=1``."""
    return _QUERY_STRING.fullmatch(query_string) is not None


def _clean_string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _read(source: Any, key: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


class DetachedDocument:
    """Stand-in document used when a Window is created without one.

    Cookie writes replace the whole cookie string, and element lookups find
    nothing.
    """

    def __init__(self, cookie: str = "") -> None:
        self.cookie = cookie

    def get_element_by_id(self, element_id: str) -> Any:
        return None

    def get_elements_by_class_name(self, class_name: str) -> Sequence[Any]:
        return []

    def get_elements_by_tag_name(self, tag_name: str) -> Sequence[Any]:
        return []


@dataclass(frozen=True, slots=True)
class Location:
    """Copy of the parts of a page location the toolkit uses."""

    path: str = ""
    query_string: str = ""
    host: str = ""

    @classmethod
    def from_source(cls, location: Any) -> Location:
        """Copy pathname, search and hostname from a mapping or object.

        Missing or non-string fields become empty strings.
        """
        if location is None:
            return cls()
        return cls(
            path=_clean_string(_read(location, "pathname")),
            query_string=_clean_string(_read(location, "search")),
            host=_clean_string(_read(location, "hostname")),
        )


class Window:
    """Access to location, query parameters, cookies and elements of a page."""

    def __init__(self, window: Any = None) -> None:
        """Initialise from an object (or mapping) exposing location and document."""
        self._location = Location()
        self._query_parameters: dict[str, str] | None = None
        self._document: Document = DetachedDocument()
        self.set_location(_read(window, "location") if window is not None else None)
        self.set_document(_read(window, "document") if window is not None else None)

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------
    def set_location(self, location: Any) -> None:
        self._location = Location.from_source(location)
        self._query_parameters = None

    def set_document(self, document: Document | None) -> None:
        self._document = document if document is not None else DetachedDocument()

    @property
    def location(self) -> Location:
        return self._location

    @property
    def document(self) -> Document:
        return self._document

    @property
    def path(self) -> str:
        return self._location.path

    @property
    def host(self) -> str:
        return self._location.host

    def get_query_parameter(self, name: str) -> str | None:
        """Get a query parameter value, or None if it is not set."""
        return self._parse_query_string().get(name)

    def _parse_query_string(self) -> dict[str, str]:
        if self._query_parameters is None:
            parameters: dict[str, str] = {}
            query_string = self._location.query_string
            if is_valid_query_string(query_string):
                for pair in query_string[1:].split("&"):
                    key, _, value = pair.partition("=")
                    parameters[key] = value
            elif query_string:
                logger.debug("Ignoring malformed query string: %s", query_string)
            self._query_parameters = parameters
        return self._query_parameters

    # ------------------------------------------------------------------
    # Cookies
    # ------------------------------------------------------------------
    def get_cookie(self, name: str) -> str:
        """Get the URL-unquoted value of a cookie, or "" if it is not set."""
        if not name:
            return ""
        cookies = _clean_string(getattr(self._document, "cookie", ""))
        for part in cookies.split(";"):
            key, separator, value = part.strip().partition("=")
            if separator and key == name:
                return unquote(value)
        return ""

    def set_cookie(self, name: str, value: str) -> None:
        self._document.cookie = f"{name}={value}"

    def delete_cookie(self, name: str) -> None:
        self._document.cookie = f"{name}=; {COOKIE_EXPIRED}"

    # ------------------------------------------------------------------
    # Element lookup
    # ------------------------------------------------------------------
    def select(self, selector: Any) -> list[Any]:
        """Select elements by ``#id``, ``.class`` or tag name.

        The result is always a list; an id lookup yields a single-item list.
        Non-string or empty selectors yield an empty list.
        """
        if not isinstance(selector, str) or not selector:
            return []
        if selector[0] == "#":
            return [self._document.get_element_by_id(selector[1:])]
        if selector[0] == ".":
            return list(self._document.get_elements_by_class_name(selector[1:]))
        return list(self._document.get_elements_by_tag_name(selector))
