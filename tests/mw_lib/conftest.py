"""Shared fixtures for mw-lib tests."""

from typing import Any

import pytest

from mw_lib.events import EventDispatcher
from mw_lib.services import ServiceContainer


class RecordingHandler:
    """Event handler that records its invocations into a shared call log."""

    def __init__(self, name: str, calls: list[str]) -> None:
        self.name = name
        self.calls = calls
        self.received: list[tuple[Any, Any]] = []

    def __call__(self, context: Any, info: Any) -> None:
        self.calls.append(self.name)
        self.received.append((context, info))


class FakeDocument:
    """Minimal document double with cookie storage and element lookup."""

    def __init__(self, cookie: str = "") -> None:
        self.cookie = cookie
        self.elements_by_id: dict[str, Any] = {}
        self.elements_by_class: dict[str, list[Any]] = {}
        self.elements_by_tag: dict[str, list[Any]] = {}

    def get_element_by_id(self, element_id: str) -> Any:
        return self.elements_by_id.get(element_id)

    def get_elements_by_class_name(self, class_name: str) -> list[Any]:
        return self.elements_by_class.get(class_name, [])

    def get_elements_by_tag_name(self, tag_name: str) -> list[Any]:
        return self.elements_by_tag.get(tag_name, [])


@pytest.fixture
def container() -> ServiceContainer:
    return ServiceContainer()


@pytest.fixture
def dispatcher() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def calls() -> list[str]:
    """Shared invocation log for RecordingHandler instances."""
    return []


@pytest.fixture
def make_handler(calls: list[str]):
    """Create named RecordingHandlers writing to the shared call log."""

    def _make(name: str) -> RecordingHandler:
        return RecordingHandler(name, calls)

    return _make


@pytest.fixture
def document() -> FakeDocument:
    return FakeDocument()
