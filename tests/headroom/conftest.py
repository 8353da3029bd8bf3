from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass
class FakeElement:
    scroll_top: float = 0
    scroll_height: float = 0
    offset_height: float = 0
    client_height: float = 0
    parent_node: object | None = None


@dataclass
class FakeWindow:
    document_element: FakeElement = field(default_factory=FakeElement)
    body: FakeElement = field(default_factory=FakeElement)
    page_y_offset: float = 0
    inner_height: float = 800

    def scroll_to(self, y: float) -> None:
        self.page_y_offset = y


def make_window(*, content_height: float = 5000, viewport_height: float = 800) -> FakeWindow:
    return FakeWindow(
        document_element=FakeElement(
            scroll_height=content_height,
            offset_height=content_height,
            client_height=viewport_height,
        ),
        body=FakeElement(scroll_height=content_height, offset_height=content_height),
        inner_height=viewport_height,
    )


class FakeMeasurer:
    def __init__(self, height: float = 100, *, error: Exception | None = None) -> None:
        self.height = height
        self.error = error
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.height


@pytest.fixture
def window() -> FakeWindow:
    return make_window()


@pytest.fixture
def measurer() -> FakeMeasurer:
    return FakeMeasurer(100)
