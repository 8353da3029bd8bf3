from __future__ import annotations

from headroom.runtime.scroll_metrics import (
    ScrollExtents,
    document_height,
    is_out_of_bound,
    read_scroll_y,
    resolve_scroll_parent,
    scroller_extents,
    viewport_height,
)
from tests.headroom.conftest import FakeElement, FakeWindow, make_window


def test_resolve_scroll_parent_prefers_custom_resolver(window) -> None:
    panel = FakeElement(scroll_top=10)
    assert resolve_scroll_parent(window, lambda: panel) is panel


def test_resolve_scroll_parent_fallback_chain() -> None:
    html = FakeElement()
    body = FakeElement(parent_node=html)
    window = FakeWindow(document_element=html, body=body)

    assert resolve_scroll_parent(window) is window

    body.scroll_top = 120
    assert resolve_scroll_parent(window) is body

    html.scroll_top = 40
    assert resolve_scroll_parent(window) is html


def test_resolve_scroll_parent_uses_body_parent_node() -> None:
    outer = FakeElement(scroll_top=75)
    window = FakeWindow(document_element=FakeElement(), body=FakeElement(parent_node=outer))
    assert resolve_scroll_parent(window) is outer


def test_read_scroll_y_prefers_page_offset_then_scroll_top() -> None:
    window = FakeWindow(page_y_offset=0)
    assert read_scroll_y(window) == 0
    window.page_y_offset = 330
    assert read_scroll_y(window) == 330
    assert read_scroll_y(FakeElement(scroll_top=42)) == 42
    assert read_scroll_y(object()) == 0


def test_viewport_height_falls_back_to_client_heights() -> None:
    window = FakeWindow(
        document_element=FakeElement(client_height=700),
        body=FakeElement(client_height=650),
        inner_height=0,
    )
    assert viewport_height(window, window) == 700
    window.document_element.client_height = 0
    assert viewport_height(window, window) == 650
    window.inner_height = 900
    assert viewport_height(window, window) == 900


def test_document_height_takes_max_of_body_and_root_metrics() -> None:
    window = FakeWindow(
        document_element=FakeElement(scroll_height=1200, offset_height=1100, client_height=800),
        body=FakeElement(scroll_height=1300, offset_height=900),
    )
    assert document_height(window) == 1300


def test_scroller_extents_for_document_and_element() -> None:
    window = make_window(content_height=3000, viewport_height=600)
    panel = FakeElement(scroll_height=2000, offset_height=400, client_height=380)

    assert scroller_extents(window, window) == ScrollExtents(physical=600, content=3000)
    assert scroller_extents(window, window.body) == ScrollExtents(physical=600, content=3000)
    assert scroller_extents(window, panel) == ScrollExtents(physical=400, content=2000)


def test_is_out_of_bound_detects_overscroll() -> None:
    extents = ScrollExtents(physical=600, content=3000)
    assert is_out_of_bound(-1, extents)
    assert is_out_of_bound(2401, extents)
    assert not is_out_of_bound(0, extents)
    assert not is_out_of_bound(2400, extents)
