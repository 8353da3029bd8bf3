"""Scroll parent resolution, offset sampling, and scroller extents."""

from __future__ import annotations

from dataclasses import dataclass

from headroom.api.scroll_source import ParentResolver


@dataclass(frozen=True, slots=True)
class ScrollExtents:
    """Visible (physical) and total (content) heights of a scroller."""

    physical: float
    content: float


def resolve_scroll_parent(host: object, parent: ParentResolver | None = None) -> object:
    """Return the object currently carrying the vertical scroll offset.

    A custom resolver always wins. Otherwise the first document node with a
    non-zero ``scroll_top`` is used, and the host itself is the fallback.
    """
    if parent is not None:
        return parent()
    for candidate in _root_candidates(host):
        if getattr(candidate, "scroll_top", 0):
            return candidate
    return host


def read_scroll_y(scroller: object) -> float:
    """Read the scroll offset, preferring window-style ``page_y_offset``."""
    page_y_offset = getattr(scroller, "page_y_offset", None)
    if page_y_offset is not None:
        return page_y_offset
    return getattr(scroller, "scroll_top", 0) or 0


def viewport_height(host: object, scroller: object) -> float:
    inner_height = getattr(scroller, "inner_height", 0) or getattr(host, "inner_height", 0)
    if inner_height:
        return inner_height
    document_element = getattr(host, "document_element", None)
    body = getattr(host, "body", None)
    return getattr(document_element, "client_height", 0) or getattr(body, "client_height", 0) or 0


def document_height(host: object) -> float:
    heights = [0.0]
    for node in (getattr(host, "body", None), getattr(host, "document_element", None)):
        if node is None:
            continue
        heights.extend(
            (
                getattr(node, "scroll_height", 0) or 0,
                getattr(node, "offset_height", 0) or 0,
                getattr(node, "client_height", 0) or 0,
            )
        )
    return max(heights)


def element_physical_height(element: object) -> float:
    return max(getattr(element, "offset_height", 0) or 0, getattr(element, "client_height", 0) or 0)


def element_content_height(element: object) -> float:
    return max(
        getattr(element, "scroll_height", 0) or 0,
        getattr(element, "offset_height", 0) or 0,
        getattr(element, "client_height", 0) or 0,
    )


def scroller_extents(host: object, scroller: object) -> ScrollExtents:
    """Measure the scroller; document-level scrollers use viewport/document heights."""
    if scroller is host or any(scroller is node for node in _root_candidates(host)):
        return ScrollExtents(physical=viewport_height(host, scroller), content=document_height(host))
    return ScrollExtents(
        physical=element_physical_height(scroller),
        content=element_content_height(scroller),
    )


def is_out_of_bound(scroll_y: float, extents: ScrollExtents) -> bool:
    """Return whether a sample comes from overscroll past the top or bottom."""
    past_top = scroll_y < 0
    past_bottom = scroll_y + extents.physical > extents.content
    return past_top or past_bottom


def _root_candidates(host: object) -> tuple[object, ...]:
    document_element = getattr(host, "document_element", None)
    body = getattr(host, "body", None)
    body_parent = getattr(body, "parent_node", None) if body is not None else None
    return tuple(node for node in (document_element, body, body_parent) if node is not None)
