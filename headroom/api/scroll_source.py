"""Scroll source and height measurement contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

ParentResolver = Callable[[], object]
HeightMeasurer = Callable[[], float]


@runtime_checkable
class ScrollElement(Protocol):
    """Scroll-bearing element exposing DOM-style box metrics."""

    scroll_top: float
    scroll_height: float
    offset_height: float
    client_height: float


@runtime_checkable
class ScrollHost(Protocol):
    """Root scroll context: the document plus its window-level metrics.

    Window-style hosts additionally expose ``page_y_offset`` and
    ``inner_height``; both are read with ``getattr`` so plain documents work.
    """

    document_element: ScrollElement | None
    body: ScrollElement | None
