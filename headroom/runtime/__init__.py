"""Header pinning runtime implementations."""

from headroom.runtime.config import HeadroomSettings, load_headroom_settings
from headroom.runtime.controller import HeadroomController, create_headroom_controller
from headroom.runtime.decision import decide
from headroom.runtime.events import RuntimeEventBus
from headroom.runtime.gate import InFlightGate
from headroom.runtime.logging import get_headroom_logger
from headroom.runtime.scheduler import DeferredScheduler
from headroom.runtime.scroll_metrics import ScrollExtents, is_out_of_bound, scroller_extents

__all__ = [
    "DeferredScheduler",
    "HeadroomController",
    "HeadroomSettings",
    "InFlightGate",
    "RuntimeEventBus",
    "ScrollExtents",
    "create_headroom_controller",
    "decide",
    "get_headroom_logger",
    "is_out_of_bound",
    "load_headroom_settings",
    "scroller_extents",
]
