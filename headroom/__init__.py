"""Scroll-reactive header pinning engine."""

from headroom.api.pinning import PinAction, PinState, VisualIntent
from headroom.runtime.config import HeadroomSettings
from headroom.runtime.controller import HeadroomController, create_headroom_controller
from headroom.runtime.decision import decide

__all__ = [
    "HeadroomController",
    "HeadroomSettings",
    "PinAction",
    "PinState",
    "VisualIntent",
    "create_headroom_controller",
    "decide",
]
