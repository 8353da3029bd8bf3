"""Public headroom API contracts."""

from headroom.api.events import (
    EventBus,
    HeadroomPinned,
    HeadroomTransition,
    HeadroomUnfixed,
    HeadroomUnpinned,
    Subscription,
    create_event_bus,
)
from headroom.api.logging import HeadroomLoggingConfig
from headroom.api.pinning import (
    INITIAL_VISUAL_INTENT,
    OFFSET_HIDDEN,
    OFFSET_VISIBLE,
    DecisionConfig,
    EvaluationOutput,
    PinAction,
    PinState,
    ScrollDirection,
    VisualIntent,
)
from headroom.api.scroll_source import HeightMeasurer, ParentResolver, ScrollElement, ScrollHost

__all__ = [
    "DecisionConfig",
    "EvaluationOutput",
    "EventBus",
    "HeadroomLoggingConfig",
    "HeadroomPinned",
    "HeadroomTransition",
    "HeadroomUnfixed",
    "HeadroomUnpinned",
    "HeightMeasurer",
    "INITIAL_VISUAL_INTENT",
    "OFFSET_HIDDEN",
    "OFFSET_VISIBLE",
    "ParentResolver",
    "PinAction",
    "PinState",
    "ScrollDirection",
    "ScrollElement",
    "ScrollHost",
    "Subscription",
    "VisualIntent",
    "create_event_bus",
]
