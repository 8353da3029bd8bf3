"""Public pin-state, action, and evaluation contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

OFFSET_VISIBLE = "0"
OFFSET_HIDDEN = "-100%"


class PinState(Enum):
    """Positioning mode of the header element."""

    UNFIXED = "unfixed"
    PINNED = "pinned"
    UNPINNED = "unpinned"


class PinAction(Enum):
    """Transition requested by one decision evaluation."""

    NONE = "none"
    PIN = "pin"
    UNPIN = "unpin"
    UNPIN_SNAP = "unpin-snap"
    UNFIX = "unfix"


class ScrollDirection(Enum):
    """Vertical scroll direction between two samples."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class DecisionConfig:
    """Inputs of one decision evaluation that come from configuration."""

    disabled: bool = False
    pin_start: float = 0
    up_tolerance: float = 5
    down_tolerance: float = 0
    element_height: float | None = None


@dataclass(frozen=True, slots=True)
class EvaluationOutput:
    """Decision result plus derived scroll metadata."""

    action: PinAction
    scroll_direction: ScrollDirection
    distance_scrolled: float


@dataclass(frozen=True, slots=True)
class VisualIntent:
    """Renderer-facing description of how the header should be placed."""

    state: PinState
    translate_offset: str
    positioning_mode: str
    transition_enabled: bool

    @property
    def fixed(self) -> bool:
        return self.positioning_mode == "fixed"


INITIAL_VISUAL_INTENT = VisualIntent(
    state=PinState.UNFIXED,
    translate_offset=OFFSET_VISIBLE,
    positioning_mode="relative",
    transition_enabled=False,
)

DecideFn = Callable[[float, float, DecisionConfig, PinState], EvaluationOutput]
