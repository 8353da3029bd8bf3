"""Action-to-transition table for the header pin state machine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from headroom.api.events import (
    HeadroomPinned,
    HeadroomTransition,
    HeadroomUnfixed,
    HeadroomUnpinned,
)
from headroom.api.pinning import OFFSET_HIDDEN, OFFSET_VISIBLE, PinAction, PinState


@dataclass(frozen=True, slots=True)
class PinTransition:
    """State, offset, and animation change produced by one action."""

    state: PinState
    translate_offset: str
    animation_enabled: bool
    event_type: type[HeadroomTransition]


ACTION_TRANSITIONS: Mapping[PinAction, PinTransition | None] = {
    PinAction.NONE: None,
    PinAction.PIN: PinTransition(PinState.PINNED, OFFSET_VISIBLE, True, HeadroomPinned),
    PinAction.UNPIN: PinTransition(PinState.UNPINNED, OFFSET_HIDDEN, True, HeadroomUnpinned),
    PinAction.UNPIN_SNAP: PinTransition(PinState.UNPINNED, OFFSET_HIDDEN, False, HeadroomUnpinned),
    PinAction.UNFIX: PinTransition(PinState.UNFIXED, OFFSET_VISIBLE, False, HeadroomUnfixed),
}

_MISSING = set(PinAction) - set(ACTION_TRANSITIONS)
if _MISSING:
    raise RuntimeError(f"pin actions without transition: {sorted(a.value for a in _MISSING)}")


def transition_for(action: PinAction) -> PinTransition | None:
    """Return the transition for `action`, or None when nothing changes."""
    return ACTION_TRANSITIONS[action]


def positioning_mode(state: PinState, *, disabled: bool) -> str:
    if disabled or state is PinState.UNFIXED:
        return "relative"
    return "fixed"
