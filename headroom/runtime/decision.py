"""Pure scroll-sample decision function for header pinning."""

from __future__ import annotations

from headroom.api.pinning import (
    DecisionConfig,
    EvaluationOutput,
    PinAction,
    PinState,
    ScrollDirection,
)

_VISIBLE_STATES = frozenset({PinState.PINNED, PinState.UNFIXED})


def decide(
    previous_scroll_y: float,
    current_scroll_y: float,
    config: DecisionConfig,
    state: PinState,
) -> EvaluationOutput:
    """Map two consecutive scroll samples to the transition they request.

    Rules are evaluated in priority order and the first match wins:

    1. disabled headers never move;
    2. at or above ``pin_start`` a fixed header is always unfixed;
    3. an unfixed header moving down inside its own height is left alone;
    4. moving down past ``element_height + pin_start`` by more than
       ``down_tolerance`` unpins a visible header;
    5. moving up by more than ``up_tolerance`` pins a hidden header;
    6. moving up into the header's own height band pins a hidden header
       regardless of tolerance.

    ``element_height`` must be known once rule 3 is reached.
    """
    direction = ScrollDirection.DOWN if current_scroll_y >= previous_scroll_y else ScrollDirection.UP
    distance = abs(current_scroll_y - previous_scroll_y)

    if config.disabled:
        return _output(PinAction.NONE, direction, distance)
    if current_scroll_y <= config.pin_start and state is not PinState.UNFIXED:
        return _output(PinAction.UNFIX, direction, distance)

    height = config.element_height
    if height is None:
        raise ValueError("element_height must be measured before evaluating pin transitions")

    moving_down = direction is ScrollDirection.DOWN
    if current_scroll_y <= height and moving_down and state is PinState.UNFIXED:
        return _output(PinAction.NONE, direction, distance)
    if (
        moving_down
        and state in _VISIBLE_STATES
        and current_scroll_y > height + config.pin_start
        and distance > config.down_tolerance
    ):
        return _output(PinAction.UNPIN, direction, distance)
    if not moving_down and distance > config.up_tolerance and state not in _VISIBLE_STATES:
        return _output(PinAction.PIN, direction, distance)
    # Inside the header band: pin without waiting for the tolerance.
    if not moving_down and current_scroll_y <= height and state not in _VISIBLE_STATES:
        return _output(PinAction.PIN, direction, distance)
    return _output(PinAction.NONE, direction, distance)


def _output(action: PinAction, direction: ScrollDirection, distance: float) -> EvaluationOutput:
    return EvaluationOutput(action=action, scroll_direction=direction, distance_scrolled=distance)
