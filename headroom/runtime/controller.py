"""Stateful sampling controller wrapping the pin decision function."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from headroom.api.events import EventBus
from headroom.api.pinning import (
    OFFSET_VISIBLE,
    DecideFn,
    PinAction,
    PinState,
    VisualIntent,
)
from headroom.api.scroll_source import HeightMeasurer
from headroom.diagnostics.trace import EvaluationTrace
from headroom.runtime.config import HeadroomSettings, load_headroom_settings
from headroom.runtime.debug_config import load_debug_config
from headroom.runtime.decision import decide
from headroom.runtime.errors import RECOVERABLE_COLLABORATOR_ERRORS, log_recoverable
from headroom.runtime.events import RuntimeEventBus
from headroom.runtime.gate import InFlightGate
from headroom.runtime.logging import get_headroom_logger
from headroom.runtime.scheduler import DeferredScheduler
from headroom.runtime.scroll_metrics import (
    is_out_of_bound,
    read_scroll_y,
    resolve_scroll_parent,
    scroller_extents,
)
from headroom.runtime.styles import (
    project_inner_style,
    project_wrapper_style,
    state_class_names,
    wrapper_class_names,
)
from headroom.runtime.transitions import positioning_mode, transition_for

_LOG = get_headroom_logger("headroom.runtime")


class HeadroomController:
    """Turns scroll/resize notifications into pin state and visual intent.

    All persistent memory of the header lives here. Scroll notifications run
    one evaluation at a time through a drop-if-busy gate; resize notifications
    schedule an asynchronous height measurement on the host scheduler. The
    decision function is never called before the element height is known.
    """

    def __init__(
        self,
        settings: HeadroomSettings | None = None,
        *,
        host: object,
        measure_height: HeightMeasurer,
        scheduler: DeferredScheduler | None = None,
        event_bus: EventBus | None = None,
        decide_fn: DecideFn = decide,
        trace: EvaluationTrace | None = None,
    ) -> None:
        self._settings = settings or HeadroomSettings()
        self._host = host
        self._measure_height = measure_height
        self._scheduler = scheduler or DeferredScheduler()
        self._event_bus: EventBus = event_bus or RuntimeEventBus()
        self._decide = decide_fn
        self._trace = trace
        self._scroll_gate = InFlightGate("scroll")
        self._resize_gate = InFlightGate("resize")
        self._state = PinState.UNFIXED
        self._translate_offset = OFFSET_VISIBLE
        self._element_height: float | None = None
        self._last_known_scroll_y: float = 0
        self._animation_enabled = False
        self._is_first_evaluation = True
        self._measure_task_id: int | None = None
        self._mounted = False
        self._torn_down = False
        self._visual_intent = self._compose_intent()

    @property
    def settings(self) -> HeadroomSettings:
        return self._settings

    @property
    def state(self) -> PinState:
        return self._state

    @property
    def element_height(self) -> float | None:
        return self._element_height

    @property
    def wrapper_height(self) -> float | None:
        """Height the host should reserve under the header; None until measured."""
        return self._element_height

    @property
    def last_known_scroll_y(self) -> float:
        return self._last_known_scroll_y

    @property
    def animation_enabled(self) -> bool:
        return self._animation_enabled

    @property
    def is_first_evaluation(self) -> bool:
        return self._is_first_evaluation

    @property
    def visual_intent(self) -> VisualIntent:
        return self._visual_intent

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def scheduler(self) -> DeferredScheduler:
        return self._scheduler

    @property
    def scroll_gate(self) -> InFlightGate:
        return self._scroll_gate

    @property
    def resize_gate(self) -> InFlightGate:
        return self._resize_gate

    @property
    def trace(self) -> EvaluationTrace | None:
        return self._trace

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    def mount(self) -> None:
        """Start the initial height measurement; unfix once if mounted disabled."""
        if self._mounted or self._torn_down:
            return
        self._mounted = True
        self._schedule_measurement()
        if self._settings.disabled:
            self.force_unfix()

    def teardown(self) -> None:
        """Cancel pending measurement and ignore all later notifications."""
        if self._torn_down:
            return
        self._torn_down = True
        if self._measure_task_id is not None:
            self._scheduler.cancel(self._measure_task_id)
            self._measure_task_id = None
        self._resize_gate.release()
        _LOG.debug("headroom_teardown state=%s", self._state.value)

    def update_settings(self, **changes: Any) -> HeadroomSettings:
        """Replace settings between evaluations."""
        self._settings = replace(self._settings, **changes)
        self._visual_intent = self._compose_intent()
        return self._settings

    def force_unfix(self) -> None:
        """Reset to normal flow without consulting the decision function."""
        self._apply(PinAction.UNFIX, scroll_y=self._last_known_scroll_y)
        self._visual_intent = self._compose_intent()

    def on_scroll_notification(self) -> VisualIntent | None:
        """Handle one scroll notification.

        Returns the intent composed by the evaluation, or None when the
        notification was dropped, skipped or withheld.
        """
        if self._settings.disabled or self._torn_down:
            return None
        return self._scroll_gate.run(self._evaluate)

    def on_resize_notification(self) -> bool:
        """Handle one resize notification; return whether a measurement was scheduled."""
        if self._settings.disabled or not self._settings.calc_height_on_resize or self._torn_down:
            return False
        if not self._resize_gate.try_acquire():
            return False
        self._schedule_measurement()
        return True

    def inner_style(self) -> dict[str, str]:
        return project_inner_style(self._visual_intent, self._settings)

    def wrapper_style(self) -> dict[str, str]:
        return project_wrapper_style(self._settings, self.wrapper_height)

    def inner_class_names(self) -> str:
        return state_class_names(self._state, self._settings.inner_class_name)

    def wrapper_class_names(self) -> str:
        return wrapper_class_names(self._settings.wrapper_class_name)

    def _schedule_measurement(self) -> None:
        if self._measure_task_id is not None:
            self._scheduler.cancel(self._measure_task_id)
        self._measure_task_id = self._scheduler.call_later(
            0.0,
            self._complete_measurement,
        )

    def _complete_measurement(self) -> None:
        self._measure_task_id = None
        try:
            if self._torn_down:
                return
            try:
                height = self._measure_height()
            except RECOVERABLE_COLLABORATOR_ERRORS:
                log_recoverable(_LOG, "height_measurement_failed")
                return
            self._element_height = height
            _LOG.debug("height_measured height=%s", height)
        finally:
            self._resize_gate.release()

    def _evaluate(self) -> VisualIntent | None:
        scroller = resolve_scroll_parent(self._host, self._settings.parent)
        current_scroll_y = read_scroll_y(scroller)
        extents = scroller_extents(self._host, scroller)
        if is_out_of_bound(current_scroll_y, extents):
            _LOG.debug(
                "scroll_sample_out_of_bound scroll_y=%s physical=%s content=%s",
                current_scroll_y,
                extents.physical,
                extents.content,
            )
            return None
        if self._element_height is None:
            _LOG.debug("evaluation_withheld reason=height_unknown scroll_y=%s", current_scroll_y)
            return None

        config = self._settings.decision_config(self._element_height)
        state_before = self._state
        output = self._decide(self._last_known_scroll_y, current_scroll_y, config, state_before)
        self._apply(output.action, scroll_y=current_scroll_y)
        intent = self._compose_intent()
        self._visual_intent = intent
        if self._trace is not None:
            self._trace.record(
                previous_scroll_y=self._last_known_scroll_y,
                current_scroll_y=current_scroll_y,
                config=config,
                state_before=state_before,
                output=output,
                state_after=self._state,
                transition_enabled=intent.transition_enabled,
            )
        self._last_known_scroll_y = current_scroll_y
        self._is_first_evaluation = False
        return intent

    def _apply(self, action: PinAction, *, scroll_y: float) -> None:
        transition = transition_for(action)
        if transition is None:
            return
        self._state = transition.state
        self._translate_offset = transition.translate_offset
        self._animation_enabled = transition.animation_enabled
        _LOG.debug(
            "headroom_transition action=%s state=%s scroll_y=%s",
            action.value,
            transition.state.value,
            scroll_y,
        )
        self._event_bus.publish(transition.event_type(scroll_y=scroll_y))

    def _compose_intent(self) -> VisualIntent:
        return VisualIntent(
            state=self._state,
            translate_offset=self._translate_offset,
            positioning_mode=positioning_mode(self._state, disabled=self._settings.disabled),
            transition_enabled=self._animation_enabled and not self._is_first_evaluation,
        )


def create_headroom_controller(
    *,
    host: object,
    measure_height: HeightMeasurer,
    settings: HeadroomSettings | None = None,
    scheduler: DeferredScheduler | None = None,
    event_bus: EventBus | None = None,
) -> HeadroomController:
    """Create a controller with env-sourced settings and optional debug trace."""
    debug = load_debug_config()
    trace = EvaluationTrace(debug.trace_capacity) if debug.trace_enabled else None
    return HeadroomController(
        settings if settings is not None else load_headroom_settings(),
        host=host,
        measure_height=measure_height,
        scheduler=scheduler,
        event_bus=event_bus,
        trace=trace,
    )
