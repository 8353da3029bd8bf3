from __future__ import annotations

from headroom.api.pinning import INITIAL_VISUAL_INTENT, OFFSET_HIDDEN, PinState, VisualIntent
from headroom.runtime.config import HeadroomSettings
from headroom.runtime.styles import (
    DEFAULT_INNER_STYLE,
    project_inner_style,
    project_wrapper_style,
    state_class_names,
    transition_value,
    wrapper_class_names,
)


def test_transition_value_uses_duration_and_easing() -> None:
    assert transition_value(200, "ease-in-out") == "all 200ms ease-in-out"
    assert transition_value(150.5, "linear") == "all 150.5ms linear"


def test_transition_value_never_uses_exponent_form() -> None:
    assert transition_value(1500000, "ease") == "all 1500000ms ease"
    assert transition_value(1234567.25, "ease") == "all 1234567.25ms ease"
    assert transition_value(0.0000005, "ease") == "all 0.0000005ms ease"
    assert transition_value(1e20, "ease") == "all 100000000000000000000ms ease"


def test_project_inner_style_defaults_and_no_transition() -> None:
    style = project_inner_style(INITIAL_VISUAL_INTENT, HeadroomSettings())

    assert style["top"] == "0"
    assert style["zIndex"] == "1"
    assert style["position"] == "relative"
    assert style["WebkitTransform"] == "translate3D(0, 0, 0)"
    assert style["transition"] == "none"
    assert style["MozTransition"] == "none"


def test_project_inner_style_returns_fresh_dict() -> None:
    first = project_inner_style(INITIAL_VISUAL_INTENT, HeadroomSettings())
    first["top"] = "99px"
    second = project_inner_style(INITIAL_VISUAL_INTENT, HeadroomSettings())
    assert second["top"] == "0"
    assert DEFAULT_INNER_STYLE["top"] == "0"


def test_project_inner_style_hidden_and_animated() -> None:
    intent = VisualIntent(
        state=PinState.UNPINNED,
        translate_offset=OFFSET_HIDDEN,
        positioning_mode="fixed",
        transition_enabled=True,
    )
    settings = HeadroomSettings(duration_ms=300, easing="ease-out", inner_style={"color": "red"})

    style = project_inner_style(intent, settings)

    assert style["color"] == "red"
    assert "top" not in style
    assert style["transform"] == "translate3D(0, -100%, 0)"
    assert style["MsTransform"] == "translate3D(0, -100%, 0)"
    assert style["position"] == "fixed"
    assert style["OTransition"] == "all 300ms ease-out"


def test_project_wrapper_style_adds_height_when_known() -> None:
    settings = HeadroomSettings(wrapper_style={"background": "white"})
    assert project_wrapper_style(settings, None) == {"background": "white"}
    assert project_wrapper_style(settings, 72) == {"background": "white", "height": "72px"}


def test_project_wrapper_style_keeps_large_heights_exact() -> None:
    settings = HeadroomSettings()
    assert project_wrapper_style(settings, 2500000)["height"] == "2500000px"
    assert project_wrapper_style(settings, 1234567.5)["height"] == "1234567.5px"
    assert project_wrapper_style(settings, 64.0)["height"] == "64px"


def test_class_names() -> None:
    assert state_class_names(PinState.PINNED) == "headroom headroom--pinned"
    assert state_class_names(PinState.UNFIXED, " nav ") == "headroom headroom--unfixed nav"
    assert wrapper_class_names() == "headroom-wrapper"
    assert wrapper_class_names("sticky") == "headroom-wrapper sticky"
