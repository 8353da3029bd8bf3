"""Style and class-name projection of a visual intent."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from headroom.api.pinning import PinState, VisualIntent
from headroom.runtime.config import HeadroomSettings

DEFAULT_INNER_STYLE: Mapping[str, str] = {
    "top": "0",
    "left": "0",
    "right": "0",
    "zIndex": "1",
    "position": "relative",
}
_TRANSFORM_KEYS = ("WebkitTransform", "MsTransform", "transform")
_TRANSITION_KEYS = ("WebkitTransition", "MozTransition", "OTransition", "transition")


def _css_number(value: float) -> str:
    # CSS has no exponent form; keep every digit of the shortest float repr.
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def transition_value(duration_ms: float, easing: str) -> str:
    """Return the CSS transition shorthand used while animation is enabled."""
    return f"all {_css_number(duration_ms)}ms {easing}"


def project_inner_style(intent: VisualIntent, settings: HeadroomSettings) -> dict[str, str]:
    """Return a fresh inner-element style for `intent`.

    Caller-supplied ``inner_style`` keys are kept unless the intent owns them
    (transform, position, transition).
    """
    base = DEFAULT_INNER_STYLE if settings.inner_style is None else settings.inner_style
    style = dict(base)
    transform = f"translate3D(0, {intent.translate_offset}, 0)"
    for key in _TRANSFORM_KEYS:
        style[key] = transform
    style["position"] = intent.positioning_mode
    transition = (
        transition_value(settings.duration_ms, settings.easing)
        if intent.transition_enabled
        else "none"
    )
    for key in _TRANSITION_KEYS:
        style[key] = transition
    return style


def project_wrapper_style(settings: HeadroomSettings, wrapper_height: float | None) -> dict[str, str]:
    """Return wrapper style reserving layout space once the height is known."""
    style = dict(settings.wrapper_style)
    if wrapper_height is not None:
        style["height"] = f"{_css_number(wrapper_height)}px"
    return style


def state_class_names(state: PinState, inner_class_name: str = "") -> str:
    names = ["headroom", f"headroom--{state.value}"]
    if inner_class_name.strip():
        names.append(inner_class_name.strip())
    return " ".join(names)


def wrapper_class_names(wrapper_class_name: str = "") -> str:
    extra = wrapper_class_name.strip()
    return f"headroom-wrapper {extra}" if extra else "headroom-wrapper"
