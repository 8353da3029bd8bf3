"""Header pinning settings and their environment-sourced defaults."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from headroom.api.pinning import DecisionConfig
from headroom.api.scroll_source import ParentResolver


@dataclass(frozen=True, slots=True)
class HeadroomSettings:
    """Controller configuration; replaced wholesale between evaluations."""

    disabled: bool = False
    # px offset at which pinning logic activates
    pin_start: float = 0
    # px of upward scroll before pinning
    up_tolerance: float = 5
    # px of downward scroll before unpinning
    down_tolerance: float = 0
    calc_height_on_resize: bool = True
    duration_ms: float = 200
    easing: str = "ease-in-out"
    parent: ParentResolver | None = None
    wrapper_class_name: str = ""
    inner_class_name: str = ""
    wrapper_style: Mapping[str, str] = field(default_factory=dict)
    inner_style: Mapping[str, str] | None = None

    def decision_config(self, element_height: float | None) -> DecisionConfig:
        return DecisionConfig(
            disabled=self.disabled,
            pin_start=self.pin_start,
            up_tolerance=self.up_tolerance,
            down_tolerance=self.down_tolerance,
            element_height=element_height,
        )


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def load_headroom_settings(*, env: Mapping[str, str] | None = None) -> HeadroomSettings:
    """Build settings from ``HEADROOM_*`` variables, falling back to defaults."""
    defaults = HeadroomSettings()
    return HeadroomSettings(
        disabled=_flag("HEADROOM_DISABLED", defaults.disabled, env=env),
        pin_start=_float("HEADROOM_PIN_START", defaults.pin_start, env=env),
        up_tolerance=_float("HEADROOM_UP_TOLERANCE", defaults.up_tolerance, env=env),
        down_tolerance=_float("HEADROOM_DOWN_TOLERANCE", defaults.down_tolerance, env=env),
        calc_height_on_resize=_flag(
            "HEADROOM_CALC_HEIGHT_ON_RESIZE", defaults.calc_height_on_resize, env=env
        ),
        duration_ms=_float("HEADROOM_DURATION_MS", defaults.duration_ms, minimum=0.0, env=env),
        easing=_text("HEADROOM_EASING", defaults.easing, env=env),
    )
