from __future__ import annotations

from headroom.runtime.config import HeadroomSettings, load_headroom_settings
from headroom.runtime.debug_config import load_debug_config, resolve_log_level_name


def test_load_headroom_settings_defaults_without_env() -> None:
    settings = load_headroom_settings(env={})
    assert settings == HeadroomSettings()
    assert settings.up_tolerance == 5
    assert settings.down_tolerance == 0
    assert settings.calc_height_on_resize is True


def test_load_headroom_settings_parses_env_values() -> None:
    settings = load_headroom_settings(
        env={
            "HEADROOM_DISABLED": "yes",
            "HEADROOM_PIN_START": "64",
            "HEADROOM_UP_TOLERANCE": "12.5",
            "HEADROOM_DOWN_TOLERANCE": "3",
            "HEADROOM_CALC_HEIGHT_ON_RESIZE": "off",
            "HEADROOM_DURATION_MS": "-10",
            "HEADROOM_EASING": " linear ",
        }
    )
    assert settings.disabled is True
    assert settings.pin_start == 64
    assert settings.up_tolerance == 12.5
    assert settings.down_tolerance == 3
    assert settings.calc_height_on_resize is False
    assert settings.duration_ms == 0
    assert settings.easing == "linear"


def test_load_headroom_settings_falls_back_on_garbage() -> None:
    settings = load_headroom_settings(
        env={"HEADROOM_UP_TOLERANCE": "lots", "HEADROOM_DISABLED": "maybe", "HEADROOM_EASING": " "}
    )
    assert settings.up_tolerance == 5
    assert settings.disabled is False
    assert settings.easing == "ease-in-out"


def test_decision_config_carries_numeric_values() -> None:
    config = HeadroomSettings(pin_start=10, up_tolerance=2, down_tolerance=1).decision_config(88)
    assert (config.pin_start, config.up_tolerance, config.down_tolerance) == (10, 2, 1)
    assert config.element_height == 88
    assert config.disabled is False


def test_load_debug_config_parses_trace_flags(monkeypatch) -> None:
    monkeypatch.setenv("HEADROOM_DEBUG_TRACE", "true")
    monkeypatch.setenv("HEADROOM_DEBUG_TRACE_CAPACITY", "0")
    monkeypatch.setenv("HEADROOM_LOG_LEVEL", "debug")

    cfg = load_debug_config()
    assert cfg.trace_enabled is True
    assert cfg.trace_capacity == 1
    assert cfg.log_level == "DEBUG"


def test_resolve_log_level_prefers_headroom_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("HEADROOM_LOG_LEVEL", "ERROR")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("HEADROOM_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"
