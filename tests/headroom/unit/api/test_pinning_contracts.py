from __future__ import annotations

import dataclasses
import importlib

import pytest

import headroom
from headroom.api import (
    INITIAL_VISUAL_INTENT,
    DecisionConfig,
    PinAction,
    PinState,
    ScrollElement,
    ScrollHost,
    VisualIntent,
)
from tests.headroom.conftest import FakeElement, FakeWindow


def test_enum_values_match_wire_names() -> None:
    assert [state.value for state in PinState] == ["unfixed", "pinned", "unpinned"]
    assert PinAction("unpin-snap") is PinAction.UNPIN_SNAP


def test_visual_intent_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        INITIAL_VISUAL_INTENT.state = PinState.PINNED  # type: ignore[misc]


def test_visual_intent_fixed_helper() -> None:
    intent = VisualIntent(PinState.PINNED, "0", "fixed", True)
    assert intent.fixed is True
    assert INITIAL_VISUAL_INTENT.fixed is False


def test_decision_config_defaults_leave_height_unknown() -> None:
    assert DecisionConfig().element_height is None


def test_fakes_satisfy_scroll_protocols() -> None:
    assert isinstance(FakeElement(), ScrollElement)
    assert isinstance(FakeWindow(), ScrollHost)


def test_package_root_exports() -> None:
    assert headroom.decide is not None
    assert headroom.PinState is PinState
    assert "HeadroomController" in headroom.__all__


@pytest.mark.parametrize(
    "package",
    ["headroom", "headroom.api", "headroom.runtime", "headroom.diagnostics"],
)
def test_package_barrels_export_resolvable_names(package: str) -> None:
    module = importlib.import_module(package)

    for name in module.__all__:
        assert getattr(module, name) is not None


@pytest.mark.parametrize(
    "module_name",
    [
        "headroom.api.pinning",
        "headroom.api.events",
        "headroom.runtime.controller",
        "headroom.runtime.styles",
        "headroom.diagnostics.trace",
    ],
)
def test_leaf_modules_leave_exports_to_package_barrels(module_name: str) -> None:
    assert not hasattr(importlib.import_module(module_name), "__all__")
