from __future__ import annotations

import pytest

from headroom.runtime.gate import InFlightGate


def test_gate_runs_callback_and_releases() -> None:
    gate = InFlightGate("scroll")
    calls: list[bool] = []

    def _callback() -> str:
        calls.append(gate.busy)
        return "ran"

    assert gate.run(_callback) == "ran"
    assert calls == [True]
    assert gate.busy is False


def test_gate_drops_nested_runs_instead_of_queueing() -> None:
    gate = InFlightGate("scroll")
    inner_results: list[str | None] = []
    calls: list[str] = []

    def _inner() -> str:
        calls.append("inner")
        return "inner"

    def _outer() -> str:
        calls.append("outer")
        for _ in range(3):
            inner_results.append(gate.run(_inner))
        return "outer"

    assert gate.run(_outer) == "outer"
    assert calls == ["outer"]
    assert inner_results == [None, None, None]
    assert gate.dropped_count == 3


def test_gate_releases_when_callback_raises() -> None:
    gate = InFlightGate("scroll")

    def _boom() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        gate.run(_boom)
    assert gate.busy is False
    assert gate.try_acquire() is True


def test_gate_manual_acquire_release_cycle() -> None:
    gate = InFlightGate("resize")
    assert gate.try_acquire() is True
    assert gate.try_acquire() is False
    gate.release()
    assert gate.try_acquire() is True
    assert gate.name == "resize"
