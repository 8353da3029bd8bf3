"""Evaluation trace capture, JSONL export, and deterministic replay."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from headroom.api.pinning import (
    DecideFn,
    DecisionConfig,
    EvaluationOutput,
    PinAction,
    PinState,
    ScrollDirection,
)
from headroom.diagnostics.json_codec import dumps_bytes, loads
from headroom.diagnostics.ring_buffer import RingBuffer

_LOG = logging.getLogger("headroom.diagnostics")


@dataclass(frozen=True, slots=True)
class EvaluationRecord:
    """One applied decision with the inputs that produced it."""

    sequence: int
    previous_scroll_y: float
    current_scroll_y: float
    config: DecisionConfig
    state_before: PinState
    state_after: PinState
    action: PinAction
    scroll_direction: ScrollDirection
    distance_scrolled: float
    transition_enabled: bool


@dataclass(frozen=True, slots=True)
class TraceMismatch:
    sequence: int
    expected: PinAction
    actual: PinAction


@dataclass(frozen=True, slots=True)
class TraceReplayResult:
    passed: bool
    total: int
    mismatches: list[TraceMismatch]


class EvaluationTrace:
    """Bounded in-memory log of controller evaluations."""

    def __init__(self, capacity: int = 512) -> None:
        self._buffer = RingBuffer[EvaluationRecord](capacity)
        self._next_sequence = 1

    @property
    def recorded_count(self) -> int:
        """Return total records ever captured, including evicted ones."""
        return self._next_sequence - 1

    def record(
        self,
        *,
        previous_scroll_y: float,
        current_scroll_y: float,
        config: DecisionConfig,
        state_before: PinState,
        output: EvaluationOutput,
        state_after: PinState,
        transition_enabled: bool,
    ) -> EvaluationRecord:
        entry = EvaluationRecord(
            sequence=self._next_sequence,
            previous_scroll_y=previous_scroll_y,
            current_scroll_y=current_scroll_y,
            config=config,
            state_before=state_before,
            state_after=state_after,
            action=output.action,
            scroll_direction=output.scroll_direction,
            distance_scrolled=output.distance_scrolled,
            transition_enabled=transition_enabled,
        )
        self._next_sequence += 1
        self._buffer.append(entry)
        return entry

    def snapshot(self, *, limit: int | None = None) -> list[EvaluationRecord]:
        return self._buffer.snapshot(limit=limit)

    def clear(self) -> None:
        self._buffer.clear()

    def export_jsonl(self, path: Path) -> int:
        """Write buffered records to `path`, one JSON object per line."""
        records = self.snapshot()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as out:
            for entry in records:
                out.write(dumps_bytes(record_to_dict(entry)))
                out.write(b"\n")
        _LOG.info("trace_export_written path=%s records=%d", path, len(records))
        return len(records)


def record_to_dict(entry: EvaluationRecord) -> dict[str, Any]:
    return {
        "sequence": entry.sequence,
        "previous_scroll_y": entry.previous_scroll_y,
        "current_scroll_y": entry.current_scroll_y,
        "config": {
            "disabled": entry.config.disabled,
            "pin_start": entry.config.pin_start,
            "up_tolerance": entry.config.up_tolerance,
            "down_tolerance": entry.config.down_tolerance,
            "element_height": entry.config.element_height,
        },
        "state_before": entry.state_before.value,
        "state_after": entry.state_after.value,
        "action": entry.action.value,
        "scroll_direction": entry.scroll_direction.value,
        "distance_scrolled": entry.distance_scrolled,
        "transition_enabled": entry.transition_enabled,
    }


def record_from_dict(payload: dict[str, Any]) -> EvaluationRecord:
    """Rebuild a record; raises KeyError/ValueError on malformed payloads."""
    raw_config = payload["config"]
    return EvaluationRecord(
        sequence=int(payload["sequence"]),
        previous_scroll_y=payload["previous_scroll_y"],
        current_scroll_y=payload["current_scroll_y"],
        config=DecisionConfig(
            disabled=bool(raw_config["disabled"]),
            pin_start=raw_config["pin_start"],
            up_tolerance=raw_config["up_tolerance"],
            down_tolerance=raw_config["down_tolerance"],
            element_height=raw_config["element_height"],
        ),
        state_before=PinState(payload["state_before"]),
        state_after=PinState(payload["state_after"]),
        action=PinAction(payload["action"]),
        scroll_direction=ScrollDirection(payload["scroll_direction"]),
        distance_scrolled=payload["distance_scrolled"],
        transition_enabled=bool(payload["transition_enabled"]),
    )


def read_trace(path: Path) -> tuple[list[EvaluationRecord], int]:
    """Read a JSONL trace, returning sorted records and the malformed line count."""
    records: list[EvaluationRecord] = []
    skipped = 0
    for line_no, line in enumerate(path.read_bytes().splitlines(), start=1):
        if not line.strip():
            continue
        try:
            payload = loads(line)
            records.append(record_from_dict(payload))
        except (ValueError, KeyError, TypeError):
            skipped += 1
            _LOG.warning("trace_line_skipped path=%s line=%d", path, line_no)
    records.sort(key=lambda entry: entry.sequence)
    return records, skipped


def load_trace(path: Path) -> list[EvaluationRecord]:
    """Load records from a JSONL trace, skipping blank and malformed lines."""
    records, _ = read_trace(path)
    return records


def replay_trace(
    records: Iterable[EvaluationRecord],
    *,
    decide_fn: DecideFn,
    overrides: dict[str, Any] | None = None,
) -> TraceReplayResult:
    """Re-run the decision function over recorded inputs and compare actions."""
    mismatches: list[TraceMismatch] = []
    total = 0
    for entry in records:
        total += 1
        config = replace(entry.config, **overrides) if overrides else entry.config
        output = decide_fn(entry.previous_scroll_y, entry.current_scroll_y, config, entry.state_before)
        if output.action is not entry.action:
            mismatches.append(
                TraceMismatch(sequence=entry.sequence, expected=entry.action, actual=output.action)
            )
    return TraceReplayResult(passed=not mismatches, total=total, mismatches=mismatches)
