"""Evaluation tracing and replay diagnostics."""

from headroom.diagnostics.ring_buffer import RingBuffer
from headroom.diagnostics.trace import (
    EvaluationRecord,
    EvaluationTrace,
    TraceMismatch,
    TraceReplayResult,
    load_trace,
    read_trace,
    replay_trace,
)

__all__ = [
    "EvaluationRecord",
    "EvaluationTrace",
    "RingBuffer",
    "TraceMismatch",
    "TraceReplayResult",
    "load_trace",
    "read_trace",
    "replay_trace",
]
