"""Public event bus API contracts and header transition events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


@dataclass(frozen=True, slots=True)
class HeadroomTransition:
    """Base for pin/unpin/unfix notifications."""

    scroll_y: float


@dataclass(frozen=True, slots=True)
class HeadroomPinned(HeadroomTransition):
    """Header became visible while fixed."""


@dataclass(frozen=True, slots=True)
class HeadroomUnpinned(HeadroomTransition):
    """Header was translated out of view."""


@dataclass(frozen=True, slots=True)
class HeadroomUnfixed(HeadroomTransition):
    """Header returned to normal document flow."""


class EventBus(Protocol):
    """Public in-process pub/sub contract."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for event type."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, event: object) -> int:
        """Publish event and return invocation count."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from headroom.runtime.events import RuntimeEventBus

    return RuntimeEventBus()
