"""Turn and game-over notifications for observers of a running game.

Observers register for one game event type, or for every game event by
passing ``None``. Delivery is synchronous and follows subscription order, so a
subscriber sees each ``TurnEvent`` before the ``GameFinished`` that closes the
game.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from salvo.core.models import GAME_EVENT_TYPES, GameEvent

TEvent = TypeVar("TEvent", bound=GameEvent)
EventHandler = Callable[[GameEvent], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Token returned by ``EventBus.subscribe``."""

    id: int
    event_types: tuple[type[GameEvent], ...]


class EventBus:
    """Synchronous dispatcher for ``TurnEvent`` and ``GameFinished``."""

    def __init__(self) -> None:
        self._next_id = 1
        self._handlers: dict[int, tuple[tuple[type[GameEvent], ...], EventHandler]] = {}

    def subscribe(
        self,
        event_type: type[TEvent] | None,
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Register ``handler`` for ``event_type``, or for all game events when ``None``."""
        if event_type is None:
            event_types: tuple[type[GameEvent], ...] = GAME_EVENT_TYPES
        elif event_type in GAME_EVENT_TYPES:
            event_types = (event_type,)
        else:
            raise TypeError(f"Not a game event type: {event_type!r}")
        sub_id = self._next_id
        self._next_id += 1
        self._handlers[sub_id] = (event_types, handler)
        return Subscription(sub_id, event_types)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._handlers.pop(subscription.id, None)

    def subscriber_count(self, event_type: type[GameEvent]) -> int:
        return sum(1 for event_types, _ in self._handlers.values() if event_type in event_types)

    def publish(self, event: GameEvent) -> int:
        """Deliver ``event`` and return the number of handlers invoked."""
        event_type = type(event)
        if event_type not in GAME_EVENT_TYPES:
            raise TypeError(f"Not a game event: {event!r}")
        invoked = 0
        for event_types, handler in tuple(self._handlers.values()):
            if event_type in event_types:
                handler(event)
                invoked += 1
        return invoked
