"""Game error taxonomy.

Every error is recoverable: the engine reports it and keeps its previous
state, so callers may correct their input and retry.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from salvo.core.models import Coordinate, PlayerId


class GameError(Exception):
    """Base class for all game errors."""


class InvalidSizeError(GameError, ValueError):
    """Battlefield size is not a positive even integer."""

    def __init__(self, size: object) -> None:
        super().__init__(f"Battlefield size must be a positive even integer, got {size!r}.")
        self.size = size


class InvalidShipError(GameError, ValueError):
    """Ship definition is malformed (blank id or bad size)."""

    def __init__(self, message: str, *, ship_id: str) -> None:
        super().__init__(message)
        self.ship_id = ship_id


class PlacementReason(StrEnum):
    """Rule violated by a rejected placement."""

    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    WRONG_TERRITORY = "WRONG_TERRITORY"
    OVERLAP = "OVERLAP"


_REASON_TEXT = {
    PlacementReason.OUT_OF_BOUNDS: "is out of the battlefield bounds",
    PlacementReason.WRONG_TERRITORY: "is out of its owner's territory",
    PlacementReason.OVERLAP: "overlaps with another ship",
}


class PlacementError(GameError, ValueError):
    """A ship footprint cell failed bounds, territory or overlap validation."""

    def __init__(
        self,
        *,
        ship_id: str,
        owner: PlayerId,
        reason: PlacementReason,
        coordinate: Coordinate,
    ) -> None:
        super().__init__(
            f"Ship '{ship_id}' of player {owner.value} {_REASON_TEXT[reason]} "
            f"at ({coordinate.x}, {coordinate.y})."
        )
        self.ship_id = ship_id
        self.owner = owner
        self.reason = reason
        self.coordinate = coordinate


class DuplicateShipError(GameError, ValueError):
    """Ship id already present in the player's fleet."""

    def __init__(self, ship_id: str, owner: PlayerId) -> None:
        super().__init__(f"Player {owner.value} already has a ship with id '{ship_id}'.")
        self.ship_id = ship_id
        self.owner = owner


class GameStateError(GameError, RuntimeError):
    """Operation is not allowed in the engine's current state."""


class NotReadyError(GameStateError):
    """Engine is not initialised, or there is nothing to play with yet."""


class StrategyError(GameError, RuntimeError):
    """Targeting strategy returned a coordinate that is not eligible."""
