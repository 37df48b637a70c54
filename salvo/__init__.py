"""Two-player territory battleship simulation."""

from salvo.core.engine import GameEngine
from salvo.core.errors import (
    DuplicateShipError,
    GameError,
    GameStateError,
    InvalidShipError,
    InvalidSizeError,
    NotReadyError,
    PlacementError,
    PlacementReason,
    StrategyError,
)
from salvo.core.models import (
    BattlefieldSnapshot,
    Coordinate,
    GameFinished,
    GameOutcome,
    GameState,
    OutcomeKind,
    PlayerId,
    Ship,
    ShotResult,
    Territory,
    TurnEvent,
)

__all__ = [
    "BattlefieldSnapshot",
    "Coordinate",
    "DuplicateShipError",
    "GameEngine",
    "GameError",
    "GameFinished",
    "GameOutcome",
    "GameState",
    "GameStateError",
    "InvalidShipError",
    "InvalidSizeError",
    "NotReadyError",
    "OutcomeKind",
    "PlacementError",
    "PlacementReason",
    "PlayerId",
    "Ship",
    "ShotResult",
    "StrategyError",
    "Territory",
    "TurnEvent",
]
