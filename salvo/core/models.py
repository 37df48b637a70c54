"""Core domain models used by the battlefield and game engine."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from salvo.core.errors import InvalidShipError, InvalidSizeError


class PlayerId(StrEnum):
    """The two sides of a game."""

    A = "A"
    B = "B"

    @property
    def opponent(self) -> PlayerId:
        return PlayerId.B if self is PlayerId.A else PlayerId.A

    @property
    def display_name(self) -> str:
        return f"Player{self.value}"


class ShotResult(StrEnum):
    """Result of a single resolved shot."""

    MISS = "MISS"
    HIT = "HIT"


class GameState(StrEnum):
    """Engine lifecycle states."""

    UNINITIALIZED = "UNINITIALIZED"
    SETUP = "SETUP"
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"


class OutcomeKind(StrEnum):
    """Classification of a game's result."""

    IN_PROGRESS = "IN_PROGRESS"
    WIN = "WIN"
    DRAW = "DRAW"


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Grid cell, ``x`` is the column and ``y`` the row."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Territory:
    """Inclusive column range owned by one player."""

    min_col: int
    max_col: int

    def __post_init__(self) -> None:
        if self.min_col > self.max_col:
            raise ValueError(f"min_col {self.min_col} exceeds max_col {self.max_col}")

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1

    def contains(self, x: int) -> bool:
        """Return whether column ``x`` belongs to this territory."""
        return self.min_col <= x <= self.max_col

    def columns(self) -> range:
        return range(self.min_col, self.max_col + 1)


def validate_board_size(size: int) -> None:
    """Raise ``InvalidSizeError`` unless ``size`` is a positive even integer."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0 or size % 2 != 0:
        raise InvalidSizeError(size)


def split_territories(size: int) -> dict[PlayerId, Territory]:
    """Partition ``[0, size - 1]`` into the A (left) and B (right) halves."""
    validate_board_size(size)
    half = size // 2
    return {
        PlayerId.A: Territory(0, half - 1),
        PlayerId.B: Territory(half, size - 1),
    }


def footprint_for(center: Coordinate, side: int) -> frozenset[Coordinate]:
    """Compute the square block of cells a ship of ``side`` occupies around ``center``."""
    half = side // 2
    return frozenset(
        Coordinate(x, y)
        for x in range(center.x - half, center.x + half)
        for y in range(center.y - half, center.y + half)
    )


@dataclass(slots=True, eq=False)
class Ship:
    """Square ship with a fixed footprint and a one-way destroyed flag."""

    ship_id: str
    size: int
    center: Coordinate
    owner: PlayerId
    footprint: frozenset[Coordinate] = field(init=False)
    destroyed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.ship_id, str) or not self.ship_id.strip():
            raise InvalidShipError("ship id must be a non-empty string", ship_id=str(self.ship_id))
        if (
            isinstance(self.size, bool)
            or not isinstance(self.size, int)
            or self.size < 2
            or self.size % 2 != 0
        ):
            raise InvalidShipError(
                f"ship size must be an even integer >= 2, got {self.size!r}",
                ship_id=self.ship_id,
            )
        if not isinstance(self.center, Coordinate) or not all(
            isinstance(value, int) and not isinstance(value, bool)
            for value in (self.center.x, self.center.y)
        ):
            raise InvalidShipError(
                f"ship center must be an integer coordinate, got {self.center!r}",
                ship_id=self.ship_id,
            )
        self.footprint = footprint_for(self.center, self.size)

    @property
    def label(self) -> str:
        return f"{self.owner.value}-{self.ship_id}"

    def occupies(self, coord: Coordinate) -> bool:
        return coord in self.footprint

    def destroy(self) -> bool:
        """Mark the ship destroyed; return ``True`` only on the first call."""
        if self.destroyed:
            return False
        self.destroyed = True
        return True

    def sorted_footprint(self) -> list[Coordinate]:
        return sorted(self.footprint)


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Win, draw, or still in progress."""

    kind: OutcomeKind
    winner: PlayerId | None = None

    @classmethod
    def in_progress(cls) -> GameOutcome:
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def draw(cls) -> GameOutcome:
        return cls(OutcomeKind.DRAW)

    @classmethod
    def win(cls, winner: PlayerId) -> GameOutcome:
        return cls(OutcomeKind.WIN, winner)

    @property
    def is_finished(self) -> bool:
        return self.kind is not OutcomeKind.IN_PROGRESS


@dataclass(frozen=True, slots=True)
class TurnEvent:
    """Notification published after each fired shot."""

    turn: int
    attacker: PlayerId
    defender: PlayerId
    target: Coordinate
    result: ShotResult
    remaining: Mapping[PlayerId, int]
    ship_id: str | None = None
    already_destroyed: bool = False

    @property
    def is_hit(self) -> bool:
        return self.result is ShotResult.HIT


@dataclass(frozen=True, slots=True)
class GameFinished:
    """Published once when the engine reaches ``FINISHED``."""

    outcome: GameOutcome
    turns: int


GameEvent = TurnEvent | GameFinished
GAME_EVENT_TYPES: tuple[type[TurnEvent], type[GameFinished]] = (TurnEvent, GameFinished)


@dataclass(frozen=True, slots=True)
class CellView:
    """Read-only description of an occupied cell."""

    owner: PlayerId
    ship_id: str
    destroyed: bool

    @property
    def label(self) -> str:
        return f"{self.owner.value}-{self.ship_id}"


@dataclass(frozen=True, slots=True)
class BattlefieldSnapshot:
    """Immutable view of battlefield occupancy for rendering."""

    size: int
    cells: Mapping[Coordinate, CellView]
    fired: frozenset[Coordinate] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    def cell(self, x: int, y: int) -> CellView | None:
        return self.cells.get(Coordinate(x, y))

    def rows_top_down(self) -> Iterator[int]:
        return iter(range(self.size - 1, -1, -1))
