"""Per-player fleet and shot bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field

from salvo.core.errors import DuplicateShipError
from salvo.core.models import Coordinate, PlayerId, Ship, Territory


@dataclass(slots=True)
class PlayerState:
    """One player's territory, fleet and fired coordinates."""

    player_id: PlayerId
    territory: Territory
    board_size: int
    fleet: dict[str, Ship] = field(default_factory=dict)
    fired_shots: set[Coordinate] = field(default_factory=set)

    @property
    def ships(self) -> tuple[Ship, ...]:
        return tuple(self.fleet.values())

    @property
    def has_ships(self) -> bool:
        return bool(self.fleet)

    def add_ship(self, ship: Ship) -> None:
        """Register ``ship`` under its id; ids are unique within one fleet."""
        if ship.ship_id in self.fleet:
            raise DuplicateShipError(ship.ship_id, self.player_id)
        self.fleet[ship.ship_id] = ship

    def remaining_ship_count(self) -> int:
        return sum(1 for ship in self.fleet.values() if not ship.destroyed)

    def territory_coordinates(self) -> list[Coordinate]:
        """Every cell of the territory, column-major ascending."""
        return [
            Coordinate(x, y)
            for x in self.territory.columns()
            for y in range(self.board_size)
        ]

    def record_shot(self, coord: Coordinate) -> None:
        self.fired_shots.add(coord)
