"""Battlefield occupancy grid and placement validation."""

from __future__ import annotations

import logging

import numpy as np

from salvo.core.errors import PlacementError, PlacementReason
from salvo.core.models import (
    BattlefieldSnapshot,
    CellView,
    Coordinate,
    Ship,
    Territory,
    validate_board_size,
)

logger = logging.getLogger(__name__)

_EMPTY = 0


class Battlefield:
    """Numpy-backed N x N occupancy grid shared by both players.

    ``grid[y, x]`` holds ``index + 1`` of the occupying ship in ``ships``, or 0
    when the cell is empty. Cells are only written during placement.
    """

    __slots__ = ("size", "grid", "_ships")

    def __init__(self, size: int) -> None:
        validate_board_size(size)
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int32)
        self._ships: list[Ship] = []

    @property
    def ships(self) -> tuple[Ship, ...]:
        return tuple(self._ships)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return whether the coordinate is in battlefield bounds."""
        return 0 <= x < self.size and 0 <= y < self.size

    def validate_placement(self, ship: Ship, territory: Territory) -> None:
        """Raise ``PlacementError`` for the first footprint cell breaking a rule.

        Cells are checked in ascending ``(x, y)`` order; each cell is checked for
        bounds, then territory, then occupancy.
        """
        for cell in ship.sorted_footprint():
            reason = self._violation(cell, territory)
            if reason is not None:
                raise PlacementError(
                    ship_id=ship.ship_id,
                    owner=ship.owner,
                    reason=reason,
                    coordinate=cell,
                )

    def can_place(self, ship: Ship, territory: Territory) -> bool:
        """Return whether a placement is valid and non-overlapping."""
        return all(self._violation(cell, territory) is None for cell in ship.footprint)

    def place_ship(self, ship: Ship, territory: Territory) -> None:
        """Place a ship; nothing is written if any cell is invalid."""
        self.validate_placement(ship, territory)
        self._ships.append(ship)
        marker = len(self._ships)
        for cell in ship.footprint:
            self.grid[cell.y, cell.x] = marker
        logger.debug(
            "ship_placed",
            extra={"ship": ship.label, "center": (ship.center.x, ship.center.y), "size": ship.size},
        )

    def ship_at(self, x: int, y: int) -> Ship | None:
        """Return the ship at ``(x, y)``; out-of-bounds queries return ``None``."""
        if not self.in_bounds(x, y):
            return None
        marker = int(self.grid[y, x])
        if marker == _EMPTY:
            return None
        return self._ships[marker - 1]

    def occupied_cells(self) -> set[Coordinate]:
        ys, xs = np.nonzero(self.grid)
        return {Coordinate(int(x), int(y)) for x, y in zip(xs, ys)}

    def snapshot(self, fired: frozenset[Coordinate] = frozenset()) -> BattlefieldSnapshot:
        cells: dict[Coordinate, CellView] = {}
        for ship in self._ships:
            view = CellView(owner=ship.owner, ship_id=ship.ship_id, destroyed=ship.destroyed)
            for cell in ship.footprint:
                cells[cell] = view
        return BattlefieldSnapshot(size=self.size, cells=cells, fired=fired)

    def _violation(self, cell: Coordinate, territory: Territory) -> PlacementReason | None:
        if not self.in_bounds(cell.x, cell.y):
            return PlacementReason.OUT_OF_BOUNDS
        if not territory.contains(cell.x):
            return PlacementReason.WRONG_TERRITORY
        if self.grid[cell.y, cell.x] != _EMPTY:
            return PlacementReason.OVERLAP
        return None
