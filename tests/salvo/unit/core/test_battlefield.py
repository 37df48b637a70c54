import numpy as np
import pytest

from salvo.core.battlefield import Battlefield
from salvo.core.errors import InvalidSizeError, PlacementError, PlacementReason
from salvo.core.models import Coordinate, PlayerId, Ship, split_territories


def _ship(ship_id: str, x: int, y: int, owner: PlayerId = PlayerId.A, size: int = 2) -> Ship:
    return Ship(ship_id, size, Coordinate(x, y), owner)


def test_battlefield_rejects_invalid_size() -> None:
    with pytest.raises(InvalidSizeError):
        Battlefield(3)


def test_place_ship_records_every_footprint_cell() -> None:
    board = Battlefield(6)
    territory = split_territories(6)[PlayerId.A]
    ship = _ship("SH1", 1, 5)
    board.place_ship(ship, territory)
    for cell in ship.footprint:
        assert board.ship_at(cell.x, cell.y) is ship
    assert board.ship_at(2, 2) is None
    assert board.occupied_cells() == set(ship.footprint)


def test_ship_at_out_of_bounds_is_empty() -> None:
    board = Battlefield(4)
    assert board.ship_at(-1, 0) is None
    assert board.ship_at(0, 4) is None
    assert board.ship_at(99, 99) is None


def test_out_of_bounds_reports_first_failing_cell() -> None:
    board = Battlefield(6)
    territory = split_territories(6)[PlayerId.A]
    with pytest.raises(PlacementError) as excinfo:
        board.place_ship(_ship("SH1", 0, 0), territory)
    assert excinfo.value.reason is PlacementReason.OUT_OF_BOUNDS
    assert excinfo.value.coordinate == Coordinate(-1, -1)
    assert excinfo.value.ship_id == "SH1"


def test_wrong_territory_is_rejected() -> None:
    board = Battlefield(6)
    territory = split_territories(6)[PlayerId.A]
    with pytest.raises(PlacementError) as excinfo:
        board.place_ship(_ship("SH1", 3, 3), territory)
    assert excinfo.value.reason is PlacementReason.WRONG_TERRITORY
    assert excinfo.value.coordinate == Coordinate(3, 2)


def test_overlap_is_rejected_and_nothing_is_written() -> None:
    board = Battlefield(6)
    territory = split_territories(6)[PlayerId.A]
    first = _ship("SH1", 1, 5)
    board.place_ship(first, territory)
    before = board.grid.copy()

    with pytest.raises(PlacementError) as excinfo:
        board.place_ship(_ship("SH2", 1, 4), territory)
    assert excinfo.value.reason is PlacementReason.OVERLAP
    assert excinfo.value.coordinate == Coordinate(0, 4)
    assert np.array_equal(board.grid, before)
    assert board.ships == (first,)


def test_edge_adjacent_ships_are_allowed() -> None:
    board = Battlefield(6)
    territory = split_territories(6)[PlayerId.A]
    first = _ship("SH1", 1, 5)
    second = _ship("SH2", 1, 3)
    board.place_ship(first, territory)
    assert board.can_place(second, territory)
    board.place_ship(second, territory)
    assert board.occupied_cells() == set(first.footprint) | set(second.footprint)
    assert board.ship_at(0, 3) is second
    assert board.ship_at(0, 4) is first


def test_snapshot_lists_occupied_cells_with_owner() -> None:
    board = Battlefield(6)
    territories = split_territories(6)
    board.place_ship(_ship("SH1", 1, 5), territories[PlayerId.A])
    board.place_ship(_ship("SH1", 4, 4, PlayerId.B), territories[PlayerId.B])
    snapshot = board.snapshot(frozenset({Coordinate(3, 0)}))
    assert snapshot.size == 6
    assert len(snapshot.cells) == 8
    assert snapshot.cell(0, 4).owner is PlayerId.A
    assert snapshot.cell(3, 3).label == "B-SH1"
    assert snapshot.fired == {Coordinate(3, 0)}
