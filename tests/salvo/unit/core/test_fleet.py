import pytest

from salvo.core.errors import DuplicateShipError
from salvo.core.fleet import PlayerState
from salvo.core.models import Coordinate, PlayerId, Ship, Territory


def _player() -> PlayerState:
    return PlayerState(player_id=PlayerId.A, territory=Territory(0, 1), board_size=4)


def test_territory_coordinates_are_column_major() -> None:
    coords = _player().territory_coordinates()
    assert coords[:5] == [
        Coordinate(0, 0),
        Coordinate(0, 1),
        Coordinate(0, 2),
        Coordinate(0, 3),
        Coordinate(1, 0),
    ]
    assert len(coords) == 8
    assert len(set(coords)) == 8


def test_remaining_ship_count_tracks_destroyed_flag() -> None:
    player = _player()
    first = Ship("SH1", 2, Coordinate(1, 1), PlayerId.A)
    second = Ship("SH2", 2, Coordinate(1, 3), PlayerId.A)
    player.add_ship(first)
    player.add_ship(second)
    assert player.remaining_ship_count() == 2
    first.destroy()
    assert player.remaining_ship_count() == 1
    first.destroy()
    assert player.remaining_ship_count() == 1
    assert player.ships == (first, second)


def test_add_ship_rejects_duplicate_id() -> None:
    player = _player()
    original = Ship("SH1", 2, Coordinate(1, 1), PlayerId.A)
    player.add_ship(original)
    with pytest.raises(DuplicateShipError):
        player.add_ship(Ship("SH1", 2, Coordinate(1, 3), PlayerId.A))
    assert player.fleet == {"SH1": original}


def test_record_shot() -> None:
    player = _player()
    assert not player.has_ships
    player.record_shot(Coordinate(3, 3))
    player.record_shot(Coordinate(3, 3))
    assert player.fired_shots == {Coordinate(3, 3)}
