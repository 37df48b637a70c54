"""Game setup and the alternating turn loop."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from salvo.ai.random_target import RandomTargeting
from salvo.ai.strategy import TargetingStrategy
from salvo.core.battlefield import Battlefield
from salvo.core.errors import (
    DuplicateShipError,
    GameError,
    GameStateError,
    InvalidShipError,
    InvalidSizeError,
    NotReadyError,
    StrategyError,
)
from salvo.core.fleet import PlayerState
from salvo.core.models import (
    BattlefieldSnapshot,
    Coordinate,
    GameFinished,
    GameOutcome,
    GameState,
    PlayerId,
    Ship,
    ShotResult,
    TurnEvent,
    split_territories,
)
from salvo.events import EventBus

logger = logging.getLogger(__name__)

CoordinateLike = Coordinate | tuple[int, int]


class GameEngine:
    """Owns one game's battlefield, players and global fired-set.

    Lifecycle: ``UNINITIALIZED -> SETUP -> IN_PROGRESS -> FINISHED``. Player A
    always fires first and players alternate until one fleet is destroyed
    (win) or the attacker has no legal target left (draw).
    """

    def __init__(
        self,
        strategy: TargetingStrategy | None = None,
        *,
        strategies: Mapping[PlayerId, TargetingStrategy] | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        default = strategy if strategy is not None else RandomTargeting()
        self._strategies: dict[PlayerId, TargetingStrategy] = {
            PlayerId.A: default,
            PlayerId.B: default,
        }
        if strategies:
            self._strategies.update(strategies)
        self.events = event_bus if event_bus is not None else EventBus()
        self._reset()

    def _reset(self) -> None:
        self._state = GameState.UNINITIALIZED
        self._battlefield: Battlefield | None = None
        self._players: dict[PlayerId, PlayerState] = {}
        self._fired: set[Coordinate] = set()
        self._active: PlayerId | None = None
        self._outcome = GameOutcome.in_progress()
        self._history: list[TurnEvent] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def size(self) -> int | None:
        return self._battlefield.size if self._battlefield is not None else None

    @property
    def battlefield(self) -> Battlefield | None:
        return self._battlefield

    @property
    def active_player(self) -> PlayerId | None:
        return self._active

    @property
    def turns_played(self) -> int:
        return len(self._history)

    @property
    def history(self) -> tuple[TurnEvent, ...]:
        return tuple(self._history)

    @property
    def fired_coordinates(self) -> frozenset[Coordinate]:
        return frozenset(self._fired)

    def player(self, player_id: PlayerId) -> PlayerState:
        """Return the state of one player."""
        if player_id not in self._players:
            logger.warning("player_lookup_rejected reason=uninitialized")
            raise NotReadyError("Game not initialized. Call initialize(n) first.")
        return self._players[player_id]

    def strategy_for(self, player_id: PlayerId) -> TargetingStrategy:
        return self._strategies[player_id]

    def initialize(self, n: int) -> None:
        """Create the battlefield and both players for an ``n`` x ``n`` game.

        Any previous game held by this engine is discarded, including when
        ``n`` is rejected.
        """
        self._reset()
        try:
            territories = split_territories(n)
        except InvalidSizeError:
            logger.warning("initialize_rejected size=%r", n)
            raise
        self._battlefield = Battlefield(n)
        self._players = {
            player_id: PlayerState(player_id=player_id, territory=territory, board_size=n)
            for player_id, territory in territories.items()
        }
        self._state = GameState.SETUP
        logger.info("game_initialized size=%d", n)

    def register_ship(
        self,
        ship_id: str,
        size: int,
        center_a: CoordinateLike,
        center_b: CoordinateLike,
    ) -> tuple[Ship, Ship]:
        """Add the same ship to both fleets at independent centers.

        Both placements are validated before either is written; on error the
        battlefield and fleets are left untouched and the engine stays in setup.
        """
        battlefield = self._require_setup()
        try:
            ship_a = Ship(ship_id, size, _as_coordinate(center_a, ship_id), PlayerId.A)
            ship_b = Ship(ship_id, size, _as_coordinate(center_b, ship_id), PlayerId.B)
            pair = (ship_a, ship_b)
            for ship in pair:
                if ship.ship_id in self._players[ship.owner].fleet:
                    raise DuplicateShipError(ship.ship_id, ship.owner)
            for ship in pair:
                battlefield.validate_placement(ship, self._players[ship.owner].territory)
        except GameError as exc:
            logger.warning("ship_rejected id=%s error=%s", ship_id, exc)
            raise

        for ship in pair:
            player = self._players[ship.owner]
            battlefield.place_ship(ship, player.territory)
            player.add_ship(ship)
        logger.info("ship_registered id=%s size=%d", ship_id, size)
        return ship_a, ship_b

    def start(self, *, run_to_completion: bool = True) -> GameOutcome:
        """Begin play with player A; by default run until the game finishes."""
        if self._state is GameState.UNINITIALIZED:
            logger.warning("start_rejected reason=uninitialized")
            raise NotReadyError("Cannot start game: initialize the battlefield first.")
        if self._state is not GameState.SETUP:
            logger.warning("start_rejected state=%s", self._state.value)
            raise GameStateError(f"Cannot start game in state {self._state.value}.")
        if not self._players[PlayerId.A].has_ships:
            logger.warning("start_rejected reason=empty_fleet")
            raise NotReadyError("Cannot start game: add at least one ship first.")

        self._state = GameState.IN_PROGRESS
        self._active = PlayerId.A
        logger.info(
            "game_started ships=%d strategy_a=%s strategy_b=%s",
            len(self._players[PlayerId.A].fleet),
            self._strategies[PlayerId.A].name,
            self._strategies[PlayerId.B].name,
        )
        if run_to_completion:
            return self.run()
        return self._outcome

    def run(self) -> GameOutcome:
        """Play turns until the game is finished."""
        if self._state is GameState.FINISHED:
            return self._outcome
        self._require_in_progress()
        while self._state is GameState.IN_PROGRESS:
            self.step()
        return self._outcome

    def step(self) -> TurnEvent | None:
        """Play one turn.

        Returns the resolved turn, or ``None`` when the attacker has no target
        left and the game ends in a draw without a shot.
        """
        self._require_in_progress()
        battlefield = self._battlefield
        assert battlefield is not None and self._active is not None

        attacker = self._active
        defender = attacker.opponent
        defender_state = self._players[defender]
        strategy = self._strategies[attacker]

        candidates = frozenset(defender_state.territory_coordinates())
        excluded = frozenset(self._fired)
        target = strategy.select_target(candidates, excluded)
        if target is None:
            logger.info("no_targets_left attacker=%s", attacker.value)
            self._finish(GameOutcome.draw())
            self._publish_finished()
            return None
        if target not in candidates or target in excluded:
            logger.warning("target_rejected strategy=%s target=%r", strategy.name, target)
            raise StrategyError(
                f"Strategy '{strategy.name}' selected ineligible target {target!r}."
            )

        self._fired.add(target)
        self._players[attacker].record_shot(target)

        result = ShotResult.MISS
        ship_id: str | None = None
        already_destroyed = False
        ship = battlefield.ship_at(target.x, target.y)
        if ship is not None and ship.owner is defender:
            result = ShotResult.HIT
            ship_id = ship.ship_id
            already_destroyed = not ship.destroy()

        event = TurnEvent(
            turn=len(self._history) + 1,
            attacker=attacker,
            defender=defender,
            target=target,
            result=result,
            remaining=MappingProxyType(self._remaining()),
            ship_id=ship_id,
            already_destroyed=already_destroyed,
        )
        self._history.append(event)
        logger.debug(
            "turn_resolved",
            extra={
                "turn": event.turn,
                "attacker": attacker.value,
                "target": (target.x, target.y),
                "result": result.value,
                "ship_id": ship_id,
            },
        )
        finished = defender_state.remaining_ship_count() == 0
        if finished:
            self._finish(GameOutcome.win(attacker))
        else:
            self._active = defender

        strategy.notify_result(event)
        self.events.publish(event)
        if finished:
            self._publish_finished()
        return event

    def outcome(self) -> GameOutcome:
        return self._outcome

    def snapshot(self) -> BattlefieldSnapshot | None:
        """Read-only occupancy view, or ``None`` before initialization."""
        if self._battlefield is None:
            return None
        return self._battlefield.snapshot(frozenset(self._fired))

    def _remaining(self) -> dict[PlayerId, int]:
        return {player_id: state.remaining_ship_count() for player_id, state in self._players.items()}

    def _finish(self, outcome: GameOutcome) -> None:
        self._outcome = outcome
        self._state = GameState.FINISHED
        self._active = None
        winner = outcome.winner.value if outcome.winner is not None else "-"
        logger.info(
            "game_finished outcome=%s winner=%s turns=%d",
            outcome.kind.value,
            winner,
            self.turns_played,
        )

    def _publish_finished(self) -> None:
        self.events.publish(GameFinished(outcome=self._outcome, turns=self.turns_played))

    def _require_setup(self) -> Battlefield:
        if self._state is GameState.UNINITIALIZED or self._battlefield is None:
            logger.warning("setup_rejected reason=uninitialized")
            raise NotReadyError("Game not initialized. Call initialize(n) first.")
        if self._state is not GameState.SETUP:
            logger.warning("setup_rejected state=%s", self._state.value)
            raise GameStateError(f"Ships can only be registered during setup, not {self._state.value}.")
        return self._battlefield

    def _require_in_progress(self) -> None:
        if self._state is GameState.FINISHED:
            logger.warning("turn_rejected state=finished")
            raise GameStateError("Game is finished; no further turns are accepted.")
        if self._state is not GameState.IN_PROGRESS:
            logger.warning("turn_rejected state=%s", self._state.value)
            raise NotReadyError("Game has not been started.")


def _as_coordinate(value: CoordinateLike, ship_id: str) -> Coordinate:
    if isinstance(value, Coordinate):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise InvalidShipError(
            f"ship center must be an (x, y) pair, got {value!r}", ship_id=str(ship_id)
        ) from None
    return Coordinate(x, y)
