"""Plain-text rendering of battlefield snapshots and turn events."""

from __future__ import annotations

from salvo.core.models import BattlefieldSnapshot, GameOutcome, OutcomeKind, TurnEvent

CELL_WIDTH = 7


def render_battlefield(snapshot: BattlefieldSnapshot) -> str:
    """Render the grid with the highest row first, one ``|``-separated cell per column."""
    lines = ["--- Current Battlefield ---"]
    for y in snapshot.rows_top_down():
        parts = ["|"]
        for x in range(snapshot.size):
            cell = snapshot.cell(x, y)
            text = ""
            if cell is not None:
                text = f"{cell.label}*" if cell.destroyed else cell.label
            parts.append(f" {text:<{CELL_WIDTH - 1}}|")
        lines.append("".join(parts))
    lines.append("-" * (1 + snapshot.size * (CELL_WIDTH + 1)))
    return "\n".join(lines)


def format_turn(event: TurnEvent) -> str:
    if event.is_hit:
        result = f'"Hit" {event.defender.value}-{event.ship_id} destroyed'
        if event.already_destroyed:
            result += " (already)"
    else:
        result = '"Miss"'
    remaining = ", ".join(
        f"{player.display_name}:{count}" for player, count in sorted(event.remaining.items())
    )
    return (
        f"{event.attacker.display_name}'s turn: Missile fired at "
        f"({event.target.x}, {event.target.y}) : {result} : Ships Remaining - {remaining}"
    )


def format_outcome(outcome: GameOutcome) -> str:
    if outcome.kind is OutcomeKind.WIN and outcome.winner is not None:
        return f"GameOver. {outcome.winner.display_name} wins."
    if outcome.kind is OutcomeKind.DRAW:
        return "No more coordinates to fire at. Game is a draw."
    return "Game in progress."
