"""Lattice-first targeting.

Ships are squares with an even side of at least 2, so each one covers a 2x2
block, and every 2x2 block contains exactly one cell whose column and row are
both even. Firing at that lattice first is enough to find every ship; the
remaining cells are only tried once the lattice is exhausted.
"""

from __future__ import annotations

import random
from collections.abc import Collection, Set

from salvo.ai.strategy import TargetingStrategy, eligible_targets
from salvo.core.models import Coordinate


def on_lattice(coord: Coordinate) -> bool:
    return coord.x % 2 == 0 and coord.y % 2 == 0


class ParityTargeting(TargetingStrategy):
    """Random choice among eligible lattice cells, then among the rest."""

    name = "parity"

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select_target(
        self, candidates: Collection[Coordinate], excluded: Set[Coordinate]
    ) -> Coordinate | None:
        available = eligible_targets(candidates, excluded)
        if not available:
            return None
        lattice = [coord for coord in available if on_lattice(coord)]
        return self._rng.choice(lattice or available)
