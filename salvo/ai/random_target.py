"""Uniform-random targeting, the default strategy."""

from __future__ import annotations

import random
from collections.abc import Collection, Set

from salvo.ai.strategy import TargetingStrategy, eligible_targets
from salvo.core.models import Coordinate


class RandomTargeting(TargetingStrategy):
    """Pick uniformly among eligible coordinates; seed ``rng`` for replayable games."""

    name = "random"

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def select_target(
        self, candidates: Collection[Coordinate], excluded: Set[Coordinate]
    ) -> Coordinate | None:
        available = eligible_targets(candidates, excluded)
        if not available:
            return None
        return self._rng.choice(available)
