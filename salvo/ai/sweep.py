"""Deterministic column-major sweep."""

from __future__ import annotations

from collections.abc import Collection, Set

from salvo.ai.strategy import TargetingStrategy, eligible_targets
from salvo.core.models import Coordinate


class SweepTargeting(TargetingStrategy):
    """Fire at the lowest eligible column, then the lowest row within it."""

    name = "sweep"

    def select_target(
        self, candidates: Collection[Coordinate], excluded: Set[Coordinate]
    ) -> Coordinate | None:
        available = eligible_targets(candidates, excluded)
        return available[0] if available else None
