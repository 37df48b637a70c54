"""Targeting strategy interface and selection utilities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection, Set

from salvo.core.models import Coordinate, TurnEvent


class TargetingStrategy(ABC):
    """Chooses the next coordinate to fire at.

    Implementations must return a member of ``candidates`` that is not in
    ``excluded``, or ``None`` when no such coordinate exists. Inputs must not
    be mutated.
    """

    name = "strategy"

    @abstractmethod
    def select_target(
        self, candidates: Collection[Coordinate], excluded: Set[Coordinate]
    ) -> Coordinate | None:
        """Return next coordinate to fire, or ``None`` when none is eligible."""

    def notify_result(self, event: TurnEvent) -> None:
        """Observe a resolved turn. Optional; the default ignores it."""


def eligible_targets(
    candidates: Collection[Coordinate], excluded: Set[Coordinate]
) -> list[Coordinate]:
    """Candidates not yet excluded, sorted so selection is reproducible."""
    return sorted(coord for coord in set(candidates) if coord not in excluded)
