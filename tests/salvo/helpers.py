from __future__ import annotations

from collections.abc import Collection, Set

from salvo.ai.strategy import TargetingStrategy
from salvo.core.models import Coordinate


class ScriptedTargeting(TargetingStrategy):
    """Returns a fixed answer regardless of what is eligible."""

    name = "scripted"

    def __init__(self, answer: Coordinate | None) -> None:
        self.answer = answer
        self.calls = 0

    def select_target(
        self, candidates: Collection[Coordinate], excluded: Set[Coordinate]
    ) -> Coordinate | None:
        self.calls += 1
        return self.answer
