"""Targeting strategies and selection by name."""

from __future__ import annotations

import random

from salvo.ai.parity import ParityTargeting
from salvo.ai.random_target import RandomTargeting
from salvo.ai.strategy import TargetingStrategy, eligible_targets
from salvo.ai.sweep import SweepTargeting

STRATEGY_NAMES: tuple[str, ...] = ("random", "sweep", "parity")


def build_strategy(name: str, rng: random.Random | None = None) -> TargetingStrategy:
    """Construct a targeting strategy from its name."""
    selected = name.strip().lower()
    if selected == "random":
        return RandomTargeting(rng)
    if selected == "sweep":
        return SweepTargeting()
    if selected == "parity":
        return ParityTargeting(rng)
    raise ValueError(f"Unknown strategy '{name}'. Choose one of: {', '.join(STRATEGY_NAMES)}.")


__all__ = [
    "STRATEGY_NAMES",
    "ParityTargeting",
    "RandomTargeting",
    "SweepTargeting",
    "TargetingStrategy",
    "build_strategy",
    "eligible_targets",
]
