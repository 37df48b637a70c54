"""Runtime configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BOARD_SIZE = 10
DEFAULT_STRATEGY = "random"


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Defaults for a game run, resolved from the environment."""

    board_size: int = DEFAULT_BOARD_SIZE
    seed: int | None = None
    strategy: str = DEFAULT_STRATEGY


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load ``.env`` then ``.env.local``; later files win."""
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_settings() -> GameSettings:
    """Build ``GameSettings`` from ``SALVO_*`` environment variables."""
    seed_raw = os.getenv("SALVO_SEED", "").strip()
    return GameSettings(
        board_size=_int_env("SALVO_BOARD_SIZE", DEFAULT_BOARD_SIZE),
        seed=_parse_int("SALVO_SEED", seed_raw) if seed_raw else None,
        strategy=os.getenv("SALVO_STRATEGY", DEFAULT_STRATEGY).strip().lower() or DEFAULT_STRATEGY,
    )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return _parse_int(name, raw)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
