from __future__ import annotations

import os

import pytest

from salvo.infra.config import (
    DEFAULT_BOARD_SIZE,
    GameSettings,
    load_default_env_files,
    load_env_file,
    load_settings,
)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "SALVO_A=1\nSALVO_B='two'\n#comment\nINVALID\nSALVO_C=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("SALVO_C", "already")
    monkeypatch.setenv("SALVO_A", "")
    monkeypatch.setenv("SALVO_B", "")
    load_env_file(str(env_file))
    assert os.environ.get("SALVO_A") == "1"
    assert os.environ.get("SALVO_B") == "two"
    assert os.environ.get("SALVO_C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SALVO_C=three\n", encoding="utf-8")
    monkeypatch.setenv("SALVO_C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("SALVO_C") == "already"


def test_load_env_file_missing_is_noop(tmp_path) -> None:
    before = dict(os.environ)
    load_env_file(str(tmp_path / ".env.missing"))
    assert dict(os.environ) == before


def test_load_default_env_files_later_files_win(tmp_path, monkeypatch) -> None:
    base = tmp_path / ".env"
    local = tmp_path / ".env.local"
    base.write_text("SALVO_X=base\nSALVO_Y=base\n", encoding="utf-8")
    local.write_text("SALVO_Y=local\n", encoding="utf-8")
    monkeypatch.setenv("SALVO_X", "")
    monkeypatch.setenv("SALVO_Y", "")

    load_default_env_files(paths=(str(base), str(local)))
    assert os.environ.get("SALVO_X") == "base"
    assert os.environ.get("SALVO_Y") == "local"


def test_load_settings_defaults(monkeypatch) -> None:
    for name in ("SALVO_BOARD_SIZE", "SALVO_SEED", "SALVO_STRATEGY"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == GameSettings(board_size=DEFAULT_BOARD_SIZE, seed=None, strategy="random")


def test_load_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("SALVO_BOARD_SIZE", "8")
    monkeypatch.setenv("SALVO_SEED", " 42 ")
    monkeypatch.setenv("SALVO_STRATEGY", "Parity")
    settings = load_settings()
    assert settings.board_size == 8
    assert settings.seed == 42
    assert settings.strategy == "parity"


def test_load_settings_rejects_malformed_integers(monkeypatch) -> None:
    monkeypatch.setenv("SALVO_BOARD_SIZE", "ten")
    with pytest.raises(ValueError, match="SALVO_BOARD_SIZE"):
        load_settings()
