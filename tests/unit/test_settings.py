from __future__ import annotations

import pytest

from side_effects.settings import Settings


def test_blank_random_seed_means_unseeded(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_SEED", "")

    assert Settings().random_seed is None


def test_random_seed_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_SEED", "17")

    assert Settings().random_seed == 17


def test_dev_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEV_RELOAD", "true")

    assert Settings().dev_reload is True
