from datetime import datetime, timezone
import random

import pytest


class ScriptedRandom:
    """Fonte aleatória que devolve os índices informados, em ciclo"""

    def __init__(self, indices):
        self._indices = list(indices)
        self._posicao = 0

    def choice(self, seq):
        indice = self._indices[self._posicao % len(self._indices)]
        self._posicao += 1
        return seq[indice]


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 12, 19, 10, 0, 0, 987654, tzinfo=timezone.utc)


@pytest.fixture
def seeded_rng():
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def clean_env(monkeypatch):
    for nome in ("DEMO_STATE_LENGTH", "DEMO_RANDOM_SEED", "DEMO_INITIAL_STATE"):
        monkeypatch.delenv(nome, raising=False)
    return monkeypatch
