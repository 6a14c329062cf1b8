"""Fixtures compartidas: Pokémon de prueba y store sobre SQLite temporal."""
from __future__ import annotations

from typing import Callable, Iterable

import pytest

from pokedex_app.db.base import make_engine
from pokedex_app.models.pokemon import STAT_KEYS, Pokemon, Stat, TypeTag
from pokedex_app.services.preferences import PreferenceStore


@pytest.fixture
def make_pokemon() -> Callable[..., Pokemon]:
    def _make(pokemon_id: int, name: str, types: Iterable[str] = ("normal",),
              hp: int = 50, attack: int = 50) -> Pokemon:
        values = [hp, attack, 40, 30, 30, 20]
        return Pokemon(
            id=pokemon_id,
            name=name,
            types=tuple(TypeTag(t) for t in types),
            stats=tuple(Stat(k, v) for k, v in zip(STAT_KEYS, values)),
        )
    return _make


@pytest.fixture
def store(tmp_path) -> PreferenceStore:
    return PreferenceStore(make_engine(f"sqlite:///{tmp_path / 'prefs.db'}"))
