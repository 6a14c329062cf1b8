from __future__ import annotations

import warnings
from datetime import timezone

import pytest

from pokedex_app.db.base import make_engine, make_session_factory, session_scope
from pokedex_app.db.models import Preference, utcnow
from pokedex_app.db.repository import set_preference
from pokedex_app.services.preferences import FAVORITES_KEY, THEME_KEY, PreferenceStore


def test_defaults_when_nothing_saved(store):
    assert store.load_favorites() == frozenset()
    assert store.load_theme() == "dark"


def test_round_trip_survives_new_store(tmp_path):
    url = f"sqlite:///{tmp_path / 'prefs.db'}"
    first = PreferenceStore(make_engine(url))
    first.save_favorites({25, 1})
    first.save_theme("light")

    second = PreferenceStore(make_engine(url))
    assert second.load_favorites() == {1, 25}
    assert second.load_theme() == "light"


def test_overwrite_existing_value(store):
    store.save_favorites({1})
    store.save_favorites(set())
    assert store.load_favorites() == frozenset()


def test_invalid_theme_is_rejected(store):
    with pytest.raises(ValueError):
        store.save_theme("sepia")


def test_corrupt_values_fall_back_to_defaults(tmp_path, caplog):
    engine = make_engine(f"sqlite:///{tmp_path / 'prefs.db'}")
    store = PreferenceStore(engine)
    with session_scope(make_session_factory(engine)) as s:
        set_preference(s, FAVORITES_KEY, "{not json")
        set_preference(s, THEME_KEY, "sepia")

    with caplog.at_level("WARNING"):
        assert store.load_favorites() == frozenset()
        assert store.load_theme() == "dark"
    assert "ilegibles" in caplog.text


def test_updated_at_is_timezone_aware(store):
    assert utcnow().tzinfo is timezone.utc

    with warnings.catch_warnings():
        warnings.filterwarnings("error", message=".*utcnow.*")
        store.save_theme("light")
        store.save_theme("dark")

    with session_scope(store._factory) as s:
        pref = s.get(Preference, THEME_KEY)
        assert pref.value == "dark"
        assert pref.updated_at is not None
