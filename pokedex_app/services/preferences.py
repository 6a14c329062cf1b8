"""Preferencias persistentes del usuario (favoritos y tema) sobre la tabla ``preferences``."""
from __future__ import annotations
import json
import logging
from typing import FrozenSet, Iterable

from sqlalchemy.engine import Engine

from ..db.base import make_session_factory, session_scope
from ..db.repository import get_preference, init_db, set_preference
from ..models.state import DEFAULT_THEME, THEME_DARK, THEME_LIGHT

log = logging.getLogger(__name__)

FAVORITES_KEY = "pokeFavorites"
THEME_KEY = "pokeTheme"


class PreferenceStore:
    def __init__(self, engine: Engine):
        self._factory = make_session_factory(engine)
        init_db(engine)

    def load_favorites(self) -> FrozenSet[int]:
        with session_scope(self._factory) as s:
            raw = get_preference(s, FAVORITES_KEY)
        if raw is None:
            return frozenset()
        try:
            return frozenset(int(x) for x in json.loads(raw))
        except (ValueError, TypeError):
            log.warning("Favoritos guardados ilegibles (%r); se usa la lista vacía", raw)
            return frozenset()

    def save_favorites(self, favorites: Iterable[int]) -> None:
        payload = json.dumps(sorted(favorites))
        with session_scope(self._factory) as s:
            set_preference(s, FAVORITES_KEY, payload)

    def load_theme(self) -> str:
        with session_scope(self._factory) as s:
            raw = get_preference(s, THEME_KEY)
        if raw is None:
            return DEFAULT_THEME
        if raw not in (THEME_DARK, THEME_LIGHT):
            log.warning("Tema guardado desconocido (%r); se usa '%s'", raw, DEFAULT_THEME)
            return DEFAULT_THEME
        return raw

    def save_theme(self, theme: str) -> None:
        if theme not in (THEME_DARK, THEME_LIGHT):
            raise ValueError(f"Tema inválido: '{theme}'")
        with session_scope(self._factory) as s:
            set_preference(s, THEME_KEY, theme)
