"""Dobles de prueba para PokéAPI: payloads, respuestas y una sesión HTTP falsa."""
from __future__ import annotations

import threading
from typing import Any, Dict, Iterable

import requests

from pokedex_app.models.pokemon import STAT_KEYS


def api_payload(pokemon_id: int, name: str, types: Iterable[str] = ("normal",),
                hp: int = 50, attack: int = 50, sprites: Dict[str, Any] | None = None) -> Dict[str, Any]:
    values = [hp, attack, 40, 30, 30, 20]
    return {
        "id": pokemon_id,
        "name": name,
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)],
        "stats": [{"base_stat": v, "stat": {"name": k}} for k, v in zip(STAT_KEYS, values)],
        "abilities": [{"ability": {"name": "run-away"}}],
        "height": 7,
        "weight": 69,
        "sprites": sprites if sprites is not None else {"front_default": f"https://img/{pokemon_id}.png"},
    }


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


class FakeSession:
    """Responde por URL; un valor Exception se lanza, un callable se invoca antes de responder."""

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def get(self, url, params=None, timeout=None):
        with self._lock:
            self.calls.append(url)
        route = self.routes[url]
        if callable(route) and not isinstance(route, FakeResponse):
            route = route()
        if isinstance(route, Exception):
            raise route
        return route


LIST_URL = "https://pokeapi.test/api/v2/pokemon"


def detail_url(pokemon_id: int) -> str:
    return f"{LIST_URL}/{pokemon_id}/"


def list_response(*names_ids) -> FakeResponse:
    return FakeResponse({"results": [{"name": n, "url": detail_url(i)} for i, n in names_ids]})
