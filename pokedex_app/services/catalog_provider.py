# pokedex_app/services/catalog_provider.py
"""
Descarga del catálogo desde PokéAPI: una petición para la lista de referencias
y luego un GET de detalle por referencia, todos en paralelo.

Un detalle que falla se descarta sin abortar el lote; solo la falta de conexión
o el fallo de la lista abortan el ciclo completo.
"""
from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Callable, List, Optional

import requests
from requests.adapters import HTTPAdapter

from ..config import DEFAULT_HTTP_TIMEOUT, DEFAULT_LIST_URL, DEFAULT_MAX_WORKERS
from ..models.pokemon import Pokemon, PokemonRef
from .connectivity import is_online

log = logging.getLogger(__name__)

OFFLINE_MESSAGE = "You are offline. Please check your connection."
LIST_FAILED_MESSAGE = "Failed to fetch Pokemon list"


class ErrorKind(Enum):
    OFFLINE = "offline"
    LIST_FETCH_FAILED = "list_fetch_failed"
    ENTITY_FETCH_FAILED = "entity_fetch_failed"


class CatalogFetchError(RuntimeError):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


def fetch_pokemon_list(session: requests.Session, list_url: str, limit: int,
                       timeout: float = DEFAULT_HTTP_TIMEOUT) -> List[PokemonRef]:
    try:
        r = session.get(list_url, params={"limit": limit}, timeout=timeout)
        r.raise_for_status()
        data = r.json()
        return [PokemonRef(name=item["name"], url=item["url"]) for item in data["results"]]
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        log.error("Fallo al descargar la lista de %s: %s", list_url, exc)
        raise CatalogFetchError(ErrorKind.LIST_FETCH_FAILED, LIST_FAILED_MESSAGE) from exc


def fetch_pokemon_detail(session: requests.Session, ref: PokemonRef,
                         timeout: float = DEFAULT_HTTP_TIMEOUT) -> Pokemon:
    r = session.get(ref.url, timeout=timeout)
    r.raise_for_status()
    return Pokemon.from_api(r.json())


def pool_size(batch: int, max_workers: Optional[int]) -> int:
    """Hilos para un lote: uno por referencia salvo que max_workers lo limite."""
    if max_workers is None:
        return max(batch, 1)
    return max(min(max_workers, batch), 1)


def make_session(pool_maxsize: int) -> requests.Session:
    """Session con tantas conexiones por host como hilos, para que urllib3 no descarte conexiones."""
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=1, pool_maxsize=pool_maxsize)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def _fetch_details(session: requests.Session, refs: List[PokemonRef],
                   timeout: float, max_workers: Optional[int]) -> List[Pokemon]:
    if not refs:
        return []
    with ThreadPoolExecutor(max_workers=pool_size(len(refs), max_workers)) as pool:
        futures = [pool.submit(fetch_pokemon_detail, session, ref, timeout) for ref in refs]
    # al salir del with todas las tareas ya terminaron (bien o mal)

    out: List[Pokemon] = []
    dropped = 0
    for ref, fut in zip(refs, futures):
        exc = fut.exception()
        if exc is not None:
            dropped += 1
            log.debug("%s: %s (%s)", ErrorKind.ENTITY_FETCH_FAILED.value, ref.name, exc)
            continue
        out.append(fut.result())
    if dropped:
        log.warning("Se descartaron %d de %d Pokémon al descargar detalles", dropped, len(refs))
    return out


def fetch_catalog(
    page_limit: int,
    *,
    session: Optional[requests.Session] = None,
    list_url: str = DEFAULT_LIST_URL,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    max_workers: Optional[int] = DEFAULT_MAX_WORKERS,
    online_check: Optional[Callable[[], bool]] = None,
) -> List[Pokemon]:
    """
    Devuelve los Pokémon resueltos en el mismo orden que la lista de referencias.
    Lanza CatalogFetchError(OFFLINE | LIST_FETCH_FAILED). Una lista vacía es un resultado válido.
    Con max_workers=None cada referencia tiene su hilo.
    """
    check = online_check or (lambda: is_online(list_url))
    if not check():
        raise CatalogFetchError(ErrorKind.OFFLINE, OFFLINE_MESSAGE)

    if session is None:
        with make_session(pool_size(page_limit, max_workers)) as own:
            return _run(own, page_limit, list_url, timeout, max_workers)
    return _run(session, page_limit, list_url, timeout, max_workers)


def _run(session: requests.Session, page_limit: int, list_url: str,
         timeout: float, max_workers: Optional[int]) -> List[Pokemon]:
    refs = fetch_pokemon_list(session, list_url, page_limit, timeout)
    pokemon = _fetch_details(session, refs, timeout, max_workers)
    log.info("Catálogo descargado: %d/%d Pokémon", len(pokemon), len(refs))
    return pokemon
