from __future__ import annotations
import logging
import socket
from urllib.parse import urlparse

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 1.0


def is_online(url: str = "https://pokeapi.co", timeout: float = DEFAULT_TIMEOUT) -> bool:
    """
    True si se puede abrir una conexión TCP con el host de la URL.

    A diferencia de un flag del sistema, esto sí toca la red: resuelve DNS y abre
    un socket en cada ciclo de fetch, así que sin conexión el ciclo puede tardar
    hasta ``timeout`` segundos en fallar como OFFLINE.
    """
    parsed = urlparse(url)
    host = parsed.hostname or url
    port = parsed.port or (443 if parsed.scheme == "https" else 80)
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError as exc:
        log.debug("Sin conexión con %s:%s (%s)", host, port, exc)
        return False
