from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_DB_PATH = os.path.join(os.path.dirname(__file__), "..", "pokedex.db")
DEFAULT_DB_URL = f"sqlite:///{os.path.abspath(DEFAULT_DB_PATH)}"
DEFAULT_LIST_URL = "https://pokeapi.co/api/v2/pokemon"

# Los 151 originales
DEFAULT_PAGE_LIMIT = 151
DEFAULT_HTTP_TIMEOUT = 15
# None = un hilo por referencia, la fase de detalle dura lo que la petición más lenta
DEFAULT_MAX_WORKERS = None


def default_db_url() -> str:
    return os.environ.get("POKE_DB_URL", DEFAULT_DB_URL)


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} debe ser un entero, no '{raw}'") from None
    if value < 1:
        raise ValueError(f"{name} debe ser >= 1, no {value}")
    return value


@dataclass(frozen=True)
class Settings:
    db_url: str = DEFAULT_DB_URL
    list_url: str = DEFAULT_LIST_URL
    page_limit: int = DEFAULT_PAGE_LIMIT
    http_timeout: int = DEFAULT_HTTP_TIMEOUT
    max_workers: Optional[int] = DEFAULT_MAX_WORKERS
    log_level: int = logging.INFO
    log_dir: Optional[str] = None  # si se define, además se escribe logs/app.log rotativo

    @classmethod
    def from_env(cls) -> "Settings":
        """Lee la configuración de las variables POKE_* (ver README de despliegue)."""
        level_name = os.environ.get("POKE_LOG_LEVEL", "INFO").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"POKE_LOG_LEVEL desconocido: '{level_name}'")
        return cls(
            db_url=default_db_url(),
            list_url=os.environ.get("POKE_API_LIST_URL", DEFAULT_LIST_URL),
            page_limit=_env_int("POKE_PAGE_LIMIT", DEFAULT_PAGE_LIMIT),
            http_timeout=_env_int("POKE_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            max_workers=_env_int("POKE_MAX_WORKERS", DEFAULT_MAX_WORKERS),
            log_level=level,
            log_dir=os.environ.get("POKE_LOG_DIR") or None,
        )
