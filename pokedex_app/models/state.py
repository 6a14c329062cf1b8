from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from .pokemon import Pokemon

PAGE_SIZE_START = 20
PAGE_SIZE_STEP = 20
SCROLL_THRESHOLD = 500

THEME_DARK = "dark"
THEME_LIGHT = "light"
DEFAULT_THEME = THEME_DARK


class CatalogStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class SortKey(Enum):
    ID = "id"
    NAME = "name"
    HP = "hp"
    ATTACK = "attack"


@dataclass(frozen=True)
class CatalogState:
    """Pokémon descargados + estado de carga. Se reemplaza entero en cada ciclo de fetch."""
    entities: Tuple[Pokemon, ...] = ()
    status: CatalogStatus = CatalogStatus.LOADING
    error_message: Optional[str] = None
    version: int = 0

    @property
    def by_id(self) -> Dict[int, Pokemon]:
        return {p.id: p for p in self.entities}


@dataclass(frozen=True)
class ViewState:
    search_term: str = ""
    selected_type: str = "all"
    sort_key: SortKey = SortKey.ID
    page_size: int = PAGE_SIZE_START
    show_more_types: bool = False
    selection: Optional[Pokemon] = None
    favorites: FrozenSet[int] = field(default_factory=frozenset)
    theme: str = DEFAULT_THEME
    scrolled_past_threshold: bool = False
