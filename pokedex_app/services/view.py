"""Vista derivada: filtro -> orden estable -> paginación. Funciones puras."""
from __future__ import annotations
import locale
import unicodedata
from typing import Callable, Dict, Iterable, List, Sequence

from ..models.pokemon import ATTACK, HP, Pokemon
from ..models.state import SortKey
from .types import ALL


def matches(pokemon: Pokemon, search_term: str, selected_type: str) -> bool:
    matches_search = search_term.casefold() in pokemon.name.casefold()
    matches_type = selected_type == ALL or pokemon.has_type(selected_type)
    return matches_search and matches_type


def filter_pokemon(entities: Iterable[Pokemon], search_term: str, selected_type: str) -> List[Pokemon]:
    return [p for p in entities if matches(p, search_term, selected_type)]


def name_sort_key(name: str):
    """Orden tipo localeCompare: sin distinguir mayúsculas ni acentos."""
    base = "".join(c for c in unicodedata.normalize("NFKD", name) if not unicodedata.combining(c))
    return locale.strxfrm(base.casefold())


# HP/ATK ordenan descendente por la posición fija del stat; negar la clave conserva la estabilidad
_SORT_KEYS: Dict[SortKey, Callable[[Pokemon], object]] = {
    SortKey.ID: lambda p: p.id,
    SortKey.NAME: lambda p: name_sort_key(p.name),
    SortKey.HP: lambda p: -p.stats[HP].base_value,
    SortKey.ATTACK: lambda p: -p.stats[ATTACK].base_value,
}


def sort_pokemon(entities: Iterable[Pokemon], sort_key: SortKey) -> List[Pokemon]:
    return sorted(entities, key=_SORT_KEYS[SortKey(sort_key)])


def paginate(entities: Sequence[Pokemon], page_size: int) -> List[Pokemon]:
    return list(entities[:max(page_size, 0)])


def derive(entities: Iterable[Pokemon], search_term: str, selected_type: str,
           sort_key: SortKey, page_size: int) -> List[Pokemon]:
    return paginate(sort_pokemon(filter_pokemon(entities, search_term, selected_type), sort_key), page_size)


def has_more(filtered_count: int, page_size: int) -> bool:
    """Hay botón "Load More" mientras queden elementos por mostrar."""
    return page_size < filtered_count
