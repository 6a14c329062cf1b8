from __future__ import annotations
import logging
import random
import threading
from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Tuple, Union

from sqlalchemy.exc import SQLAlchemyError

from ..models.pokemon import Pokemon
from ..models.state import CatalogState, CatalogStatus, SortKey, ViewState
from ..services import transitions as tr
from ..services.catalog_provider import CatalogFetchError
from ..services.preferences import PreferenceStore
from ..services.types import TypeFilter, type_filters
from ..services.view import derive, filter_pokemon, has_more

log = logging.getLogger(__name__)

CatalogFetcher = Callable[[int], Sequence[Pokemon]]


class PokedexController:
    """
    Único escritor del estado de la vista y de las preferencias persistentes.
    Cada evento aplica una transición pura y, si toca, guarda en el PreferenceStore.
    """

    def __init__(self, fetch_catalog: CatalogFetcher, store: PreferenceStore,
                 page_limit: int = 151, rng: Optional[random.Random] = None):
        self._fetch_catalog = fetch_catalog
        self._store = store
        self.page_limit = page_limit
        self._rng = rng or random.Random()
        self._fetch_lock = threading.Lock()

        self.catalog = CatalogState()
        self.state = ViewState(favorites=store.load_favorites(), theme=store.load_theme())

        self._view_key: Optional[Tuple] = None
        self._view: List[Pokemon] = []

    # --- ciclo de fetch ---

    def load_catalog(self) -> bool:
        """
        Ejecuta un ciclo completo de descarga. Devuelve False si ya había uno en curso
        (se ignora) o si el ciclo terminó en error.
        """
        if not self._fetch_lock.acquire(blocking=False):
            log.info("Ya hay una descarga del catálogo en curso; se ignora la petición")
            return False
        try:
            self.state = tr.reset_page_size(self.state)
            self.catalog = replace(self.catalog, status=CatalogStatus.LOADING, error_message=None)
            try:
                entities = self._fetch_catalog(self.page_limit)
            except CatalogFetchError as exc:
                log.error("No se pudo cargar el catálogo (%s): %s", exc.kind.value, exc)
                self.catalog = replace(self.catalog, status=CatalogStatus.ERROR, error_message=str(exc))
                return False
            self.catalog = CatalogState(
                entities=tuple(entities),
                status=CatalogStatus.READY,
                version=self.catalog.version + 1,
            )
            return True
        finally:
            self._fetch_lock.release()

    def retry_fetch(self) -> bool:
        return self.load_catalog()

    # --- búsqueda / filtros / orden ---

    def set_search_term(self, term: str):
        self.state = tr.set_search_term(self.state, term)

    def clear_search(self):
        self.state = tr.clear_search(self.state)

    def select_type(self, type_name: str):
        self.state = tr.select_type(self.state, type_name)

    def toggle_more_types(self):
        self.state = tr.toggle_more_types(self.state)

    def set_sort_key(self, key: Union[SortKey, str]):
        self.state = tr.set_sort_key(self.state, key)

    def load_more(self):
        self.state = tr.load_more(self.state, self.filtered_count)

    def scroll_position_changed(self, y: float):
        self.state = tr.scroll_position_changed(self.state, y)

    # --- selección ---

    def select_pokemon(self, pokemon: Pokemon):
        self.state = tr.select_pokemon(self.state, pokemon)

    open_detail = select_pokemon

    def dismiss_detail(self):
        self.state = tr.dismiss_detail(self.state)

    def request_random_pokemon(self):
        self.state = tr.request_random_pokemon(self.state, self.catalog.entities, self._rng)

    # --- preferencias (write-through) ---

    def toggle_favorite(self, pokemon_id: int):
        self.state = tr.toggle_favorite(self.state, pokemon_id)
        try:
            self._store.save_favorites(self.state.favorites)
        except SQLAlchemyError:
            log.exception("No se guardaron los favoritos; en memoria: %s", sorted(self.state.favorites))

    def toggle_theme(self):
        self.state = tr.toggle_theme(self.state)
        try:
            self._store.save_theme(self.state.theme)
        except SQLAlchemyError:
            log.exception("No se guardó el tema; en memoria: %s", self.state.theme)

    # --- lectura ---

    @property
    def visible_pokemon(self) -> List[Pokemon]:
        s = self.state
        key = (self.catalog.version, s.search_term, s.selected_type, s.sort_key, s.page_size)
        if key != self._view_key:
            self._view = derive(self.catalog.entities, s.search_term, s.selected_type, s.sort_key, s.page_size)
            self._view_key = key
        return list(self._view)

    @property
    def filtered_count(self) -> int:
        return len(filter_pokemon(self.catalog.entities, self.state.search_term, self.state.selected_type))

    @property
    def has_more(self) -> bool:
        return has_more(self.filtered_count, self.state.page_size)

    @property
    def is_single_result(self) -> bool:
        return len(self.visible_pokemon) == 1

    @property
    def favorite_count(self) -> int:
        return len(self.state.favorites)

    def is_favorite(self, pokemon_id: int) -> bool:
        return pokemon_id in self.state.favorites

    @property
    def type_filters(self) -> List[TypeFilter]:
        return type_filters(self.state.show_more_types)

    @property
    def show_back_to_top(self) -> bool:
        return self.state.scrolled_past_threshold
