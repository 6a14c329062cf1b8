"""
Transiciones puras del estado de la interfaz: (ViewState, evento) -> ViewState.

Ninguna toca la base de datos ni la red; el controlador se encarga de persistir.
"""
from __future__ import annotations
import random
from dataclasses import replace
from typing import Optional, Sequence, Union

from ..models.pokemon import Pokemon
from ..models.state import (
    PAGE_SIZE_START, PAGE_SIZE_STEP, SCROLL_THRESHOLD, THEME_DARK, THEME_LIGHT, SortKey, ViewState,
)


def set_search_term(state: ViewState, term: str) -> ViewState:
    return replace(state, search_term=term)


def clear_search(state: ViewState) -> ViewState:
    return replace(state, search_term="")


def select_type(state: ViewState, type_name: str) -> ViewState:
    return replace(state, selected_type=type_name)


def toggle_more_types(state: ViewState) -> ViewState:
    return replace(state, show_more_types=not state.show_more_types)


def set_sort_key(state: ViewState, key: Union[SortKey, str]) -> ViewState:
    return replace(state, sort_key=SortKey(key))


def select_pokemon(state: ViewState, pokemon: Pokemon) -> ViewState:
    return replace(state, selection=pokemon)


def dismiss_detail(state: ViewState) -> ViewState:
    return replace(state, selection=None)


def request_random_pokemon(state: ViewState, catalog: Sequence[Pokemon],
                           rng: Optional[random.Random] = None) -> ViewState:
    # Sobre el catálogo completo, no sobre la vista filtrada
    if not catalog:
        return state
    return replace(state, selection=(rng or random).choice(catalog))


def toggle_favorite(state: ViewState, pokemon_id: int) -> ViewState:
    return replace(state, favorites=state.favorites ^ {pokemon_id})


def toggle_theme(state: ViewState) -> ViewState:
    return replace(state, theme=THEME_LIGHT if state.theme == THEME_DARK else THEME_DARK)


def load_more(state: ViewState, filtered_count: int) -> ViewState:
    if state.page_size >= filtered_count:
        return state
    return replace(state, page_size=state.page_size + PAGE_SIZE_STEP)


def reset_page_size(state: ViewState) -> ViewState:
    return replace(state, page_size=PAGE_SIZE_START)


def scroll_position_changed(state: ViewState, y: float) -> ViewState:
    return replace(state, scrolled_past_threshold=y > SCROLL_THRESHOLD)
