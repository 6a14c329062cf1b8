from __future__ import annotations

import random

import pytest

from pokedex_app.models.state import PAGE_SIZE_START, SortKey, ViewState
from pokedex_app.services import transitions as tr


def test_search_term_is_kept_verbatim_and_cleared():
    s = tr.set_search_term(ViewState(), "  Char ")
    assert s.search_term == "  Char "
    assert tr.clear_search(s).search_term == ""


def test_select_type_replaces_previous():
    s = tr.select_type(tr.select_type(ViewState(), "fire"), "water")
    assert s.selected_type == "water"


def test_toggle_more_types_keeps_selected_type():
    s = tr.select_type(ViewState(), "fire")
    s = tr.toggle_more_types(s)
    assert s.show_more_types
    assert s.selected_type == "fire"
    assert not tr.toggle_more_types(s).show_more_types


def test_set_sort_key_from_value():
    assert tr.set_sort_key(ViewState(), "attack").sort_key is SortKey.ATTACK
    with pytest.raises(ValueError):
        tr.set_sort_key(ViewState(), "speed")


def test_toggle_favorite_is_involutive():
    start = ViewState(favorites=frozenset({1, 4}))
    once = tr.toggle_favorite(start, 7)
    assert once.favorites == {1, 4, 7}
    assert tr.toggle_favorite(once, 7) == start
    assert tr.toggle_favorite(start, 4).favorites == {1}


def test_toggle_theme_flips_between_two_values():
    s = ViewState()
    assert s.theme == "dark"
    assert tr.toggle_theme(s).theme == "light"
    assert tr.toggle_theme(tr.toggle_theme(s)).theme == "dark"


def test_load_more_grows_by_twenty_until_count():
    s = ViewState()
    for k in range(1, 4):
        s = tr.load_more(s, filtered_count=151)
        assert s.page_size == PAGE_SIZE_START + 20 * k


def test_load_more_is_noop_once_everything_is_shown():
    s = tr.load_more(ViewState(), filtered_count=35)
    assert s.page_size == 40
    assert tr.load_more(s, filtered_count=35) is s


def test_scroll_threshold():
    assert not tr.scroll_position_changed(ViewState(), 500).scrolled_past_threshold
    assert tr.scroll_position_changed(ViewState(), 501).scrolled_past_threshold


def test_random_pokemon_uses_full_catalog(make_pokemon):
    catalog = (make_pokemon(1, "bulbasaur"), make_pokemon(4, "charmander"))
    s = tr.request_random_pokemon(ViewState(search_term="zzz"), catalog, random.Random(3))
    assert s.selection in catalog


def test_random_pokemon_on_empty_catalog_is_noop(make_pokemon):
    start = tr.select_pokemon(ViewState(), make_pokemon(1, "bulbasaur"))
    assert tr.request_random_pokemon(start, (), random.Random(0)) is start


def test_select_and_dismiss(make_pokemon):
    a, b = make_pokemon(1, "bulbasaur"), make_pokemon(4, "charmander")
    s = tr.select_pokemon(tr.select_pokemon(ViewState(), a), b)
    assert s.selection == b
    assert tr.dismiss_detail(s).selection is None


def test_transitions_do_not_mutate_input():
    start = ViewState()
    tr.set_search_term(start, "x")
    tr.toggle_theme(start)
    assert start == ViewState()
