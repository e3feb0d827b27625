"""
Tests for the grid, selection tray and command handlers working together.
"""

from __future__ import annotations

from conftest import build_test_picker

from routine_builder.application.use_cases.grid_renderer import NO_MATCH_PLACEHOLDER, NOT_LOADED_PLACEHOLDER
from routine_builder.application.use_cases.selection_tray import EMPTY_TRAY_PLACEHOLDER
from routine_builder.application.utils.highlight import TextSegment
from routine_builder.domain.entities.product import Product

TWO_PRODUCTS = [
    Product(id=1, name="Gel", category="cleanser"),
    Product(id=2, name="Cream", category="moisturizer"),
]


def test_walkthrough_filter_select_remove_search():
    p = build_test_picker(products=TWO_PRODUCTS)
    cmd = p.commands
    cmd.start()

    cmd.set_category("cleanser")
    assert list(p.view.cards) == [1]

    cmd.activate_card(1)
    cmd.set_category("")
    cmd.activate_card(2)
    assert p.store.selected_ids() == [1, 2]
    assert p.view.tray == [1, 2]

    cmd.remove_chip(1)
    assert p.store.selected_ids() == [2]
    assert p.selection_store.load_ids() == [2]

    cmd.set_search("re")
    assert list(p.view.cards) == [2]
    assert p.view.cards[2].name_segments == (
        TextSegment("C"),
        TextSegment("re", is_match=True),
        TextSegment("am"),
    )


def test_persisted_ids_follow_every_mutation(picker):
    cmd = picker.commands
    steps = [
        lambda: cmd.activate_card(3),
        lambda: cmd.activate_card(1),
        lambda: cmd.card_key(4, "Enter"),
        lambda: cmd.remove_chip(1),
        lambda: cmd.activate_card(3),
        lambda: cmd.card_key(2, " "),
        lambda: cmd.clear_selection(),
        lambda: cmd.activate_card(2),
    ]
    for step in steps:
        step()
        assert picker.selection_store.load_ids() == picker.store.selected_ids()
        assert picker.view.tray == picker.store.selected_ids()


def test_start_restores_saved_selection_without_rewriting_it():
    p = build_test_picker(stored_ids=[4, 2, 77])
    p.commands.start(lang="en-US")

    assert p.store.selected_ids() == [2, 4]
    assert p.view.tray == [2, 4]
    assert p.selection_store.writes == 0
    assert p.view.direction == "ltr"
    assert p.view.cards[2].selected and p.view.cards[4].selected


def test_start_sets_rtl_direction():
    p = build_test_picker()
    p.commands.start(lang="ar-EG")
    assert p.view.direction == "rtl"


def test_language_change_reapplies_direction(picker):
    picker.commands.set_language("he")
    assert picker.view.direction == "rtl"

    picker.commands.set_language("en-US")
    assert picker.view.direction == "ltr"

    # the grid and selection are untouched
    assert picker.view.tray == []
    assert sorted(picker.view.cards) == [1, 2, 3, 4]


def test_empty_tray_and_grid_placeholders():
    p = build_test_picker()
    p.grid.render()
    assert p.view.grid_placeholder == NOT_LOADED_PLACEHOLDER

    p.commands.start()
    assert p.view.tray_placeholder == EMPTY_TRAY_PLACEHOLDER

    p.commands.set_search("no such product")
    assert p.view.grid_placeholder == NO_MATCH_PLACEHOLDER
    assert p.view.cards == {}


def test_catalog_failure_renders_placeholder():
    p = build_test_picker(catalog_error="offline")
    p.commands.start()
    assert p.view.grid_placeholder == NO_MATCH_PLACEHOLDER


def test_card_keys_only_enter_and_space_toggle(picker):
    picker.commands.card_key(1, "a")
    picker.commands.card_key(1, "Tab")
    assert picker.store.selected_ids() == []

    picker.commands.card_key(1, "Enter")
    picker.commands.card_key(2, " ")
    assert picker.store.selected_ids() == [1, 2]
    assert ("card_selected", 1, True) in picker.view.events


def test_learn_more_opens_overlay_without_toggling(picker):
    picker.commands.learn_more(2)
    assert picker.store.selected_ids() == []
    assert picker.view.overlay.title == "Cream"
    assert picker.state.overlay.opener == "learnmore:2"


def test_removing_chip_of_hidden_card_skips_card_update(picker):
    picker.commands.activate_card(1)
    picker.commands.set_category("moisturizer")
    picker.view.events.clear()

    picker.commands.remove_chip(1)
    assert not [e for e in picker.view.events if e[0] == "card_selected"]
    assert picker.store.selected_ids() == []


def test_removing_chip_of_visible_card_clears_indicator(picker):
    picker.commands.activate_card(2)
    picker.view.events.clear()

    picker.commands.remove_chip(2)
    assert ("card_selected", 2, False) in picker.view.events


def test_chip_activation_shows_all_categories_and_highlights_card(picker):
    cmd = picker.commands
    cmd.activate_card(4)
    cmd.set_search("c")
    cmd.set_category("moisturizer")
    assert list(picker.view.cards) == [2]

    cmd.activate_chip(4)
    assert picker.state.category == ""
    assert picker.state.search_term == "c"
    assert picker.view.category_cleared == 1
    assert sorted(picker.view.cards) == [2, 4]
    assert picker.view.scrolled == []

    picker.clock.advance(0.12)
    picker.scheduler.run_due()
    assert picker.view.scrolled == [4]
    assert 4 in picker.view.highlighted

    picker.clock.advance(1.0)
    picker.scheduler.run_due()
    assert 4 in picker.view.highlighted

    picker.clock.advance(0.5)
    picker.scheduler.run_due()
    assert 4 not in picker.view.highlighted


def test_chip_activation_for_card_excluded_by_search_does_nothing(picker):
    picker.commands.activate_card(3)
    picker.commands.set_search("gel")

    picker.commands.activate_chip(3)
    picker.clock.advance(2)
    picker.scheduler.run_due()
    assert picker.view.scrolled == []
    assert picker.view.highlighted == set()


def test_clear_selection_resets_cards_and_storage(picker):
    picker.commands.activate_card(1)
    picker.commands.activate_card(2)
    picker.commands.clear_selection()

    assert picker.store.selected_ids() == []
    assert picker.selection_store.load_ids() == []
    assert ("card_selected", 1, False) in picker.view.events
    assert ("card_selected", 2, False) in picker.view.events


def test_storage_failure_is_ignored(picker):
    def broken(ids):
        raise OSError("disk full")

    picker.selection_store.save_ids = broken
    picker.commands.activate_card(1)
    assert picker.store.selected_ids() == [1]
    assert picker.view.tray == [1]


def test_shutdown_tears_down_state(picker):
    picker.commands.activate_card(1)
    picker.commands.learn_more(1)
    picker.commands.shutdown()

    assert picker.state.selected == []
    assert picker.state.products == []
    assert picker.state.overlay is None
    assert picker.state.catalog_loaded is False
