"""
Tests for the console front end: command dispatch and plain-text rendering.
"""

from __future__ import annotations

import io

from conftest import FakeCatalogSource, FakeChat, FakeClock, FakeSearch

from routine_builder.application.app_state import AppState
from routine_builder.application.use_cases.catalog_store import CatalogStore
from routine_builder.application.use_cases.conversation import ConversationPipeline
from routine_builder.application.use_cases.detail_overlay import CLOSE_CONTROL, DetailOverlay
from routine_builder.application.use_cases.grid_renderer import GridRenderer
from routine_builder.application.use_cases.picker_commands import PickerCommands
from routine_builder.application.use_cases.selection_tray import SelectionTray
from routine_builder.domain.entities.search_result import SearchResult
from routine_builder.infrastructure.scheduling.loop_scheduler import LoopScheduler
from routine_builder.infrastructure.store.memory_selection_store import MemorySelectionStore
from routine_builder.infrastructure.ui.console_commands import HELP_TEXT, dispatch
from routine_builder.infrastructure.ui.console_view import ConsoleView


def _console(search: FakeSearch | None = None):
    out = io.StringIO()
    view = ConsoleView(out)
    state = AppState()
    scheduler = LoopScheduler(clock=FakeClock())
    store = CatalogStore(state, FakeCatalogSource())
    overlay = DetailOverlay(state, view, scheduler)
    grid = GridRenderer(state, store, view, overlay)
    tray = SelectionTray(state, store, grid, view, MemorySelectionStore(), scheduler)
    conversation = ConversationPipeline(state, view, chat=FakeChat(["Morning: Gel."]), search=search)
    commands = PickerCommands(state, view, store, grid, overlay, tray, conversation)
    commands.start()
    return commands, view, out


def test_start_prints_grid_and_empty_tray():
    _, _, out = _console()
    text = out.getvalue()
    assert "Selected: No products selected" in text
    assert "Revitalift Serum - L'Oréal Paris" in text


def test_search_marks_matches():
    commands, _, out = _console()
    dispatch(commands, "/search cre")
    assert "[Cre]am" in out.getvalue()
    assert commands.state.search_term == "cre"


def test_toggle_and_chip_output():
    commands, _, out = _console()
    dispatch(commands, "/toggle 2")
    assert "Selected: [2] Cream (x)" in out.getvalue()
    assert [p.id for p in commands.state.selected] == [2]

    dispatch(commands, "/remove 2")
    assert commands.state.selected == []


def test_key_command_translates_space():
    commands, _, _ = _console()
    dispatch(commands, "/key 1 space")
    assert [p.id for p in commands.state.selected] == [1]
    dispatch(commands, "/key 1 a")
    assert [p.id for p in commands.state.selected] == [1]


def test_info_and_escape():
    commands, view, out = _console()
    dispatch(commands, "/info 3")
    assert "No description." in out.getvalue()
    assert view.focused == CLOSE_CONTROL

    dispatch(commands, "/esc")
    assert not view.has_control(CLOSE_CONTROL)


def test_generate_and_follow_up_print_chat():
    results = [SearchResult("Guide", "x" * 300, "https://guide")]
    commands, _, out = _console(search=FakeSearch(results))
    dispatch(commands, "/toggle 1")
    dispatch(commands, "/generate")
    dispatch(commands, "Is it gentle?")

    text = out.getvalue()
    assert "Advisor: Morning: Gel." in text
    assert "You: Is it gentle?" in text
    assert "  - Guide <https://guide>" in text
    assert ("x" * 200) in text and ("x" * 201) not in text


def test_help_unknown_and_bad_id():
    commands, _, _ = _console()
    echoed: list[str] = []

    assert dispatch(commands, "/help", echo=echoed.append) is True
    assert dispatch(commands, "/dance", echo=echoed.append) is True
    assert dispatch(commands, "/toggle abc", echo=echoed.append) is True

    assert echoed[0] == HELP_TEXT
    assert echoed[1] == "Unknown command: /dance (try /help)"
    assert echoed[2] == "Expected a product id, got 'abc'"


def test_quit_tears_down():
    commands, _, _ = _console()
    dispatch(commands, "/toggle 1")
    assert dispatch(commands, "/quit") is False
    assert commands.state.selected == []
    assert commands.state.products == []


def test_rtl_output_is_right_aligned():
    out = io.StringIO()
    view = ConsoleView(out)
    view.set_direction("rtl")
    view.append_chat_message("assistant", "مرحبا")
    line = out.getvalue().rstrip("\n")
    assert line.endswith("Advisor: مرحبا")
    assert line.startswith(" ")


def test_lang_command_switches_direction():
    commands, view, out = _console()
    dispatch(commands, "/lang ar-EG")
    assert view._direction == "rtl"
    dispatch(commands, "/lang en")
    assert view._direction == "ltr"
