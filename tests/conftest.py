"""
Shared fakes and fixtures for the picker and proxy tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from routine_builder.application.app_state import AppState
from routine_builder.application.exceptions import CatalogLoadError
from routine_builder.application.ports.catalog_source import CatalogSourcePort
from routine_builder.application.ports.chat_gateway import ChatGatewayPort
from routine_builder.application.ports.search import SearchPort
from routine_builder.application.ports.view import ViewPort
from routine_builder.application.use_cases.catalog_store import CatalogStore
from routine_builder.application.use_cases.conversation import GENERATE_CONTROL, SEND_CONTROL, ConversationPipeline
from routine_builder.application.use_cases.detail_overlay import CLOSE_CONTROL, DetailOverlay
from routine_builder.application.use_cases.grid_renderer import GridRenderer
from routine_builder.application.use_cases.picker_commands import PickerCommands
from routine_builder.application.use_cases.selection_tray import SelectionTray
from routine_builder.core.config import Settings
from routine_builder.domain.entities.chat_message import ChatMessage
from routine_builder.domain.entities.product import Product
from routine_builder.domain.entities.search_result import SearchResult
from routine_builder.infrastructure.scheduling.loop_scheduler import LoopScheduler
from routine_builder.infrastructure.store.memory_selection_store import MemorySelectionStore


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "OPENAI_API_KEY": None,
        "ROUTINE_PROXY_URL": None,
        "SEARCH_PROXY_URL": None,
        "SEARCH_BACKEND": "auto",
        "SERPAPI_KEY": None,
        "GOOGLE_API_KEY": None,
        "GOOGLE_CX": None,
        "ENV": "dev",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


SAMPLE_PRODUCTS = [
    Product(id=1, name="Gel", brand="CeraVe", category="cleanser", description="Foaming gel cleanser."),
    Product(id=2, name="Cream", brand="CeraVe", category="moisturizer", description="Barrier cream."),
    Product(id=3, name="Revitalift Serum", brand="L'Oréal Paris", category="skincare", description=""),
    Product(id=4, name="Cleansing Cream Oil", brand="Garnier", category="cleanser", description="Oil-to-cream."),
]


class FakeCatalogSource(CatalogSourcePort):
    def __init__(self, products: list[Product] | None = None, error: str | None = None) -> None:
        self._products = list(products if products is not None else SAMPLE_PRODUCTS)
        self._error = error
        self.calls = 0

    def load_products(self) -> list[Product]:
        self.calls += 1
        if self._error:
            raise CatalogLoadError(self._error)
        return list(self._products)


class FakeChat(ChatGatewayPort):
    def __init__(self, replies: list[str] | None = None, error: Exception | None = None) -> None:
        self._replies = list(replies or ["Step 1: cleanse."])
        self._error = error
        self.calls: list[list[ChatMessage]] = []

    def complete(self, messages: list[ChatMessage]) -> str:
        self.calls.append(list(messages))
        if self._error is not None:
            raise self._error
        if len(self._replies) > 1:
            return self._replies.pop(0)
        return self._replies[0]


class FakeSearch(SearchPort):
    def __init__(self, results: list[SearchResult] | None = None, error: Exception | None = None) -> None:
        self._results = list(results or [])
        self._error = error
        self.queries: list[str] = []

    def search(self, query: str, limit: int = 8) -> list[SearchResult]:
        self.queries.append(query)
        if self._error is not None:
            raise self._error
        return self._results[:limit]


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingView(ViewPort):
    """In-memory front end that keeps what a real one would show."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []
        self.cards: dict[int, Any] = {}
        self.grid_placeholder: str | None = None
        self.tray: list[int] = []
        self.tray_placeholder: str | None = None
        self.overlay: Any = None
        self.controls: set[str] = {GENERATE_CONTROL, SEND_CONTROL}
        self.labels: dict[str, str] = {GENERATE_CONTROL: "Generate Routine"}
        self.disabled: set[str] = set()
        self.focused: str | None = None
        self.highlighted: set[int] = set()
        self.scrolled: list[int] = []
        self.chat: list[tuple[str, str]] = []
        self.citations: list[list[SearchResult]] = []
        self.direction: str | None = None
        self.category_cleared = 0

    def render_grid(self, cards):
        self.events.append(("render_grid", [c.id for c in cards]))
        self.controls = {c for c in self.controls if not c.startswith("learnmore:")}
        self.controls.update(c.learn_more_control for c in cards)
        self.cards = {c.id: c for c in cards}
        self.grid_placeholder = None

    def render_grid_placeholder(self, text):
        self.events.append(("grid_placeholder", text))
        self.controls = {c for c in self.controls if not c.startswith("learnmore:")}
        self.cards = {}
        self.grid_placeholder = text

    def set_card_selected(self, product_id, selected):
        self.events.append(("card_selected", product_id, selected))

    def scroll_card_into_view(self, product_id):
        self.scrolled.append(product_id)

    def set_card_highlight(self, product_id, on):
        if on:
            self.highlighted.add(product_id)
        else:
            self.highlighted.discard(product_id)

    def clear_category_filter(self):
        self.category_cleared += 1

    def render_tray(self, chips):
        self.tray = [p.id for p in chips]
        self.tray_placeholder = None

    def render_tray_placeholder(self, text):
        self.tray = []
        self.tray_placeholder = text

    def show_overlay(self, content):
        self.controls.add(CLOSE_CONTROL)
        self.overlay = content

    def hide_overlay(self):
        self.controls.discard(CLOSE_CONTROL)
        self.overlay = None

    def has_control(self, control_id):
        return control_id in self.controls

    def focus(self, control_id):
        self.events.append(("focus", control_id))
        self.focused = control_id

    def set_control_enabled(self, control_id, enabled):
        self.events.append(("enabled", control_id, enabled))
        if enabled:
            self.disabled.discard(control_id)
        else:
            self.disabled.add(control_id)

    def get_control_label(self, control_id):
        return self.labels.get(control_id, "")

    def set_control_label(self, control_id, label):
        self.labels[control_id] = label

    def append_chat_message(self, role, content):
        self.chat.append((role, content))

    def append_citations(self, results):
        self.citations.append(list(results))

    def set_direction(self, direction):
        self.direction = direction


@dataclass
class Picker:
    state: AppState
    view: RecordingView
    clock: FakeClock
    scheduler: LoopScheduler
    source: FakeCatalogSource
    selection_store: MemorySelectionStore
    chat: FakeChat
    search: FakeSearch
    store: CatalogStore
    grid: GridRenderer
    overlay: DetailOverlay
    tray: SelectionTray
    conversation: ConversationPipeline
    commands: PickerCommands


def build_test_picker(
    products: list[Product] | None = None,
    stored_ids: list[int] | None = None,
    chat: FakeChat | None = None,
    search: FakeSearch | None = None,
    catalog_error: str | None = None,
) -> Picker:
    state = AppState()
    view = RecordingView()
    clock = FakeClock()
    scheduler = LoopScheduler(clock=clock)
    source = FakeCatalogSource(products, error=catalog_error)
    selection_store = MemorySelectionStore(stored_ids)
    chat = chat or FakeChat()
    search = search or FakeSearch()

    store = CatalogStore(state, source)
    overlay = DetailOverlay(state, view, scheduler)
    grid = GridRenderer(state, store, view, overlay)
    tray = SelectionTray(state, store, grid, view, selection_store, scheduler)
    conversation = ConversationPipeline(state, view, chat=chat, search=search, brand_hint="L'Oréal")
    commands = PickerCommands(state, view, store, grid, overlay, tray, conversation)
    return Picker(
        state, view, clock, scheduler, source, selection_store, chat, search,
        store, grid, overlay, tray, conversation, commands,
    )


@pytest.fixture
def picker() -> Picker:
    p = build_test_picker()
    p.commands.start()
    return p
