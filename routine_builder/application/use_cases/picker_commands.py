from __future__ import annotations

import logging

from routine_builder.application.app_state import AppState
from routine_builder.application.ports.view import ViewPort
from routine_builder.application.use_cases.catalog_store import CatalogStore
from routine_builder.application.use_cases.conversation import ConversationPipeline
from routine_builder.application.use_cases.detail_overlay import DetailOverlay
from routine_builder.application.use_cases.grid_renderer import GridRenderer
from routine_builder.application.use_cases.selection_tray import SelectionTray
from routine_builder.application.utils.text_direction import detect_direction


class PickerCommands:
    """Command handlers a front end invokes; the only entry into picker logic."""

    def __init__(
        self,
        state: AppState,
        view: ViewPort,
        store: CatalogStore,
        grid: GridRenderer,
        overlay: DetailOverlay,
        tray: SelectionTray,
        conversation: ConversationPipeline,
    ) -> None:
        self.state = state
        self._view = view
        self._store = store
        self._grid = grid
        self._overlay = overlay
        self._tray = tray
        self._conversation = conversation
        self._logger = logging.getLogger(__name__)

    def start(self, lang: str | None = None) -> None:
        self.set_language(lang)
        self._tray.restore()
        self._store.load()
        self._tray.render()
        self._grid.render()

    def set_language(self, lang: str | None) -> None:
        """Re-apply text direction whenever the document language changes."""
        self._view.set_direction(detect_direction(lang))

    def set_category(self, category: str | None) -> None:
        self.state.category = (category or "").strip()
        self._grid.render()

    def set_search(self, term: str | None) -> None:
        self.state.search_term = (term or "").strip()
        self._grid.render()

    def activate_card(self, product_id: int) -> None:
        if self._grid.activate(product_id) is not None:
            self._tray.refresh()

    def card_key(self, product_id: int, key: str) -> None:
        if self._grid.key(product_id, key) is not None:
            self._tray.refresh()

    def learn_more(self, product_id: int, opener: str | None = None) -> None:
        self._grid.learn_more(product_id, opener)

    def close_overlay(self) -> None:
        self._overlay.close()

    def click_backdrop(self) -> None:
        self._overlay.click_backdrop()

    def key(self, key: str) -> None:
        """Document-level key press."""
        self._overlay.key(key)

    def remove_chip(self, product_id: int) -> None:
        self._tray.remove(product_id)

    def activate_chip(self, product_id: int) -> None:
        self._tray.activate(product_id)

    def clear_selection(self) -> None:
        previous = self._store.selected_ids()
        self._store.clear()
        for product_id in previous:
            self._grid.mark_selected(product_id, False)
        self._tray.refresh()

    def generate(self) -> bool:
        return self._conversation.generate()

    def follow_up(self, text: str) -> bool:
        return self._conversation.follow_up(text)

    def shutdown(self) -> None:
        self._overlay.close()
        self.state.teardown()
        self._logger.info("Picker torn down")
