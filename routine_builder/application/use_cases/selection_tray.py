from __future__ import annotations

import logging

from routine_builder.application.app_state import AppState
from routine_builder.application.ports.scheduler import SchedulerPort
from routine_builder.application.ports.selection_store import SelectionStorePort
from routine_builder.application.ports.view import ViewPort
from routine_builder.application.use_cases.catalog_store import CatalogStore
from routine_builder.application.use_cases.grid_renderer import GridRenderer

EMPTY_TRAY_PLACEHOLDER = "No products selected"
REVEAL_DELAY_SECONDS = 0.12
HIGHLIGHT_SECONDS = 1.2


class SelectionTray:
    """Removable chips mirroring the Selection Set, plus its persisted snapshot."""

    def __init__(
        self,
        state: AppState,
        store: CatalogStore,
        grid: GridRenderer,
        view: ViewPort,
        selection_store: SelectionStorePort,
        scheduler: SchedulerPort,
    ) -> None:
        self._state = state
        self._store = store
        self._grid = grid
        self._view = view
        self._selection_store = selection_store
        self._scheduler = scheduler
        self._logger = logging.getLogger(__name__)

    def render(self) -> None:
        chips = self._store.selected()
        if not chips:
            self._view.render_tray_placeholder(EMPTY_TRAY_PLACEHOLDER)
            return
        self._view.render_tray(chips)

    def refresh(self) -> None:
        """Re-render after a selection mutation and persist the id list."""
        self.render()
        self.persist()

    def persist(self) -> None:
        ids = self._store.selected_ids()
        try:
            self._selection_store.save_ids(ids)
        except Exception as e:
            self._logger.warning("Selection snapshot not saved", extra={"reason": str(e)})

    def restore(self) -> None:
        try:
            ids = self._selection_store.load_ids()
        except Exception as e:
            self._logger.warning("Selection snapshot not readable", extra={"reason": str(e)})
            return
        if ids is not None:
            self._store.restore(ids)

    def remove(self, product_id: int) -> None:
        if self._store.remove(product_id):
            self._grid.mark_selected(product_id, False)
        self.refresh()

    def activate(self, product_id: int) -> None:
        """Chip body click: show every category, then bring the card into view."""
        self._state.category = ""
        self._view.clear_category_filter()
        self._grid.render()
        self._scheduler.call_later(REVEAL_DELAY_SECONDS, lambda: self._reveal(product_id))

    def _reveal(self, product_id: int) -> None:
        if not self._grid.is_rendered(product_id):
            return
        self._view.scroll_card_into_view(product_id)
        self._view.set_card_highlight(product_id, True)
        self._scheduler.call_later(HIGHLIGHT_SECONDS, lambda: self._unhighlight(product_id))

    def _unhighlight(self, product_id: int) -> None:
        if self._grid.is_rendered(product_id):
            self._view.set_card_highlight(product_id, False)
