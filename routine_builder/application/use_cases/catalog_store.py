from __future__ import annotations

import logging

from routine_builder.application.app_state import AppState
from routine_builder.application.exceptions import CatalogLoadError
from routine_builder.application.ports.catalog_source import CatalogSourcePort
from routine_builder.application.utils.highlight import name_matches
from routine_builder.domain.entities.product import Product


class CatalogStore:
    """Product list plus the ordered Selection Set."""

    def __init__(self, state: AppState, source: CatalogSourcePort) -> None:
        self._state = state
        self._source = source
        self._logger = logging.getLogger(__name__)

    def load(self) -> list[Product]:
        """Fetch the catalog once. A failure leaves an empty catalog and is not retried."""
        if self._state.catalog_loaded:
            return self._state.products

        try:
            products = self._source.load_products()
        except CatalogLoadError as e:
            self._logger.error("Catalog load failed", extra={"reason": str(e)})
            products = []

        self._state.products = list(products)
        self._state.catalog_loaded = True
        self._logger.info("Catalog loaded", extra={"count": len(products)})

        if self._state.pending_ids:
            pending = self._state.pending_ids
            self._state.pending_ids = []
            self.restore(pending)
        return self._state.products

    def products(self) -> list[Product]:
        return list(self._state.products)

    def product(self, product_id: int) -> Product | None:
        for p in self._state.products:
            if p.id == product_id:
                return p
        return None

    def filter(self, category: str | None, search_term: str | None) -> list[Product]:
        category = category or ""
        term = (search_term or "").strip()
        return [
            p
            for p in self._state.products
            if (not category or p.category == category) and name_matches(p.name, term)
        ]

    def selected(self) -> list[Product]:
        return list(self._state.selected)

    def selected_ids(self) -> list[int]:
        return [p.id for p in self._state.selected]

    def toggle(self, product_id: int) -> bool | None:
        """Select if absent, deselect if present. Returns the new state, or None for an unknown id."""
        product = self.product(product_id)
        if product is None:
            return None
        if self.remove(product_id):
            return False
        self._state.selected.append(product)
        return True

    def remove(self, product_id: int) -> bool:
        for idx, p in enumerate(self._state.selected):
            if p.id == product_id:
                del self._state.selected[idx]
                return True
        return False

    def clear(self) -> None:
        self._state.selected = []

    def restore(self, ids: list[int]) -> None:
        """Rehydrate the selection from stored ids, keeping only ids present in the catalog."""
        if not self._state.catalog_loaded:
            self._state.pending_ids = list(ids)
            return
        wanted = set(ids)
        self._state.selected = [p for p in self._state.products if p.id in wanted]
