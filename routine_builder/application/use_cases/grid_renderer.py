from __future__ import annotations

from dataclasses import dataclass

from routine_builder.application.app_state import AppState
from routine_builder.application.ports.view import ViewPort
from routine_builder.application.use_cases.catalog_store import CatalogStore
from routine_builder.application.use_cases.detail_overlay import DetailOverlay
from routine_builder.application.utils.highlight import TextSegment, highlight_segments
from routine_builder.domain.entities.product import Product

ACTIVATION_KEYS = ("Enter", " ", "Space", "Spacebar")
NOT_LOADED_PLACEHOLDER = "Select a category to view products"
NO_MATCH_PLACEHOLDER = "No products match your filters."


@dataclass(frozen=True)
class ProductCard:
    id: int
    name: str
    name_segments: tuple[TextSegment, ...]
    brand: str
    image: str
    selected: bool

    @property
    def learn_more_control(self) -> str:
        return learn_more_control(self.id)


def learn_more_control(product_id: int) -> str:
    return f"learnmore:{product_id}"


def build_cards(products: list[Product], selected_ids: list[int], search_term: str) -> list[ProductCard]:
    selected = set(selected_ids)
    term = (search_term or "").strip()
    return [
        ProductCard(
            id=p.id,
            name=p.name,
            name_segments=tuple(highlight_segments(p.name, term)),
            brand=p.brand,
            image=p.image,
            selected=p.id in selected,
        )
        for p in products
    ]


class GridRenderer:
    def __init__(self, state: AppState, store: CatalogStore, view: ViewPort, overlay: DetailOverlay) -> None:
        self._state = state
        self._store = store
        self._view = view
        self._overlay = overlay
        self._rendered_ids: set[int] = set()

    def render(self) -> list[ProductCard]:
        if not self._state.catalog_loaded:
            self._rendered_ids = set()
            self._view.render_grid_placeholder(NOT_LOADED_PLACEHOLDER)
            return []

        products = self._store.filter(self._state.category, self._state.search_term)
        if not products:
            self._rendered_ids = set()
            self._view.render_grid_placeholder(NO_MATCH_PLACEHOLDER)
            return []

        cards = build_cards(products, self._store.selected_ids(), self._state.search_term)
        self._rendered_ids = {c.id for c in cards}
        self._view.render_grid(cards)
        return cards

    def is_rendered(self, product_id: int) -> bool:
        return product_id in self._rendered_ids

    def mark_selected(self, product_id: int, selected: bool) -> None:
        if self.is_rendered(product_id):
            self._view.set_card_selected(product_id, selected)

    def activate(self, product_id: int) -> bool | None:
        """Card click: toggle selection and reflect it on the card."""
        now_selected = self._store.toggle(product_id)
        if now_selected is not None:
            self.mark_selected(product_id, now_selected)
        return now_selected

    def key(self, product_id: int, key: str) -> bool | None:
        if key not in ACTIVATION_KEYS:
            return None
        return self.activate(product_id)

    def learn_more(self, product_id: int, opener: str | None = None) -> bool:
        """Open the detail overlay. Never touches the selection."""
        product = self._store.product(product_id)
        if product is None:
            return False
        self._overlay.open(product, opener or learn_more_control(product_id))
        return True
