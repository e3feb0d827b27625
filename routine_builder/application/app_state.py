from __future__ import annotations

from dataclasses import dataclass, field

from routine_builder.domain.entities.overlay_state import OverlayState
from routine_builder.domain.entities.product import Product
from routine_builder.domain.entities.transcript import Transcript


@dataclass
class AppState:
    """All mutable client state, owned by one UI thread.

    Created once at startup and handed to every component; components mutate
    it only through their own operations.
    """

    products: list[Product] = field(default_factory=list)
    catalog_loaded: bool = False
    selected: list[Product] = field(default_factory=list)
    pending_ids: list[int] = field(default_factory=list)  # stored ids waiting for the catalog
    transcript: Transcript = field(default_factory=Transcript)
    routine_generated: bool = False
    category: str = ""
    search_term: str = ""
    overlay: OverlayState | None = None

    def teardown(self) -> None:
        self.products = []
        self.catalog_loaded = False
        self.selected = []
        self.pending_ids = []
        self.transcript.clear()
        self.routine_generated = False
        self.category = ""
        self.search_term = ""
        self.overlay = None
