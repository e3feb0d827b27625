from __future__ import annotations

import logging
from dataclasses import dataclass

from routine_builder.application.app_state import AppState
from routine_builder.application.ports.scheduler import SchedulerPort
from routine_builder.application.ports.view import ViewPort
from routine_builder.domain.entities.overlay_state import OverlayState
from routine_builder.domain.entities.product import Product

CLOSE_CONTROL = "modalClose"
FOCUS_RESTORE_DELAY_SECONDS = 0.24  # matches the close transition
NO_DESCRIPTION = "No description."


@dataclass(frozen=True)
class OverlayContent:
    title: str
    brand: str
    description: str
    image: str | None
    image_alt: str

    @staticmethod
    def from_product(product: Product) -> "OverlayContent":
        return OverlayContent(
            title=product.name,
            brand=product.brand or "",
            description=product.description or NO_DESCRIPTION,
            image=product.image or None,
            image_alt=product.name or "Product image",
        )


class DetailOverlay:
    """Closed -> Open -> Closed. Owns no data beyond the overlay state."""

    def __init__(self, state: AppState, view: ViewPort, scheduler: SchedulerPort) -> None:
        self._state = state
        self._view = view
        self._scheduler = scheduler
        self._logger = logging.getLogger(__name__)

    @property
    def is_open(self) -> bool:
        return self._state.overlay is not None

    def open(self, product: Product, opener: str | None = None) -> None:
        self._state.overlay = OverlayState(product=product, opener=opener)
        self._view.show_overlay(OverlayContent.from_product(product))
        self._view.focus(CLOSE_CONTROL)
        self._logger.debug("Overlay opened", extra={"product_id": product.id})

    def close(self) -> None:
        if self._state.overlay is None:
            return
        opener = self._state.overlay.opener
        self._state.overlay = None
        self._view.hide_overlay()
        if opener:
            self._scheduler.call_later(FOCUS_RESTORE_DELAY_SECONDS, lambda: self._restore_focus(opener))

    def click_backdrop(self) -> None:
        self.close()

    def key(self, key: str) -> None:
        if key == "Escape":
            self.close()

    def _restore_focus(self, opener: str) -> None:
        # the opener may have been dropped by a grid re-render
        if self._view.has_control(opener):
            self._view.focus(opener)
