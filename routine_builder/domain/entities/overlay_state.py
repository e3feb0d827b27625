from __future__ import annotations

from dataclasses import dataclass

from routine_builder.domain.entities.product import Product


@dataclass(frozen=True)
class OverlayState:
    product: Product
    opener: str | None = None  # control id that had focus when the overlay opened
