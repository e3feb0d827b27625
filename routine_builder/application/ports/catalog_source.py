from __future__ import annotations

from abc import ABC, abstractmethod

from routine_builder.domain.entities.product import Product


class CatalogSourcePort(ABC):
    @abstractmethod
    def load_products(self) -> list[Product]:
        """
        Fetch the full product catalog.

        Raises:
            CatalogLoadError: the document is missing, unreachable or malformed
        """
        raise NotImplementedError
