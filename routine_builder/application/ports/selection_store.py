from __future__ import annotations

from abc import ABC, abstractmethod

SELECTION_STORAGE_KEY = "selectedProductIds"


class SelectionStorePort(ABC):
    @abstractmethod
    def load_ids(self) -> list[int] | None:
        """Return the persisted id list, or None when nothing usable is stored."""
        raise NotImplementedError

    @abstractmethod
    def save_ids(self, ids: list[int]) -> None:
        """Persist the id list, replacing any previous snapshot."""
        raise NotImplementedError
