from __future__ import annotations

from routine_builder.application.ports.selection_store import SelectionStorePort


class MemorySelectionStore(SelectionStorePort):
    def __init__(self, ids: list[int] | None = None) -> None:
        self._ids: list[int] | None = list(ids) if ids is not None else None
        self.writes = 0

    def load_ids(self) -> list[int] | None:
        return list(self._ids) if self._ids is not None else None

    def save_ids(self, ids: list[int]) -> None:
        self._ids = list(ids)
        self.writes += 1
