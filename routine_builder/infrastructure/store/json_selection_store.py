from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any

from routine_builder.application.ports.selection_store import SELECTION_STORAGE_KEY, SelectionStorePort


class JsonSelectionStore(SelectionStorePort):
    """
    Key/value JSON file standing in for browser local storage.

    The file holds an object; the selection lives under a single fixed key
    as a JSON array of product ids. Other keys are preserved on write.
    """

    def __init__(self, path: str = "./data/selection.json", key: str = SELECTION_STORAGE_KEY) -> None:
        self._path = Path(path)
        self._key = key
        self._lock = threading.Lock()

    def load_ids(self) -> list[int] | None:
        with self._lock:
            data = self._read()
        ids = data.get(self._key)
        if not isinstance(ids, list):
            return None
        out: list[int] = []
        for value in ids:
            try:
                out.append(int(value))
            except (TypeError, ValueError):
                continue
        return out

    def save_ids(self, ids: list[int]) -> None:
        with self._lock:
            data = self._read()
            data[self._key] = list(ids)
            self._write(data)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError):
            # corrupted snapshot behaves like an empty storage area
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        """Write atomically through a temp file."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise
