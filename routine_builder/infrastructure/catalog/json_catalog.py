from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from routine_builder.application.exceptions import CatalogLoadError
from routine_builder.application.ports.catalog_source import CatalogSourcePort
from routine_builder.domain.entities.product import Product


class JsonCatalogSource(CatalogSourcePort):
    """Reads `{"products": [...]}` from a local file or an http(s) URL."""

    def __init__(self, location: str, client: httpx.Client | None = None) -> None:
        self._location = location
        self._client = client
        self._logger = logging.getLogger(__name__)

    def load_products(self) -> list[Product]:
        data = self._fetch()
        items = data.get("products") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise CatalogLoadError(f"Catalog at {self._location} has no 'products' list.")

        products: list[Product] = []
        for item in items:
            try:
                products.append(Product.from_payload(item))
            except (KeyError, TypeError, ValueError) as e:
                self._logger.warning("Skipping malformed product", extra={"reason": str(e)})
        return products

    def _fetch(self) -> Any:
        if self._location.startswith(("http://", "https://")):
            try:
                if self._client is not None:
                    return _get_json(self._client, self._location)
                with httpx.Client() as client:
                    return _get_json(client, self._location)
            except (httpx.HTTPError, ValueError) as e:
                raise CatalogLoadError(f"Could not fetch catalog from {self._location}: {e}") from e

        path = Path(self._location)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Could not read catalog file {path}: {e}") from e


def _get_json(client: httpx.Client, url: str) -> Any:
    resp = client.get(url)
    resp.raise_for_status()
    return resp.json()
