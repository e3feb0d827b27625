from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    brand: str = ""
    category: str = ""
    description: str = ""
    image: str = ""

    @staticmethod
    def from_payload(payload: dict[str, Any]) -> "Product":
        return Product(
            id=int(payload["id"]),
            name=str(payload.get("name") or ""),
            brand=str(payload.get("brand") or ""),
            category=str(payload.get("category") or ""),
            description=str(payload.get("description") or ""),
            image=str(payload.get("image") or ""),
        )

    def routine_fields(self) -> dict[str, str]:
        return {
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "description": self.description,
        }
