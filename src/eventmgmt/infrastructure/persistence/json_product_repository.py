"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from eventmgmt.domain.model.product import Product, ProductVariant
from eventmgmt.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    VatPercent,
)
from eventmgmt.domain.repository.product_repository import ProductRepository
from eventmgmt.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_for_event(self, event_id: int) -> list[Product]:
        return [p for p in self._load().values() if p.event_id == event_id]

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._file.persist([self._to_raw(p) for p in products.values()])

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        return {item["id"]: self._to_domain(item) for item in self._file.load()}

    @staticmethod
    def _money(raw: dict) -> Money:
        return Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY))

    @classmethod
    def _to_domain(cls, raw: dict) -> Product:
        return Product(
            id=raw["id"],
            event_id=raw["event_id"],
            name=raw["name"],
            description=raw.get("description"),
            price=cls._money(raw),
            vat_percent=VatPercent(Decimal(raw.get("vat_percent", "0"))),
            mandatory_count=raw.get("mandatory_count", 1),
            variants=[
                ProductVariant(
                    id=v["id"],
                    product_id=raw["id"],
                    name=v["name"],
                    description=v.get("description"),
                    price=cls._money(v),
                    vat_percent=VatPercent(Decimal(v.get("vat_percent", "0"))),
                    mandatory_count=v.get("mandatory_count", 1),
                )
                for v in raw.get("variants", [])
            ],
        )

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "event_id": product.event_id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "vat_percent": str(product.vat_percent.value),
            "mandatory_count": product.mandatory_count,
            "variants": [
                {
                    "id": v.id,
                    "name": v.name,
                    "description": v.description,
                    "price": str(v.price.amount),
                    "currency": v.price.currency,
                    "vat_percent": str(v.vat_percent.value),
                    "mandatory_count": v.mandatory_count,
                }
                for v in product.variants
            ],
        }
