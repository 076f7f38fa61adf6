"""Product aggregate.

Products belong to an event and live independently of orders. Prices
change over time; orders keep the price captured when a line was added.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from eventmgmt.domain.exceptions import ValidationError
from eventmgmt.domain.model.value_objects import Money, VatPercent


@dataclass
class ProductVariant:
    """A priced alternative of a product (e.g. "student" or "two days")."""

    id: int
    product_id: int
    name: str
    price: Money
    vat_percent: VatPercent
    description: str | None = None
    mandatory_count: int = 1


@dataclass
class Product:
    """A product sold for an event.

    ``mandatory_count`` is the quantity a new order line starts with.
    """

    id: int
    event_id: int
    name: str
    price: Money
    vat_percent: VatPercent
    description: str | None = None
    mandatory_count: int = 1
    variants: list[ProductVariant] = field(default_factory=list)

    def find_variant(self, variant_id: int) -> ProductVariant | None:
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None

    def add_variant(self, variant: ProductVariant) -> None:
        if variant.product_id != self.id:
            raise ValidationError(
                f"Variant #{variant.id} belongs to product #{variant.product_id}, not #{self.id}"
            )
        self.variants.append(variant)
