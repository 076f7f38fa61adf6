"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Variants are loaded together with their product.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from eventmgmt.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product with its variants, or None if not found."""

    @abstractmethod
    def list_for_event(self, event_id: int) -> list[Product]:
        """Return every product sold for an event."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
