"""Abstract repository for the Order aggregate.

Lines are part of the aggregate: saving an order saves its lines and
deleting an order deletes them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from eventmgmt.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order (with its lines) by ID, or None if not found."""

    @abstractmethod
    def get_by_line_id(self, line_id: int) -> Order | None:
        """Return the order owning the given line, or None."""

    @abstractmethod
    def list_orders(self, count: int | None = None, offset: int = 0) -> list[Order]:
        """Return orders newest first, skipping ``offset`` and taking ``count``."""

    @abstractmethod
    def list_for_registrations(self, registration_ids: set[int]) -> list[Order]:
        """Return every order tied to one of the given registrations."""

    @abstractmethod
    def save(self, order: Order) -> bool:
        """Persist a new or updated order; True if stored state changed.

        Assigns IDs to the order and to any new lines.
        """

    @abstractmethod
    def delete(self, order_id: int) -> int:
        """Remove an order and its lines; returns the number of removed rows."""
