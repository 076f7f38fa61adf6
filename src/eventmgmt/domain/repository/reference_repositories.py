"""Abstract repositories for reference data the order core only reads.

Users, payment methods and events are managed elsewhere; the core needs
lookups, and ``save`` exists so stores can be seeded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from eventmgmt.domain.model.event import EventInfo
from eventmgmt.domain.model.payment_method import PaymentMethod
from eventmgmt.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""


class PaymentMethodRepository(ABC):

    @abstractmethod
    def get_by_id(self, payment_method_id: int) -> PaymentMethod | None:
        """Return a payment method by ID, or None if not found."""

    @abstractmethod
    def save(self, payment_method: PaymentMethod) -> None:
        """Persist a new or updated payment method."""


class EventRepository(ABC):

    @abstractmethod
    def get_by_id(self, event_id: int) -> EventInfo | None:
        """Return an event by ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[EventInfo]:
        """Return every event."""

    @abstractmethod
    def save(self, event: EventInfo) -> None:
        """Persist a new or updated event."""
