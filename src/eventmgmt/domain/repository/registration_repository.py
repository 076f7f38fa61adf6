"""Abstract repository for the Registration aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from eventmgmt.domain.model.registration import Registration


class RegistrationRepository(ABC):

    @abstractmethod
    def get_by_id(self, registration_id: int) -> Registration | None:
        """Return a registration by ID, or None if not found."""

    @abstractmethod
    def list_for_event(self, event_id: int) -> list[Registration]:
        """Return every registration for an event."""

    @abstractmethod
    def save(self, registration: Registration) -> bool:
        """Persist a registration; True if stored state changed."""
