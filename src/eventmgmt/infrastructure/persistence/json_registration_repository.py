"""JSON-file-backed implementation of RegistrationRepository."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from eventmgmt.domain.model.registration import Registration
from eventmgmt.domain.repository.registration_repository import (
    RegistrationRepository,
)
from eventmgmt.infrastructure.persistence.json_file import JsonFile


class JsonRegistrationRepository(RegistrationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, registration_id: int) -> Registration | None:
        for raw in self._file.load():
            if raw["id"] == registration_id:
                return Registration(**raw)
        return None

    def list_for_event(self, event_id: int) -> list[Registration]:
        return [Registration(**raw) for raw in self._file.load() if raw["event_id"] == event_id]

    def save(self, registration: Registration) -> bool:
        rows = self._file.load()
        new_raw = asdict(registration)
        for i, raw in enumerate(rows):
            if raw["id"] == registration.id:
                if raw == new_raw:
                    return False
                rows[i] = new_raw
                break
        else:
            rows.append(new_raw)
        self._file.persist(rows)
        return True
