"""JSON-file-backed repositories for users, payment methods and events."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from pathlib import Path

from eventmgmt.domain.model.event import EventInfo
from eventmgmt.domain.model.payment_method import PaymentMethod
from eventmgmt.domain.model.user import User
from eventmgmt.domain.repository.reference_repositories import (
    EventRepository,
    PaymentMethodRepository,
    UserRepository,
)
from eventmgmt.infrastructure.persistence.json_file import JsonFile


def _upsert(file: JsonFile, raw: dict) -> None:
    rows = file.load()
    for i, existing in enumerate(rows):
        if existing["id"] == raw["id"]:
            rows[i] = raw
            break
    else:
        rows.append(raw)
    file.persist(rows)


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, user_id: int) -> User | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return User(**raw)
        return None

    def save(self, user: User) -> None:
        _upsert(self._file, asdict(user))


class JsonPaymentMethodRepository(PaymentMethodRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, payment_method_id: int) -> PaymentMethod | None:
        for raw in self._file.load():
            if raw["id"] == payment_method_id:
                return PaymentMethod(**raw)
        return None

    def save(self, payment_method: PaymentMethod) -> None:
        _upsert(self._file, asdict(payment_method))


class JsonEventRepository(EventRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, event_id: int) -> EventInfo | None:
        for raw in self._file.load():
            if raw["id"] == event_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[EventInfo]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, event: EventInfo) -> None:
        raw = asdict(event)
        for key in ("date_start", "date_end"):
            if raw[key] is not None:
                raw[key] = raw[key].isoformat()
        _upsert(self._file, raw)

    @staticmethod
    def _to_domain(raw: dict) -> EventInfo:
        data = dict(raw)
        for key in ("date_start", "date_end"):
            if data.get(key):
                data[key] = date.fromisoformat(data[key])
        return EventInfo(**data)
