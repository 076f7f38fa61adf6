"""User: the person behind registrations and orders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:

    id: int
    name: str
    email: str
    phone: str | None = None
