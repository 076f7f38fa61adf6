"""PaymentMethod: how an order is to be paid (invoice, card, ...)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentMethod:

    id: int
    name: str
    provider: str
