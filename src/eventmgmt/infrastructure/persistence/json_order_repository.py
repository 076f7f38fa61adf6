"""JSON-file-backed implementation of OrderRepository.

Lines are stored nested inside their order, so removing an order removes
its lines with it.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from eventmgmt.domain.model.order import Order, OrderLine, OrderStatus
from eventmgmt.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    Quantity,
    VatPercent,
)
from eventmgmt.domain.repository.order_repository import OrderRepository
from eventmgmt.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_by_line_id(self, line_id: int) -> Order | None:
        for raw in self._file.load():
            if any(line["id"] == line_id for line in raw["lines"]):
                return self._to_domain(raw)
        return None

    def list_orders(self, count: int | None = None, offset: int = 0) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._file.load()]
        orders.sort(key=lambda o: o.order_time, reverse=True)
        end = None if count is None else offset + count
        return orders[offset:end]

    def list_for_registrations(self, registration_ids: set[int]) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["registration_id"] in registration_ids
        ]

    def save(self, order: Order) -> bool:
        orders = self._file.load()

        if order.id is None:
            order.id = max((o["id"] for o in orders), default=0) + 1

        next_line_id = max(
            (line["id"] for o in orders for line in o["lines"]), default=0
        ) + 1
        for line in order.lines:
            line.order_id = order.id
            if line.id is None:
                line.id = next_line_id
                next_line_id += 1

        new_raw = self._to_raw(order)

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                if raw == new_raw:
                    return False
                orders[i] = new_raw
                break
        else:
            orders.append(new_raw)

        self._file.persist(orders)
        return True

    def delete(self, order_id: int) -> int:
        orders = self._file.load()
        for i, raw in enumerate(orders):
            if raw["id"] == order_id:
                del orders[i]
                self._file.persist(orders)
                return 1 + len(raw["lines"])
        return 0

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "status": order.status.name,
            "order_time": order.order_time.isoformat(),
            "user_id": order.user_id,
            "registration_id": order.registration_id,
            "payment_method_id": order.payment_method_id,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "customer_invoice_reference": order.customer_invoice_reference,
            "comments": order.comments,
            "lines": [
                {
                    "id": line.id,
                    "product_id": line.product_id,
                    "product_variant_id": line.product_variant_id,
                    "product_name": line.product_name,
                    "product_description": line.product_description,
                    "product_variant_name": line.product_variant_name,
                    "product_variant_description": line.product_variant_description,
                    "price": str(line.price.amount),
                    "currency": line.price.currency,
                    "vat_percent": str(line.vat_percent.value),
                    "quantity": line.quantity.value,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = [
            OrderLine(
                id=line["id"],
                order_id=raw["id"],
                product_id=line["product_id"],
                product_variant_id=line.get("product_variant_id"),
                product_name=line["product_name"],
                product_description=line.get("product_description"),
                product_variant_name=line.get("product_variant_name"),
                product_variant_description=line.get("product_variant_description"),
                price=Money(Decimal(line["price"]), line.get("currency", DEFAULT_CURRENCY)),
                vat_percent=VatPercent(Decimal(line["vat_percent"])),
                quantity=Quantity(line["quantity"]),
            )
            for line in raw["lines"]
        ]
        return Order(
            id=raw["id"],
            status=OrderStatus[raw["status"]],
            order_time=datetime.fromisoformat(raw["order_time"]),
            user_id=raw["user_id"],
            registration_id=raw["registration_id"],
            payment_method_id=raw.get("payment_method_id"),
            customer_name=raw["customer_name"],
            customer_email=raw["customer_email"],
            customer_invoice_reference=raw.get("customer_invoice_reference"),
            comments=raw.get("comments"),
            lines=lines,
        )
