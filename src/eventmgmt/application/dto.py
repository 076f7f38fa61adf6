"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the application layer and the CLI / HTTP layers
without exposing domain internals.  They are frozen, so an order handed
out as a DTO is a read-only snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from eventmgmt.domain.model.event import EventInfo
from eventmgmt.domain.model.order import Order, OrderLine
from eventmgmt.domain.model.value_objects import Money


def _amount(money: Money) -> str:
    return f"{money.amount:.2f}"


@dataclass(frozen=True)
class OrderLineDTO:
    id: int
    product_id: int
    product_name: str
    quantity: int
    price: str  # e.g. "100.00"
    vat_percent: str
    line_total: str
    product_description: str | None = None
    product_variant_id: int | None = None
    product_variant_name: str | None = None
    product_variant_description: str | None = None


@dataclass(frozen=True)
class OrderDTO:
    id: int
    status: str
    can_edit: bool
    order_time: str  # ISO 8601
    user_id: int
    registration_id: int
    customer_name: str
    customer_email: str
    total: str
    total_vat: str
    currency: str
    customer_invoice_reference: str | None = None
    comments: str | None = None
    payment_method_id: int | None = None
    participant_name: str | None = None
    lines: tuple[OrderLineDTO, ...] = ()


@dataclass(frozen=True)
class EventSummaryDTO:
    id: int
    title: str
    description: str | None
    location: str | None
    city: str | None
    date_start: date | None
    date_end: date | None
    featured_image_url: str | None


@dataclass(frozen=True)
class ParticipantDTO:
    registration_id: int
    name: str
    email: str | None
    phone: str | None
    attended: bool


@dataclass(frozen=True)
class ParticipantList:
    """Participants of an event: either ``empty`` or ``data`` with items."""

    kind: Literal["empty", "data"]
    items: tuple[ParticipantDTO, ...] = field(default=())

    @staticmethod
    def of(items: list[ParticipantDTO]) -> ParticipantList:
        if not items:
            return ParticipantList(kind="empty")
        return ParticipantList(kind="data", items=tuple(items))


# --- Mapping ------------------------------------------------------------------


def to_line_dto(line: OrderLine) -> OrderLineDTO:
    return OrderLineDTO(
        id=line.id,  # type: ignore[arg-type]
        product_id=line.product_id,
        product_name=line.product_name,
        product_description=line.product_description,
        product_variant_id=line.product_variant_id,
        product_variant_name=line.product_variant_name,
        product_variant_description=line.product_variant_description,
        quantity=line.quantity.value,
        price=_amount(line.price),
        vat_percent=f"{line.vat_percent.value}",
        line_total=_amount(line.line_total),
    )


def to_order_dto(order: Order, participant_name: str | None = None) -> OrderDTO:
    if participant_name is None and order.registration is not None:
        participant_name = order.registration.participant_name
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.name,
        can_edit=order.can_edit,
        order_time=order.order_time.isoformat(),
        user_id=order.user_id,
        registration_id=order.registration_id,
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        customer_invoice_reference=order.customer_invoice_reference,
        comments=order.comments,
        payment_method_id=order.payment_method_id,
        participant_name=participant_name,
        lines=tuple(to_line_dto(line) for line in order.lines),
        total=_amount(order.total),
        total_vat=_amount(order.total_vat),
        currency=order.total.currency,
    )


def to_event_summary(event: EventInfo) -> EventSummaryDTO:
    return EventSummaryDTO(
        id=event.id,
        title=event.title,
        description=event.description,
        location=event.location,
        city=event.city,
        date_start=event.date_start,
        date_end=event.date_end,
        featured_image_url=event.featured_image_url,
    )
