"""FastAPI routes: events, participants, attendance and order admin."""

from __future__ import annotations

import dataclasses

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from eventmgmt.application.dto import OrderDTO, to_order_dto
from eventmgmt.application.order_service import OrderService
from eventmgmt.domain.exceptions import EntityNotFoundError
from eventmgmt.infrastructure.api.schemas import (
    AddLineRequest,
    AttendanceResponse,
    ChangedResponse,
    DeletedResponse,
    EmptyParticipants,
    EventSummarySchema,
    MadeFreeResponse,
    OrderDetailsRequest,
    OrderSchema,
    ParticipantData,
    ParticipantListResponse,
    ParticipantSchema,
    UpdateLineRequest,
)
from eventmgmt.infrastructure.bootstrap import Container, build_container


def get_container(request: Request) -> Container:
    """One container per request; nothing is shared between requests."""
    return build_container(request.app.state.settings)


def get_order_service(container: Container = Depends(get_container)) -> OrderService:
    return container.order_service()


def _order_schema(dto: OrderDTO) -> OrderSchema:
    return OrderSchema(**dataclasses.asdict(dto))


# ---------------------------------------------------------------------------
# Public events API
# ---------------------------------------------------------------------------
events_router = APIRouter(prefix="/api/v0/events", tags=["events"])


@events_router.get("", response_model=list[EventSummarySchema])
def list_events(container: Container = Depends(get_container)) -> list[EventSummarySchema]:
    return [
        EventSummarySchema(**dataclasses.asdict(e))
        for e in container.list_events().handle()
    ]


# ---------------------------------------------------------------------------
# Admin: participants & attendance
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@admin_router.get("/events/{event_id}/participants", response_model=ParticipantListResponse)
def list_participants(event_id: int, container: Container = Depends(get_container)):
    result = container.list_participants().handle(event_id)
    if result.kind == "empty":
        return EmptyParticipants()
    return ParticipantData(
        items=[ParticipantSchema(**dataclasses.asdict(p)) for p in result.items]
    )


@admin_router.get(
    "/registrations/{registration_id}/attendance",
    response_model=AttendanceResponse,
)
def attendance(
    registration_id: int,
    attended: bool | None = None,
    container: Container = Depends(get_container),
):
    """Read attendance, or overwrite it when ``attended`` is given."""
    service = container.attendance_service()
    try:
        if attended is None:
            value = service.get(registration_id)
        else:
            value = service.set(registration_id, attended)
    except EntityNotFoundError as exc:
        body = AttendanceResponse(success=False, response_text=str(exc))
        return JSONResponse(status_code=404, content=body.model_dump(by_alias=True))
    return AttendanceResponse(success=True, response_text=value)


@admin_router.get("/events/{event_id}/orders", response_model=list[OrderSchema])
def orders_for_event(
    event_id: int,
    service: OrderService = Depends(get_order_service),
) -> list[OrderSchema]:
    return [_order_schema(dto) for dto in service.get_for_event(event_id)]


# ---------------------------------------------------------------------------
# Admin: orders
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/admin/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderSchema])
def list_orders(
    count: int | None = None,
    offset: int = 0,
    service: OrderService = Depends(get_order_service),
) -> list[OrderSchema]:
    return [_order_schema(to_order_dto(o)) for o in service.list_orders(count, offset)]


@order_router.get("/{order_id}", response_model=OrderSchema)
def get_order(order_id: int, service: OrderService = Depends(get_order_service)) -> OrderSchema:
    order = service.get_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail=f"Order #{order_id} not found")
    return _order_schema(to_order_dto(order))


@order_router.delete("/{order_id}", response_model=DeletedResponse)
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)) -> DeletedResponse:
    return DeletedResponse(deleted_rows=service.delete_order_by_id(order_id))


@order_router.put("/{order_id}/details", response_model=ChangedResponse)
def update_details(
    order_id: int,
    body: OrderDetailsRequest,
    service: OrderService = Depends(get_order_service),
) -> ChangedResponse:
    changed = service.update_order_details(
        order_id,
        body.customer_name,
        body.customer_email,
        body.invoice_reference,
        body.comments,
    )
    return ChangedResponse(changed=changed)


@order_router.post("/{order_id}/lines", status_code=201, response_model=ChangedResponse)
def add_line(
    order_id: int,
    body: AddLineRequest,
    service: OrderService = Depends(get_order_service),
) -> ChangedResponse:
    return ChangedResponse(changed=service.add_line(order_id, body.product_id, body.variant_id))


@order_router.put("/lines/{line_id}", response_model=ChangedResponse)
def update_line(
    line_id: int,
    body: UpdateLineRequest,
    service: OrderService = Depends(get_order_service),
) -> ChangedResponse:
    return ChangedResponse(changed=service.update_line(line_id, body.quantity, body.price))


@order_router.delete("/lines/{line_id}", response_model=ChangedResponse)
def delete_line(line_id: int, service: OrderService = Depends(get_order_service)) -> ChangedResponse:
    return ChangedResponse(changed=service.delete_line(line_id))


@order_router.post("/{order_id}/free", response_model=MadeFreeResponse)
def make_free(order_id: int, service: OrderService = Depends(get_order_service)) -> MadeFreeResponse:
    return MadeFreeResponse(lines_changed=service.make_order_free(order_id))


@order_router.post("/{order_id}/verify", response_model=ChangedResponse)
def verify(order_id: int, service: OrderService = Depends(get_order_service)) -> ChangedResponse:
    return ChangedResponse(changed=service.mark_as_verified(order_id))


@order_router.post("/{order_id}/invoice", response_model=ChangedResponse)
def invoice(order_id: int, service: OrderService = Depends(get_order_service)) -> ChangedResponse:
    return ChangedResponse(changed=service.mark_as_invoiced(order_id))


@order_router.post("/{order_id}/cancel", response_model=ChangedResponse)
def cancel(order_id: int, service: OrderService = Depends(get_order_service)) -> ChangedResponse:
    return ChangedResponse(changed=service.mark_as_cancelled(order_id))
