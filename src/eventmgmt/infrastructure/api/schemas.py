"""Pydantic request/response schemas for the HTTP API.

These are external contracts, separate from the application DTOs.  JSON
keys are camelCase; requests also accept the snake_case field names.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
class EventSummarySchema(ApiModel):
    id: int
    title: str
    description: str | None = None
    location: str | None = None
    city: str | None = None
    date_start: date | None = None
    date_end: date | None = None
    featured_image_url: str | None = None


# ---------------------------------------------------------------------------
# Participants & attendance
# ---------------------------------------------------------------------------
class ParticipantSchema(ApiModel):
    registration_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    attended: bool


class EmptyParticipants(ApiModel):
    kind: Literal["empty"] = "empty"


class ParticipantData(ApiModel):
    kind: Literal["data"] = "data"
    items: list[ParticipantSchema]


ParticipantListResponse = Annotated[
    Union[EmptyParticipants, ParticipantData], Field(discriminator="kind")
]


class AttendanceResponse(ApiModel):
    success: bool
    response_text: bool | str


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineSchema(ApiModel):
    id: int
    product_id: int
    product_name: str
    product_description: str | None = None
    product_variant_id: int | None = None
    product_variant_name: str | None = None
    product_variant_description: str | None = None
    quantity: int
    price: Decimal
    vat_percent: Decimal
    line_total: Decimal


class OrderSchema(ApiModel):
    id: int
    status: str
    can_edit: bool
    order_time: str
    user_id: int
    registration_id: int
    participant_name: str | None = None
    payment_method_id: int | None = None
    customer_name: str
    customer_email: str
    customer_invoice_reference: str | None = None
    comments: str | None = None
    lines: list[OrderLineSchema]
    total: Decimal
    total_vat: Decimal
    currency: str


class AddLineRequest(ApiModel):
    product_id: int
    variant_id: int | None = None


class UpdateLineRequest(ApiModel):
    quantity: int = Field(ge=0)
    price: Decimal = Field(ge=0)


class OrderDetailsRequest(ApiModel):
    customer_name: str = Field(min_length=1)
    customer_email: str = Field(min_length=1)
    invoice_reference: str | None = None
    comments: str | None = None


class ChangedResponse(ApiModel):
    changed: bool


class DeletedResponse(ApiModel):
    deleted_rows: int


class MadeFreeResponse(ApiModel):
    lines_changed: int
