"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  A ``Container`` is
built per CLI invocation or per HTTP request, so repositories never
outlive a single operation.
"""

from __future__ import annotations

from dataclasses import dataclass

from eventmgmt.application.attendance import AttendanceService
from eventmgmt.application.list_events import ListEventsHandler
from eventmgmt.application.list_participants import ListParticipantsHandler
from eventmgmt.application.order_service import OrderService
from eventmgmt.domain.repository.order_repository import OrderRepository
from eventmgmt.domain.repository.product_repository import ProductRepository
from eventmgmt.domain.repository.reference_repositories import (
    EventRepository,
    PaymentMethodRepository,
    UserRepository,
)
from eventmgmt.domain.repository.registration_repository import (
    RegistrationRepository,
)
from eventmgmt.infrastructure.config import Settings
from eventmgmt.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from eventmgmt.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from eventmgmt.infrastructure.persistence.json_reference_repositories import (
    JsonEventRepository,
    JsonPaymentMethodRepository,
    JsonUserRepository,
)
from eventmgmt.infrastructure.persistence.json_registration_repository import (
    JsonRegistrationRepository,
)


@dataclass(frozen=True)
class Container:
    orders: OrderRepository
    products: ProductRepository
    registrations: RegistrationRepository
    users: UserRepository
    payment_methods: PaymentMethodRepository
    events: EventRepository

    def order_service(self) -> OrderService:
        return OrderService(
            order_repo=self.orders,
            product_repo=self.products,
            registration_repo=self.registrations,
            user_repo=self.users,
            payment_method_repo=self.payment_methods,
        )

    def attendance_service(self) -> AttendanceService:
        return AttendanceService(self.registrations)

    def list_events(self) -> ListEventsHandler:
        return ListEventsHandler(self.events)

    def list_participants(self) -> ListParticipantsHandler:
        return ListParticipantsHandler(
            event_repo=self.events,
            registration_repo=self.registrations,
            user_repo=self.users,
        )


def build_container(settings: Settings) -> Container:
    data_dir = settings.data_dir
    return Container(
        orders=JsonOrderRepository(data_dir / "orders.json"),
        products=JsonProductRepository(data_dir / "products.json"),
        registrations=JsonRegistrationRepository(data_dir / "registrations.json"),
        users=JsonUserRepository(data_dir / "users.json"),
        payment_methods=JsonPaymentMethodRepository(data_dir / "payment_methods.json"),
        events=JsonEventRepository(data_dir / "events.json"),
    )
