"""Application service: order lifecycle.

Every mutating operation follows the same shape: load the whole
aggregate, let the aggregate validate and mutate itself, write it back.
There is no concurrency token, so the last writer wins.

Lookups that the caller addresses directly (``order_id`` on status
changes, details and free orders) raise ``EntityNotFoundError``; ids that
merely point at related entities (a product for a new line, a line id)
raise ``InvalidArgumentError``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

import structlog

from eventmgmt.application.dto import OrderDTO, to_order_dto
from eventmgmt.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidOperationError,
)
from eventmgmt.domain.model.order import Order, OrderLine, OrderStatus
from eventmgmt.domain.model.value_objects import Money
from eventmgmt.domain.repository.order_repository import OrderRepository
from eventmgmt.domain.repository.product_repository import ProductRepository
from eventmgmt.domain.repository.reference_repositories import (
    PaymentMethodRepository,
    UserRepository,
)
from eventmgmt.domain.repository.registration_repository import (
    RegistrationRepository,
)

logger = structlog.get_logger(__name__)


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        registration_repo: RegistrationRepository,
        user_repo: UserRepository,
        payment_method_repo: PaymentMethodRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._registration_repo = registration_repo
        self._user_repo = user_repo
        self._payment_method_repo = payment_method_repo

    # --- Queries --------------------------------------------------------------

    def list_orders(self, count: int | None = None, offset: int = 0) -> list[Order]:
        """Orders newest first; ``offset``/``count`` page through that order."""
        if count is not None and count < 0:
            raise InvalidArgumentError(f"count must not be negative, got {count}")
        if offset < 0:
            raise InvalidArgumentError(f"offset must not be negative, got {offset}")
        return self._order_repo.list_orders(count=count, offset=offset)

    def get_by_id(self, order_id: int) -> Order | None:
        """Load an order with lines, user, registration and payment method.

        Returns None when the order does not exist; the caller decides.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            return None
        order.user = self._user_repo.get_by_id(order.user_id)
        order.registration = self._registration_repo.get_by_id(order.registration_id)
        if order.payment_method_id is not None:
            order.payment_method = self._payment_method_repo.get_by_id(
                order.payment_method_id
            )
        return order

    def get_for_event(self, event_id: int) -> list[OrderDTO]:
        """Snapshots of every order for an event, by participant name."""
        registrations = {
            r.id: r for r in self._registration_repo.list_for_event(event_id)
        }
        if not registrations:
            return []
        orders = self._order_repo.list_for_registrations(set(registrations))
        orders.sort(
            key=lambda o: (
                registrations[o.registration_id].participant_name.casefold(),
                o.id,
            )
        )
        return [
            to_order_dto(o, registrations[o.registration_id].participant_name)
            for o in orders
        ]

    # --- Creation -------------------------------------------------------------

    def create_for_registration(
        self,
        registration_id: int,
        payment_method_id: int | None = None,
    ) -> Order:
        """Open a draft order for a confirmed registration."""
        registration = self._registration_repo.get_by_id(registration_id)
        if registration is None:
            raise InvalidArgumentError(f"Invalid registration id {registration_id}")
        user = self._user_repo.get_by_id(registration.user_id)
        if user is None:
            raise InvalidArgumentError(
                f"Registration #{registration_id} refers to unknown user #{registration.user_id}"
            )
        if payment_method_id is not None:
            if self._payment_method_repo.get_by_id(payment_method_id) is None:
                raise InvalidArgumentError(f"Invalid payment method id {payment_method_id}")

        order = Order.create(registration, user, payment_method_id=payment_method_id)
        self._order_repo.save(order)
        logger.info(
            "Order created",
            order_id=order.id,
            registration_id=registration_id,
        )
        return order

    # --- Deletion -------------------------------------------------------------

    def delete_order(self, order: Order) -> int:
        """Remove an order and its lines; returns the number of removed rows."""
        if order.status == OrderStatus.INVOICED:
            raise InvalidOperationError("Invoiced orders cannot be deleted.")
        removed = self._order_repo.delete(order.id)  # type: ignore[arg-type]
        logger.info("Order deleted", order_id=order.id, rows=removed)
        return removed

    def delete_order_by_id(self, order_id: int) -> int:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self.delete_order(order)

    # --- Lines ----------------------------------------------------------------

    def add_line(
        self,
        order_id: int,
        product_id: int,
        variant_id: int | None = None,
    ) -> bool:
        """Add a line priced from the variant if given, else the product."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise InvalidArgumentError(f"Invalid order id {order_id}")
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise InvalidArgumentError(f"Invalid product id {product_id}")

        variant = None
        if variant_id is not None:
            variant = product.find_variant(variant_id)
            if variant is None:
                raise InvalidArgumentError(
                    f"Invalid variant id {variant_id} for product #{product_id}"
                )

        line = OrderLine.for_product(product, variant)
        order.add_line(line)
        changed = self._order_repo.save(order)
        logger.info(
            "Order line added",
            order_id=order_id,
            line_id=line.id,
            product_id=product_id,
            variant_id=variant_id,
        )
        return changed

    def delete_line(self, line_id: int) -> bool:
        order = self._order_repo.get_by_line_id(line_id)
        if order is None:
            raise InvalidArgumentError(f"Invalid line id {line_id}")
        order.remove_line(line_id)
        changed = self._order_repo.save(order)
        logger.info("Order line deleted", order_id=order.id, line_id=line_id)
        return changed

    def update_line(self, line_id: int, quantity: int, price: Decimal | str) -> bool:
        """Overwrite quantity and price of a line on an editable order."""
        order = self._order_repo.get_by_line_id(line_id)
        if order is None:
            raise InvalidArgumentError(f"Invalid line id {line_id}")
        line = order.find_line(line_id)
        currency = line.price.currency  # type: ignore[union-attr]
        order.update_line(line_id, quantity, Money.of(price, currency))
        changed = self._order_repo.save(order)
        logger.info(
            "Order line updated",
            order_id=order.id,
            line_id=line_id,
            quantity=quantity,
            price=str(price),
        )
        return changed

    def make_order_free(self, order_id: int) -> int:
        """Zero all line prices; returns the number of lines changed."""
        order = self._load(order_id)
        changed = order.make_free()
        self._order_repo.save(order)
        logger.info("Order made free", order_id=order_id, lines=changed)
        return changed

    # --- Details --------------------------------------------------------------

    def update_order_details(
        self,
        order_id: int,
        customer_name: str,
        customer_email: str,
        invoice_reference: str | None,
        comments: str | None,
    ) -> bool:
        order = self._load(order_id)
        order.update_details(customer_name, customer_email, invoice_reference, comments)
        return self._order_repo.save(order)

    # --- Status transitions ---------------------------------------------------

    def mark_as_verified(self, order_id: int) -> bool:
        return self._transition(order_id, Order.mark_as_verified)

    def mark_as_invoiced(self, order_id: int) -> bool:
        return self._transition(order_id, Order.mark_as_invoiced)

    def mark_as_cancelled(self, order_id: int) -> bool:
        return self._transition(order_id, Order.mark_as_cancelled)

    def _transition(self, order_id: int, action: Callable[[Order], None]) -> bool:
        order = self._load(order_id)
        previous = order.status
        action(order)
        changed = self._order_repo.save(order)
        logger.info(
            "Order status changed",
            order_id=order_id,
            previous=previous.name,
            status=order.status.name,
        )
        return changed

    # --- Internal helpers -----------------------------------------------------

    def _load(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order
