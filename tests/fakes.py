"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict.  Stored objects are copied on the way in
and out, so an aggregate mutated without ``save`` leaves the store
untouched, just like the real store.
"""

from __future__ import annotations

import copy

from eventmgmt.domain.model.event import EventInfo
from eventmgmt.domain.model.order import Order
from eventmgmt.domain.model.payment_method import PaymentMethod
from eventmgmt.domain.model.product import Product
from eventmgmt.domain.model.registration import Registration
from eventmgmt.domain.model.user import User
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


def _detached(order: Order) -> Order:
    clone = copy.deepcopy(order)
    clone.user = None
    clone.registration = None
    clone.payment_method = None
    return clone


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_line_id = 1
        for order in orders or []:
            self.save(order)

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return _detached(order) if order else None

    def get_by_line_id(self, line_id: int) -> Order | None:
        for order in self._store.values():
            if order.find_line(line_id) is not None:
                return _detached(order)
        return None

    def list_orders(self, count: int | None = None, offset: int = 0) -> list[Order]:
        orders = sorted(self._store.values(), key=lambda o: o.order_time, reverse=True)
        end = None if count is None else offset + count
        return [_detached(o) for o in orders[offset:end]]

    def list_for_registrations(self, registration_ids: set[int]) -> list[Order]:
        return [
            _detached(o) for o in self._store.values() if o.registration_id in registration_ids
        ]

    def save(self, order: Order) -> bool:
        if order.id is None:
            order.id = self._next_id
        self._next_id = max(self._next_id, order.id + 1)
        for line in order.lines:
            line.order_id = order.id
            if line.id is None:
                line.id = self._next_line_id
            self._next_line_id = max(self._next_line_id, line.id + 1)

        existing = self._store.get(order.id)
        if existing is not None and existing == order:
            return False
        self._store[order.id] = _detached(order)
        return True

    def delete(self, order_id: int) -> int:
        order = self._store.pop(order_id, None)
        if order is None:
            return 0
        return 1 + len(order.lines)

    def __len__(self) -> int:
        return len(self._store)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_for_event(self, event_id: int) -> list[Product]:
        return [p for p in self._store.values() if p.event_id == event_id]

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeRegistrationRepository(RegistrationRepository):

    def __init__(self, registrations: list[Registration] | None = None) -> None:
        self._store: dict[int, Registration] = {}
        for r in registrations or []:
            self._store[r.id] = copy.copy(r)

    def get_by_id(self, registration_id: int) -> Registration | None:
        registration = self._store.get(registration_id)
        return copy.copy(registration) if registration else None

    def list_for_event(self, event_id: int) -> list[Registration]:
        return [copy.copy(r) for r in self._store.values() if r.event_id == event_id]

    def save(self, registration: Registration) -> bool:
        if self._store.get(registration.id) == registration:
            return False
        self._store[registration.id] = copy.copy(registration)
        return True


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store = {u.id: u for u in users or []}

    def get_by_id(self, user_id: int) -> User | None:
        return self._store.get(user_id)

    def save(self, user: User) -> None:
        self._store[user.id] = user


class FakePaymentMethodRepository(PaymentMethodRepository):

    def __init__(self, payment_methods: list[PaymentMethod] | None = None) -> None:
        self._store = {pm.id: pm for pm in payment_methods or []}

    def get_by_id(self, payment_method_id: int) -> PaymentMethod | None:
        return self._store.get(payment_method_id)

    def save(self, payment_method: PaymentMethod) -> None:
        self._store[payment_method.id] = payment_method


class FakeEventRepository(EventRepository):

    def __init__(self, events: list[EventInfo] | None = None) -> None:
        self._store = {e.id: e for e in events or []}

    def get_by_id(self, event_id: int) -> EventInfo | None:
        return self._store.get(event_id)

    def list_all(self) -> list[EventInfo]:
        return list(self._store.values())

    def save(self, event: EventInfo) -> None:
        self._store[event.id] = event
