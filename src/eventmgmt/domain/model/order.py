"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.  Status changes
go through an explicit transition table; line edits are only allowed
while the order has not been invoiced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum, IntEnum

from eventmgmt.domain.exceptions import InvalidOperationError, ValidationError
from eventmgmt.domain.model.payment_method import PaymentMethod
from eventmgmt.domain.model.product import Product, ProductVariant
from eventmgmt.domain.model.registration import Registration
from eventmgmt.domain.model.user import User
from eventmgmt.domain.model.value_objects import Money, Quantity, VatPercent


class OrderStatus(IntEnum):
    DRAFT = 0
    INVOICED = 100
    VERIFIED = 200
    CANCELLED = 300


class OrderAction(Enum):
    VERIFY = "verify"
    INVOICE = "invoice"
    CANCEL = "cancel"


# Every legal (status, action) pair.  Anything missing is rejected.
TRANSITIONS: dict[tuple[OrderStatus, OrderAction], OrderStatus] = {
    (OrderStatus.DRAFT, OrderAction.INVOICE): OrderStatus.INVOICED,
    (OrderStatus.DRAFT, OrderAction.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.INVOICED, OrderAction.VERIFY): OrderStatus.VERIFIED,
    (OrderStatus.INVOICED, OrderAction.CANCEL): OrderStatus.CANCELLED,
}

# Lines may be changed while the status is strictly below this one.
EDIT_LOCK_STATUS = OrderStatus.INVOICED


@dataclass
class OrderLine:
    """A priced entry with a snapshot of the product it was created from.

    Price, VAT and quantity start out as the product's (or variant's)
    values and are edited independently afterwards.
    """

    id: int | None
    order_id: int | None
    product_id: int
    product_name: str
    price: Money
    vat_percent: VatPercent
    quantity: Quantity
    product_description: str | None = None
    product_variant_id: int | None = None
    product_variant_name: str | None = None
    product_variant_description: str | None = None

    @staticmethod
    def for_product(
        product: Product,
        variant: ProductVariant | None = None,
        order_id: int | None = None,
    ) -> OrderLine:
        """Build a line from the current catalog data.

        The variant, when given, wins for price, VAT and quantity.
        """
        source = variant if variant is not None else product
        return OrderLine(
            id=None,
            order_id=order_id,
            product_id=product.id,
            product_name=product.name,
            product_description=product.description,
            product_variant_id=variant.id if variant else None,
            product_variant_name=variant.name if variant else None,
            product_variant_description=variant.description if variant else None,
            price=source.price,
            vat_percent=source.vat_percent,
            quantity=Quantity(source.mandatory_count),
        )

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value

    @property
    def vat_amount(self) -> Money:
        return self.line_total.percent(self.vat_percent.value)


@dataclass
class Order:
    """Aggregate root for event orders.

    Use ``Order.create()`` for new orders.  ``__init__`` stays simple so the
    repository can reconstitute persisted orders without re-validating.

    ``user``, ``registration`` and ``payment_method`` are only populated
    when the order is loaded with its references; they are never persisted
    as part of the order.
    """

    id: int | None
    user_id: int
    registration_id: int
    customer_name: str
    customer_email: str
    status: OrderStatus = OrderStatus.DRAFT
    order_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    customer_invoice_reference: str | None = None
    comments: str | None = None
    payment_method_id: int | None = None
    lines: list[OrderLine] = field(default_factory=list)

    user: User | None = field(default=None, compare=False, repr=False)
    registration: Registration | None = field(default=None, compare=False, repr=False)
    payment_method: PaymentMethod | None = field(default=None, compare=False, repr=False)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        registration: Registration,
        user: User,
        payment_method_id: int | None = None,
    ) -> Order:
        """Open a draft order for a confirmed registration."""
        if registration.user_id != user.id:
            raise ValidationError(
                f"Registration #{registration.id} does not belong to user #{user.id}"
            )
        return Order(
            id=None,
            user_id=user.id,
            registration_id=registration.id,
            customer_name=user.name,
            customer_email=user.email,
            payment_method_id=payment_method_id,
        )

    # --- State transitions ----------------------------------------------------

    @property
    def can_edit(self) -> bool:
        return self.status < EDIT_LOCK_STATUS

    def mark_as_verified(self) -> None:
        self._apply(OrderAction.VERIFY)

    def mark_as_invoiced(self) -> None:
        self._apply(OrderAction.INVOICE)

    def mark_as_cancelled(self) -> None:
        self._apply(OrderAction.CANCEL)

    def _apply(self, action: OrderAction) -> None:
        new_status = TRANSITIONS.get((self.status, action))
        if new_status is None:
            raise InvalidOperationError(
                f"Cannot {action.value} order #{self.id} in {self.status.name} status"
            )
        self.status = new_status

    # --- Line management ------------------------------------------------------

    def add_line(self, line: OrderLine) -> None:
        self._assert_editable()
        line.order_id = self.id
        self.lines.append(line)

    def remove_line(self, line_id: int) -> OrderLine:
        self._assert_editable()
        line = self.find_line(line_id)
        if line is None:
            raise ValidationError(f"Line #{line_id} is not part of order #{self.id}")
        self.lines.remove(line)
        return line

    def update_line(self, line_id: int, quantity: int, price: Money) -> OrderLine:
        self._assert_editable()
        line = self.find_line(line_id)
        if line is None:
            raise ValidationError(f"Line #{line_id} is not part of order #{self.id}")
        line.quantity = Quantity(quantity)
        line.price = price
        return line

    def find_line(self, line_id: int) -> OrderLine | None:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

    def make_free(self) -> int:
        """Zero every line price; returns how many lines were changed.

        Quantity and VAT percent are kept as they are.  Like every other
        line change this is refused once the order has been invoiced.
        """
        self._assert_editable()
        changed = 0
        for line in self.lines:
            if not line.price.is_zero:
                line.price = Money.zero(line.price.currency)
                changed += 1
        return changed

    # --- Customer details -----------------------------------------------------

    def update_details(
        self,
        customer_name: str,
        customer_email: str,
        invoice_reference: str | None,
        comments: str | None,
    ) -> None:
        self.customer_name = customer_name
        self.customer_email = customer_email
        self.customer_invoice_reference = invoice_reference
        self.comments = comments

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money(Decimal("0.00"))
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def total_vat(self) -> Money:
        result = Money(Decimal("0.00"))
        for line in self.lines:
            result = result + line.vat_amount
        return result

    # --- Internal helpers -----------------------------------------------------

    def _assert_editable(self) -> None:
        if not self.can_edit:
            raise InvalidOperationError(
                f"Order #{self.id} is {self.status.name} and its lines cannot be edited anymore"
            )
