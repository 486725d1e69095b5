"""OrderDraft: the in-progress order edited across the wizard steps.

Both the draft and its line items are frozen. Every operation returns a
new OrderDraft, so a draft handed to the renderer is already a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable
from uuid import uuid4

from orderpad.domain.model.value_objects import Money, Quantity
from orderpad.domain.validation import parse_line_item_input

_CLIENT_FIELDS = ("client_name", "order_date", "payment_terms", "notes")


def _new_item_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class LineItem:
    """One product row. The subtotal is always derived, never stored."""

    id: str
    name: str
    quantity: Quantity
    unit_price: Money

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class OrderDraft:
    """Aggregate root for an order being assembled.

    Invariants:
    - ``line_items`` keeps insertion order; new items are appended
    - line item ids are unique
    - no operation leaves a quantity below 1
    """

    client_name: str = ""
    order_date: str = ""
    payment_terms: str = ""
    line_items: tuple[LineItem, ...] = field(default_factory=tuple)
    notes: str = ""

    # --- Client step ----------------------------------------------------------

    def update_client_fields(self, **fields: str | None) -> OrderDraft:
        """Merge client fields; fields passed as None stay unchanged."""
        unknown = set(fields) - set(_CLIENT_FIELDS)
        if unknown:
            raise TypeError(f"Unknown client field(s): {', '.join(sorted(unknown))}")
        changes = {name: value for name, value in fields.items() if value is not None}
        return replace(self, **changes)

    # --- Products step --------------------------------------------------------

    def add_line_item(
        self,
        name: str,
        quantity: str | int,
        unit_price_text: str,
        id_factory: Callable[[], str] = _new_item_id,
    ) -> OrderDraft:
        """Validate the input and append a new item at the end.

        Raises ValidationError before anything changes.
        """
        clean_name, qty, price = parse_line_item_input(name, quantity, unit_price_text)
        item_id = id_factory()
        while self.find_item(item_id) is not None:
            item_id = id_factory()
        item = LineItem(id=item_id, name=clean_name, quantity=qty, unit_price=price)
        return replace(self, line_items=self.line_items + (item,))

    def increment_quantity(self, item_id: str) -> OrderDraft:
        return self._map_item(item_id, lambda item: replace(item, quantity=item.quantity.incremented()))

    def decrement_quantity(self, item_id: str) -> OrderDraft:
        """Quantity minus one, never below 1. Use ``remove_line_item`` to drop."""
        return self._map_item(item_id, lambda item: replace(item, quantity=item.quantity.decremented()))

    def remove_line_item(self, item_id: str) -> OrderDraft:
        if self.find_item(item_id) is None:
            return self
        return replace(
            self,
            line_items=tuple(item for item in self.line_items if item.id != item_id),
        )

    def find_item(self, item_id: str) -> LineItem | None:
        for item in self.line_items:
            if item.id == item_id:
                return item
        return None

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return Money.sum(item.subtotal for item in self.line_items)

    @property
    def item_count(self) -> int:
        return len(self.line_items)

    @property
    def is_empty(self) -> bool:
        return self == OrderDraft()

    # --- Internal helpers -----------------------------------------------------

    def _map_item(self, item_id: str, change: Callable[[LineItem], LineItem]) -> OrderDraft:
        if self.find_item(item_id) is None:
            return self
        return replace(
            self,
            line_items=tuple(
                change(item) if item.id == item_id else item for item in self.line_items
            ),
        )
