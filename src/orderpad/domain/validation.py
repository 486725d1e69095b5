"""Validation rules shared by the wizard gates and the line-item editor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orderpad.domain.exceptions import ValidationError
from orderpad.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from orderpad.domain.model.order_draft import OrderDraft

# (attribute, label) in the order the client step asks for them.
REQUIRED_CLIENT_FIELDS: tuple[tuple[str, str], ...] = (
    ("client_name", "client name"),
    ("order_date", "order date"),
    ("payment_terms", "payment terms"),
)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def first_missing_client_field(draft: OrderDraft) -> tuple[str, str] | None:
    """Return ``(attribute, label)`` of the first blank required field."""
    for attribute, label in REQUIRED_CLIENT_FIELDS:
        if is_blank(getattr(draft, attribute)):
            return attribute, label
    return None


def has_line_items(draft: OrderDraft) -> bool:
    return len(draft.line_items) > 0


def parse_line_item_input(
    name: str,
    quantity: str | int,
    unit_price_text: str,
) -> tuple[str, Quantity, Money]:
    """Validate raw line-item input before it touches a draft.

    Raises a field-scoped ValidationError on the first bad input.
    """
    if is_blank(name):
        raise ValidationError("Product name is required", field="name")

    if is_blank(unit_price_text):
        raise ValidationError("Unit price is required", field="unit_price")
    price = Money.from_major_units(unit_price_text)
    if price.is_zero:
        raise ValidationError("Unit price must be greater than zero", field="unit_price")

    return name.strip(), Quantity.parse(quantity), price
