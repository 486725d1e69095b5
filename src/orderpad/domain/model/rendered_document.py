"""RenderedDocument: the immutable tree produced from an order snapshot.

``generated_at`` is the only non-deterministic field. It is excluded from
equality so two renders of the same draft compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from orderpad.domain.model.value_objects import Money


@dataclass(frozen=True)
class HeaderBlock:
    title: str
    generated_label: str  # prefix shown before the generation date


@dataclass(frozen=True)
class InfoRow:
    label: str
    value: str
    is_placeholder: bool = False


@dataclass(frozen=True)
class ItemRow:
    name: str
    quantity: int
    unit_price: Money
    subtotal: Money

    @property
    def quantity_text(self) -> str:
        return str(self.quantity)

    @property
    def unit_price_text(self) -> str:
        return self.unit_price.format()

    @property
    def subtotal_text(self) -> str:
        return self.subtotal.format()


@dataclass(frozen=True)
class TotalRow:
    label: str
    amount: Money

    @property
    def amount_text(self) -> str:
        return self.amount.format()


@dataclass(frozen=True)
class NotesBlock:
    title: str
    text: str


@dataclass(frozen=True)
class RenderedDocument:
    header: HeaderBlock
    info_title: str
    info_rows: tuple[InfoRow, ...]
    items_title: str
    item_columns: tuple[str, ...]
    item_rows: tuple[ItemRow, ...]
    total: TotalRow
    notes: NotesBlock | None
    footer: str
    generated_at: datetime = field(compare=False)

    @property
    def generated_on(self) -> str:
        """Header subtitle, e.g. ``"Gerado em: 01/06/2024"``."""
        return f"{self.header.generated_label} {self.generated_at.strftime('%d/%m/%Y')}"

    @property
    def has_notes(self) -> bool:
        return self.notes is not None
