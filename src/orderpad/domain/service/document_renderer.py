"""Domain service: Document Renderer.

Maps an OrderDraft snapshot to a RenderedDocument. Pure apart from the
generation timestamp, which callers can inject.
"""

from __future__ import annotations

from datetime import datetime

from orderpad.domain.model.order_draft import OrderDraft
from orderpad.domain.model.rendered_document import (
    HeaderBlock,
    InfoRow,
    ItemRow,
    NotesBlock,
    RenderedDocument,
    TotalRow,
)
from orderpad.domain.validation import is_blank

TITLE = "PEDIDO"
GENERATED_LABEL = "Gerado em:"
INFO_TITLE = "Informações do Pedido"
ITEMS_TITLE = "Produtos"
ITEM_COLUMNS = ("Produto", "Quantidade", "Preço Unitário", "Subtotal")
TOTAL_LABEL = "TOTAL DO PEDIDO:"
NOTES_TITLE = "Observações"
FOOTER = "Documento gerado automaticamente pelo sistema de pedidos"

# (attribute, label, placeholder)
_INFO_FIELDS = (
    ("client_name", "Cliente:", "Não informado"),
    ("order_date", "Data:", "Não informada"),
    ("payment_terms", "Condição de Pagamento:", "Não informada"),
)


def render(snapshot: OrderDraft, generated_at: datetime | None = None) -> RenderedDocument:
    """Build the document for *snapshot*.

    Item rows follow ``snapshot.line_items`` order and the total row carries
    ``snapshot.total`` itself.
    """
    return RenderedDocument(
        header=HeaderBlock(title=TITLE, generated_label=GENERATED_LABEL),
        info_title=INFO_TITLE,
        info_rows=tuple(_info_row(snapshot, *field) for field in _INFO_FIELDS),
        items_title=ITEMS_TITLE,
        item_columns=ITEM_COLUMNS,
        item_rows=tuple(
            ItemRow(
                name=item.name,
                quantity=item.quantity.value,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
            )
            for item in snapshot.line_items
        ),
        total=TotalRow(label=TOTAL_LABEL, amount=snapshot.total),
        notes=None if is_blank(snapshot.notes) else NotesBlock(NOTES_TITLE, snapshot.notes.strip()),
        footer=FOOTER,
        generated_at=generated_at or datetime.now(),
    )


def _info_row(snapshot: OrderDraft, attribute: str, label: str, placeholder: str) -> InfoRow:
    value = getattr(snapshot, attribute)
    if is_blank(value):
        return InfoRow(label=label, value=placeholder, is_placeholder=True)
    return InfoRow(label=label, value=value.strip())
