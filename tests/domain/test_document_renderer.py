"""Unit tests for the Document Renderer."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from orderpad.domain.model.order_draft import OrderDraft
from orderpad.domain.model.rendered_document import InfoRow
from orderpad.domain.model.value_objects import Money
from orderpad.domain.service.document_renderer import render

GENERATED_AT = datetime(2024, 6, 1, 9, 30)


def _acme(notes: str = "") -> OrderDraft:
    return OrderDraft(
        client_name="Acme",
        order_date="01/06/2024",
        payment_terms="30 dias",
        notes=notes,
    ).add_line_item("Widget", 3, "12.50")


class TestScenario:

    def test_total_row(self):
        document = render(_acme(), GENERATED_AT)
        assert document.total.label == "TOTAL DO PEDIDO:"
        assert document.total.amount == Money.from_major_units("37.50")
        assert document.total.amount_text == "R$ 37,50"

    def test_item_row(self):
        (row,) = render(_acme(), GENERATED_AT).item_rows
        assert row.name == "Widget"
        assert row.quantity_text == "3"
        assert row.unit_price_text == "R$ 12,50"
        assert row.subtotal_text == "R$ 37,50"

    def test_header_and_info(self):
        document = render(_acme(), GENERATED_AT)
        assert document.header.title == "PEDIDO"
        assert document.generated_on == "Gerado em: 01/06/2024"
        assert document.info_rows == (
            InfoRow("Cliente:", "Acme"),
            InfoRow("Data:", "01/06/2024"),
            InfoRow("Condição de Pagamento:", "30 dias"),
        )
        assert document.item_columns == ("Produto", "Quantidade", "Preço Unitário", "Subtotal")
        assert document.footer == "Documento gerado automaticamente pelo sistema de pedidos"


class TestDeterminism:

    def test_same_input_same_document_regardless_of_timestamp(self):
        draft = _acme(notes="Frágil")
        first = render(draft, datetime(2024, 1, 1))
        second = render(draft, datetime(2030, 12, 31))
        assert first == second
        assert first.generated_on != second.generated_on

    def test_default_timestamp_is_now(self):
        before = datetime.now()
        document = render(_acme())
        assert before <= document.generated_at <= datetime.now()

    def test_document_is_immutable(self):
        document = render(_acme(), GENERATED_AT)
        with pytest.raises(FrozenInstanceError):
            document.footer = "changed"

    def test_draft_is_not_consumed(self):
        draft = _acme()
        first = render(draft, GENERATED_AT)
        assert draft.item_count == 1
        assert render(draft, GENERATED_AT) == first


class TestItemRows:

    def test_rows_follow_insertion_order(self):
        draft = OrderDraft()
        for name, price in [("Zeta", "1"), ("Alpha", "99"), ("Mid", "5")]:
            draft = draft.add_line_item(name, 1, price)
        names = [row.name for row in render(draft, GENERATED_AT).item_rows]
        assert names == ["Zeta", "Alpha", "Mid"]

    def test_total_is_the_draft_total(self):
        draft = OrderDraft()
        for price in ["0.10", "0.20", "0.30", "19.99"]:
            draft = draft.add_line_item("Item", 7, price)
        document = render(draft, GENERATED_AT)
        assert document.total.amount == draft.total
        assert Money.sum(row.subtotal for row in document.item_rows) == document.total.amount


class TestNotes:

    @pytest.mark.parametrize("notes", ["", "   ", "\n\t "])
    def test_blank_notes_have_no_block(self, notes):
        document = render(_acme(notes=notes), GENERATED_AT)
        assert document.notes is None
        assert not document.has_notes

    def test_notes_block_has_trimmed_text(self):
        document = render(_acme(notes="  Entregar pela manhã \n"), GENERATED_AT)
        assert document.notes.title == "Observações"
        assert document.notes.text == "Entregar pela manhã"


class TestPlaceholders:

    def test_missing_client_fields_render_placeholders(self):
        document = render(OrderDraft(), GENERATED_AT)
        assert [(row.value, row.is_placeholder) for row in document.info_rows] == [
            ("Não informado", True),
            ("Não informada", True),
            ("Não informada", True),
        ]

    def test_layout_is_stable_for_incomplete_input(self):
        complete = render(_acme(), GENERATED_AT)
        empty = render(OrderDraft(), GENERATED_AT)
        assert len(complete.info_rows) == len(empty.info_rows)
        assert [row.label for row in complete.info_rows] == [row.label for row in empty.info_rows]
        assert empty.total.amount_text == "R$ 0,00"
