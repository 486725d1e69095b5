"""PDF serialization of a RenderedDocument with reportlab.

The document is built with ``invariant=1`` so reportlab does not embed the
current time or a random file id: the same RenderedDocument always yields
the same bytes. The generation date printed in the header comes from the
document itself.
"""

from __future__ import annotations

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from orderpad.domain.model.rendered_document import RenderedDocument
from orderpad.domain.port.document_serializer import DocumentSerializer

ACCENT = colors.HexColor("#007AFF")
TEXT = colors.HexColor("#333333")
MUTED = colors.HexColor("#888888")
STRIPE = colors.HexColor("#F9F9F9")
NOTES_BACKGROUND = colors.HexColor("#F5F5F5")

MARGIN = 20 * mm
CONTENT_WIDTH = A4[0] - 2 * MARGIN


def _text(value: str) -> str:
    return escape(value).replace("\n", "<br/>")


class ReportLabPdfSerializer(DocumentSerializer):
    """Lays out header, info block, item table, total, notes and footer."""

    mime_type = "application/pdf"
    extension = ".pdf"

    def __init__(self) -> None:
        base = getSampleStyleSheet()
        self._styles = {
            "title": ParagraphStyle(
                "OrderTitle", parent=base["Heading1"], fontSize=24, leading=28,
                textColor=ACCENT, alignment=TA_CENTER, spaceAfter=4,
            ),
            "subtitle": ParagraphStyle(
                "OrderSubtitle", parent=base["Normal"], fontSize=11,
                textColor=MUTED, alignment=TA_CENTER,
            ),
            "section": ParagraphStyle(
                "OrderSection", parent=base["Heading2"], fontSize=14,
                textColor=ACCENT, spaceBefore=14, spaceAfter=8,
            ),
            "label": ParagraphStyle(
                "OrderLabel", parent=base["Normal"], fontName="Helvetica-Bold",
                fontSize=10, textColor=colors.HexColor("#555555"),
            ),
            "cell": ParagraphStyle("OrderCell", parent=base["Normal"], fontSize=10, textColor=TEXT),
            "total_label": ParagraphStyle(
                "OrderTotalLabel", parent=base["Normal"], fontName="Helvetica-Bold",
                fontSize=14, leading=18, alignment=TA_RIGHT, textColor=TEXT,
            ),
            "total_value": ParagraphStyle(
                "OrderTotalValue", parent=base["Normal"], fontName="Helvetica-Bold",
                fontSize=18, leading=22, alignment=TA_RIGHT, textColor=ACCENT,
            ),
        }

    def serialize(self, document: RenderedDocument) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN + 8 * mm,
            title=document.header.title,
            author="orderpad",
            creator="orderpad",
            invariant=1,
        )

        def draw_footer(canvas, page_doc) -> None:
            canvas.saveState()
            canvas.setFont("Helvetica", 8)
            canvas.setFillColor(MUTED)
            canvas.setStrokeColor(colors.HexColor("#EEEEEE"))
            canvas.line(MARGIN, MARGIN + 4 * mm, A4[0] - MARGIN, MARGIN + 4 * mm)
            canvas.drawCentredString(A4[0] / 2, MARGIN, document.footer)
            canvas.drawRightString(A4[0] - MARGIN, MARGIN - 5 * mm, f"Página {page_doc.page}")
            canvas.restoreState()

        doc.build(self._story(document), onFirstPage=draw_footer, onLaterPages=draw_footer)
        return buffer.getvalue()

    # --- Story ----------------------------------------------------------------

    def _story(self, document: RenderedDocument) -> list:
        styles = self._styles
        story: list = [
            Paragraph(_text(document.header.title), styles["title"]),
            Paragraph(_text(document.generated_on), styles["subtitle"]),
            Spacer(1, 10 * mm),
            Paragraph(_text(document.info_title), styles["section"]),
            self._info_table(document),
            Paragraph(_text(document.items_title), styles["section"]),
            self._items_table(document),
            Spacer(1, 8 * mm),
            Paragraph(_text(document.total.label), styles["total_label"]),
            Paragraph(_text(document.total.amount_text), styles["total_value"]),
        ]

        if document.notes is not None:
            story.append(Paragraph(_text(document.notes.title), styles["section"]))
            notes = Table(
                [[Paragraph(_text(document.notes.text), styles["cell"])]],
                colWidths=[CONTENT_WIDTH],
            )
            notes.setStyle(TableStyle([
                ("BACKGROUND", (0, 0), (-1, -1), NOTES_BACKGROUND),
                ("LEFTPADDING", (0, 0), (-1, -1), 10),
                ("RIGHTPADDING", (0, 0), (-1, -1), 10),
                ("TOPPADDING", (0, 0), (-1, -1), 10),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 10),
            ]))
            story.append(notes)

        return story

    def _info_table(self, document: RenderedDocument) -> Table:
        rows = [
            [
                Paragraph(_text(row.label), self._styles["label"]),
                Paragraph(_text(row.value), self._styles["cell"]),
            ]
            for row in document.info_rows
        ]
        table = Table(rows, colWidths=[55 * mm, CONTENT_WIDTH - 55 * mm])
        table.setStyle(TableStyle([
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
        ]))
        return table

    def _items_table(self, document: RenderedDocument) -> Table:
        data: list[list] = [list(document.item_columns)]
        for row in document.item_rows:
            data.append([
                Paragraph(_text(row.name), self._styles["cell"]),
                row.quantity_text,
                row.unit_price_text,
                row.subtotal_text,
            ])

        table = Table(
            data,
            colWidths=[80 * mm, 25 * mm, 32.5 * mm, 32.5 * mm],
            repeatRows=1,
        )
        table.setStyle(TableStyle([
            # Header row
            ("BACKGROUND", (0, 0), (-1, 0), ACCENT),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("TOPPADDING", (0, 0), (-1, -1), 8),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
            # Data rows
            ("ALIGN", (1, 1), (1, -1), "CENTER"),
            ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("LINEBELOW", (0, 1), (-1, -1), 0.5, colors.HexColor("#EEEEEE")),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, STRIPE]),
        ]))
        return table
