"""Terminal rendering shared by the CLI commands."""

from __future__ import annotations

import click

from orderpad.application.dto import ExportOutcome, ExportResult
from orderpad.domain.model.order_draft import OrderDraft
from orderpad.domain.model.rendered_document import RenderedDocument
from orderpad.domain.model.wizard_session import WizardStep

STEP_TITLES = {
    WizardStep.CLIENT: "Client",
    WizardStep.PRODUCTS: "Products",
    WizardStep.SUMMARY: "Summary",
}


def display_step_header(step: WizardStep) -> None:
    marks = " ".join(
        f"[{s.value}]" if s.value <= step.value else f" {s.value} " for s in WizardStep
    )
    click.echo()
    click.echo(f"{marks}  Step {step.value}/{len(WizardStep)}: {STEP_TITLES[step]}")


def display_items(draft: OrderDraft) -> None:
    if not draft.line_items:
        click.echo("  No products added yet.")
        return

    click.echo(f"  {'#':>3} {'Product':<24} {'Qty':>5} {'Price':>14} {'Subtotal':>14}")
    click.echo(f"  {'-'*63}")
    for number, item in enumerate(draft.line_items, start=1):
        click.echo(
            f"  {number:>3} {item.name[:24]:<24} {item.quantity.value:>5} "
            f"{item.unit_price.format():>14} {item.subtotal.format():>14}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Total':<34} {draft.total.format():>29}")


def display_document(document: RenderedDocument) -> None:
    """Shared formatting for the order summary."""
    click.echo(f"{document.header.title}  ({document.generated_on})")
    click.echo()
    for row in document.info_rows:
        click.echo(f"  {row.label:<24} {row.value}")
    click.echo()

    click.echo(
        f"  {document.item_columns[0]:<24} {document.item_columns[1]:>10} "
        f"{document.item_columns[2]:>15} {document.item_columns[3]:>14}"
    )
    click.echo(f"  {'-'*66}")
    for item in document.item_rows:
        click.echo(
            f"  {item.name[:24]:<24} {item.quantity_text:>10} "
            f"{item.unit_price_text:>15} {item.subtotal_text:>14}"
        )
    click.echo(f"  {'-'*66}")
    click.echo(f"  {document.total.label:<30} {document.total.amount_text:>36}")

    if document.notes is not None:
        click.echo()
        click.echo(f"  {document.notes.title}: {document.notes.text}")


def display_export_result(result: ExportResult) -> None:
    if result.outcome is ExportOutcome.SHARED:
        click.echo(f"PDF \"{result.file_name}\" generated and ready to share: {result.location}")
    elif result.outcome is ExportOutcome.SAVED_ONLY:
        click.echo(f"PDF saved as: {result.location}")
    else:
        click.echo(f"PDF \"{result.file_name}\" could not be saved: no storage available.")
    click.echo(f"Outcome: {result.outcome.value}")
