"""Interactive CLI command: the step-by-step order wizard."""

from __future__ import annotations

from datetime import date

import click

from orderpad.application.order_wizard import OrderWizardController
from orderpad.domain.exceptions import DomainException, IncompleteStepError, ValidationError
from orderpad.domain.model.wizard_session import WizardStep
from orderpad.infrastructure.bootstrap import order_wizard
from orderpad.infrastructure.cli.display import (
    display_document,
    display_export_result,
    display_items,
    display_step_header,
)
from orderpad.infrastructure.config import Config

DATE_FORMAT = "%d/%m/%Y"

# Returned by the step handlers: keep looping or leave the wizard.
STAY = "stay"
DONE = "done"


def _next(controller: OrderWizardController) -> str:
    try:
        controller.next()
    except IncompleteStepError as exc:
        click.echo(f"Attention: {exc}")
    return STAY


def _cancel(controller: OrderWizardController) -> str:
    controller.request_cancel()
    if click.confirm("Cancel the order? All data will be lost.", default=False):
        controller.confirm_cancel()
        click.echo("Order cancelled.")
        return DONE
    controller.deny_cancel()
    return STAY


def _client_step(controller: OrderWizardController) -> str:
    draft = controller.draft
    controller.update_client(
        client_name=click.prompt("Client name", default=draft.client_name, show_default=False),
        order_date=click.prompt(
            "Order date (DD/MM/AAAA)",
            default=draft.order_date or date.today().strftime(DATE_FORMAT),
        ),
        payment_terms=click.prompt(
            "Payment terms (e.g. 'À vista', '30 dias')",
            default=draft.payment_terms,
            show_default=False,
        ),
        notes=click.prompt("Notes (optional)", default=draft.notes, show_default=False),
    )

    action = click.prompt("Action", type=click.Choice(["next", "cancel"]), default="next")
    if action == "cancel":
        return _cancel(controller)
    return _next(controller)


def _products_step(controller: OrderWizardController) -> str:
    items = controller.draft.line_items
    display_items(controller.draft)

    action = click.prompt(
        "Action",
        type=click.Choice(["add", "+", "-", "remove", "next", "back", "cancel"]),
        default="next" if items else "add",
    )

    if action == "add":
        name = click.prompt("Product name", default="", show_default=False)
        price = click.prompt("Unit price", default="", show_default=False)
        quantity = click.prompt("Quantity", default="1")
        try:
            controller.add_item(name, quantity, price)
        except ValidationError as exc:
            click.echo(f"Error: {exc}")
    elif action in ("+", "-", "remove"):
        if not items:
            click.echo("No products added yet.")
            return STAY
        number = click.prompt("Item #", type=click.IntRange(1, len(items)))
        item_id = items[number - 1].id
        if action == "+":
            controller.increment_item(item_id)
        elif action == "-":
            controller.decrement_item(item_id)
        else:
            controller.remove_item(item_id)
    elif action == "next":
        return _next(controller)
    elif action == "back":
        controller.previous()
    else:
        return _cancel(controller)
    return STAY


def _summary_step(controller: OrderWizardController) -> str:
    display_document(controller.preview())

    action = click.prompt(
        "Action",
        type=click.Choice(["finish", "export", "back", "cancel"]),
        default="export",
    )

    if action == "finish":
        result = controller.finish()
        snapshot = result.snapshot
        click.echo(f"Order for {snapshot.client_name} finished ({snapshot.total}).")
        return DONE
    if action == "export":
        file_name = click.prompt("File name", default=controller.suggested_file_name())
        try:
            result = controller.export(file_name)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
        else:
            display_export_result(result)
    elif action == "back":
        controller.previous()
    else:
        return _cancel(controller)
    return STAY


_STEP_HANDLERS = {
    WizardStep.CLIENT: _client_step,
    WizardStep.PRODUCTS: _products_step,
    WizardStep.SUMMARY: _summary_step,
}


@click.command("wizard")
@click.pass_obj
def wizard_run(config: Config) -> None:
    """Build an order step by step (client, products, summary)."""
    controller = order_wizard(config)

    while True:
        display_step_header(controller.step)
        if _STEP_HANDLERS[controller.step](controller) == DONE:
            return
