"""One-shot CLI command: build an order from options and export it."""

from __future__ import annotations

import click

from orderpad.domain.exceptions import DomainException
from orderpad.infrastructure.bootstrap import order_wizard
from orderpad.infrastructure.cli.display import display_document, display_export_result
from orderpad.infrastructure.config import Config


def _parse_item(raw: str) -> tuple[str, str, str]:
    """Parse 'Widget:3:12,50' into (name, quantity, unit price)."""
    parts = raw.rsplit(":", 2)
    if len(parts) != 3 or not parts[0].strip():
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'Name:Quantity:UnitPrice'."
        )
    name, quantity, price = parts
    return name.strip(), quantity.strip(), price.strip()


@click.command("export")
@click.option("--client", required=True, help="Client (company) name.")
@click.option("--date", "order_date", required=True, help="Order date, DD/MM/AAAA.")
@click.option("--terms", required=True, help="Payment terms, e.g. '30 dias'.")
@click.option("--notes", default="", help="Optional notes printed on the order.")
@click.option(
    "--item", "items", multiple=True, required=True,
    help="Item as 'Name:Quantity:UnitPrice'. Repeat for more items.",
)
@click.option("--file-name", default=None, help="PDF file name (default: pedido_<client>_<date>).")
@click.pass_obj
def order_export(
    config: Config,
    client: str,
    order_date: str,
    terms: str,
    notes: str,
    items: tuple[str, ...],
    file_name: str | None,
) -> None:
    """Create an order in one go and export it as PDF."""
    specs = [_parse_item(raw) for raw in items]
    controller = order_wizard(config)

    try:
        controller.update_client(
            client_name=client, order_date=order_date, payment_terms=terms, notes=notes
        )
        controller.next()
        for name, quantity, price in specs:
            controller.add_item(name, quantity, price)
        controller.next()
        display_document(controller.preview())
        click.echo()
        result = controller.export(file_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_export_result(result)
