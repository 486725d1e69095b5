from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from orderpad.infrastructure.cli.export_commands import order_export
from orderpad.infrastructure.cli.wizard_commands import wizard_run
from orderpad.infrastructure.config import Config
from orderpad.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Where exported PDFs are written (overrides ORDERPAD_OUTPUT_DIR).",
)
@click.option("--no-share", is_flag=True, default=False, help="Save PDFs without opening them.")
@click.option("--log-level", default=None, help="Log level (overrides ORDERPAD_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, output_dir: Path | None, no_share: bool, log_level: str | None) -> None:
    """orderpad: build a sales order step by step and export it as PDF"""
    config = Config.from_env()
    if output_dir is not None:
        config = replace(config, output_dir=output_dir)
    if no_share:
        config = replace(config, share_enabled=False)
    if log_level:
        config = replace(config, log_level=log_level.upper())

    setup_logging(
        log_level=config.log_level,
        log_dir=config.log_dir,
        enable_file_logging=config.file_logging,
    )
    ctx.obj = config


# Register subcommands
cli.add_command(wizard_run)
cli.add_command(order_export)
