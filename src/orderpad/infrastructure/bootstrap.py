"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from orderpad.application.export_order import ExportOrderHandler
from orderpad.application.order_wizard import OrderWizardController
from orderpad.domain.port.host_capabilities import ShareCapability
from orderpad.infrastructure.config import Config
from orderpad.infrastructure.host.file_print_capability import FileSystemPrintCapability
from orderpad.infrastructure.host.system_share_capability import (
    NullShareCapability,
    SystemShareCapability,
)
from orderpad.infrastructure.pdf.reportlab_serializer import ReportLabPdfSerializer


def share_capability(config: Config) -> ShareCapability:
    if config.share_enabled:
        return SystemShareCapability()
    return NullShareCapability()


def export_handler(config: Config) -> ExportOrderHandler:
    return ExportOrderHandler(
        serializer=ReportLabPdfSerializer(),
        print_capability=FileSystemPrintCapability(config.output_dir),
        share_capability=share_capability(config),
    )


def order_wizard(config: Config) -> OrderWizardController:
    return OrderWizardController(export_handler(config))
