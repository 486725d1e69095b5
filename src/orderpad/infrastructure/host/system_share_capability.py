"""ShareCapability implementations for desktop and headless hosts."""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

import click

from orderpad.domain.exceptions import ExportError
from orderpad.domain.port.host_capabilities import ShareCapability

logger = logging.getLogger(__name__)


class SystemShareCapability(ShareCapability):
    """Opens the exported file with the desktop's default application."""

    def is_available(self) -> bool:
        if sys.platform in ("win32", "darwin"):
            return True
        return shutil.which("xdg-open") is not None

    def share(self, location: Path, mime_type: str, dialog_title: str) -> None:
        logger.debug("Opening %s (%s) for '%s'", location, mime_type, dialog_title)
        exit_code = click.launch(str(location))
        if exit_code != 0:
            raise ExportError(f"Could not open {location.name} (exit code {exit_code})")


class NullShareCapability(ShareCapability):
    """For hosts without any way to offer files; exports end up saved only."""

    def is_available(self) -> bool:
        return False

    def share(self, location: Path, mime_type: str, dialog_title: str) -> None:
        raise ExportError("Sharing is not available on this host")
