"""Abstract host capabilities used to hand an exported order to the user.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (file system, desktop opener)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class PrintCapability(ABC):

    @abstractmethod
    def render_to_file(self, artifact: bytes, file_name: str) -> Path:
        """Store the serialized document and return where it landed."""


class ShareCapability(ABC):

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the host can offer a share/save dialog."""

    @abstractmethod
    def share(self, location: Path, mime_type: str, dialog_title: str) -> None:
        """Offer the file to the user.

        Raises ShareDismissed if the user closes the dialog.
        """
