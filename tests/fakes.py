"""In-memory fake host capabilities for testing.

These implement the same abstract interfaces as the real adapters
but keep everything in lists. No file I/O, no dialogs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from orderpad.domain.exceptions import ShareDismissed
from orderpad.domain.model.rendered_document import RenderedDocument
from orderpad.domain.port.document_serializer import DocumentSerializer
from orderpad.domain.port.host_capabilities import PrintCapability, ShareCapability


class FakeSerializer(DocumentSerializer):

    mime_type = "application/pdf"
    extension = ".pdf"

    def __init__(self, error: Exception | None = None) -> None:
        self.documents: list[RenderedDocument] = []
        self._error = error

    def serialize(self, document: RenderedDocument) -> bytes:
        if self._error is not None:
            raise self._error
        self.documents.append(document)
        return f"%PDF-fake {document.total.amount_text}".encode("utf-8")


class FakePrintCapability(PrintCapability):

    def __init__(self, error: Exception | None = None) -> None:
        self.files: dict[str, bytes] = {}
        self._error = error

    def render_to_file(self, artifact: bytes, file_name: str) -> Path:
        if self._error is not None:
            raise self._error
        self.files[file_name] = artifact
        return Path("/fake") / file_name


class FakeShareCapability(ShareCapability):

    def __init__(
        self,
        available: bool = True,
        dismiss: bool = False,
        error: Exception | None = None,
        on_share: Callable[[], None] | None = None,
    ) -> None:
        self.shared: list[tuple[Path, str, str]] = []
        self._available = available
        self._dismiss = dismiss
        self._error = error
        self._on_share = on_share

    def is_available(self) -> bool:
        return self._available

    def share(self, location: Path, mime_type: str, dialog_title: str) -> None:
        if self._on_share is not None:
            self._on_share()
        if self._error is not None:
            raise self._error
        if self._dismiss:
            raise ShareDismissed("dialog closed")
        self.shared.append((location, mime_type, dialog_title))
