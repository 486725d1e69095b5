"""Application service: Export Order use case.

Serializes a rendered order and hands the artifact to the host: the print
capability stores it, the share capability offers it to the user. Host
failures surface as ExportError; nothing here touches the wizard session.
"""

from __future__ import annotations

import logging
import re

from orderpad.application.dto import ExportOutcome, ExportResult
from orderpad.domain.exceptions import ExportError, ShareDismissed, ValidationError
from orderpad.domain.model.order_draft import OrderDraft
from orderpad.domain.model.rendered_document import RenderedDocument
from orderpad.domain.port.document_serializer import DocumentSerializer
from orderpad.domain.port.host_capabilities import PrintCapability, ShareCapability

logger = logging.getLogger(__name__)

FILE_NAME_MAX_LENGTH = 100
FILE_NAME_PREFIX = "pedido"
SHARE_DIALOG_TITLE = "Salvar ou Compartilhar Pedido"

_UNSAFE_RE = re.compile(r"[^\w.-]+")
_UNDERSCORES_RE = re.compile(r"_{2,}")


def _safe_stem(text: str) -> str:
    stem = _UNSAFE_RE.sub("_", text.strip())
    stem = _UNDERSCORES_RE.sub("_", stem)
    return stem.strip("._")


def suggested_file_name(draft: OrderDraft) -> str:
    """Default stem such as ``pedido_Acme_01-06-2024`` (no extension)."""
    raw = f"{FILE_NAME_PREFIX}_{draft.client_name.strip()}_{draft.order_date.strip().replace('/', '-')}"
    return _safe_stem(raw)[:FILE_NAME_MAX_LENGTH].rstrip("._")


def normalize_file_name(text: str, extension: str = ".pdf") -> str:
    """Validate a user-edited file name and return it with *extension*."""
    stem = text.strip()
    if extension and stem.lower().endswith(extension):
        stem = stem[: -len(extension)]
    if not stem.strip():
        raise ValidationError("Please enter a file name", field="file_name")
    if len(stem) > FILE_NAME_MAX_LENGTH:
        raise ValidationError(
            f"File name is too long (maximum {FILE_NAME_MAX_LENGTH} characters)",
            field="file_name",
        )
    safe = _safe_stem(stem)
    if not safe:
        raise ValidationError(f"Invalid file name: {text!r}", field="file_name")
    return f"{safe}{extension}"


class ExportOrderHandler:

    def __init__(
        self,
        serializer: DocumentSerializer,
        print_capability: PrintCapability | None,
        share_capability: ShareCapability | None = None,
    ) -> None:
        self._serializer = serializer
        self._print_capability = print_capability
        self._share_capability = share_capability

    def handle(self, document: RenderedDocument, file_name: str) -> ExportResult:
        """Serialize *document* and offer it under *file_name*."""
        final_name = normalize_file_name(file_name, self._serializer.extension)
        artifact = self.serialize(document)
        return self.offer(artifact, final_name)

    def serialize(self, document: RenderedDocument) -> bytes:
        try:
            artifact = self._serializer.serialize(document)
        except ExportError:
            raise
        except Exception as exc:
            logger.exception("Document serialization failed")
            raise ExportError(f"Could not generate the document: {exc}") from exc
        logger.debug("Serialized document (%d bytes)", len(artifact))
        return artifact

    def offer(self, artifact: bytes, file_name: str) -> ExportResult:
        """Store the artifact and offer it through the share dialog.

        Outcomes:
        - no print capability -> UNAVAILABLE
        - share unavailable or dismissed -> SAVED_ONLY
        - shared -> SHARED
        """
        if self._print_capability is None:
            logger.warning("No print capability configured; %s not exported", file_name)
            return ExportResult(ExportOutcome.UNAVAILABLE, file_name)

        try:
            location = self._print_capability.render_to_file(artifact, file_name)
        except ExportError:
            raise
        except Exception as exc:
            logger.exception("Saving %s failed", file_name)
            raise ExportError(f"Could not save {file_name}: {exc}") from exc
        logger.info("Document saved at %s", location)

        share = self._share_capability
        try:
            if share is None or not share.is_available():
                return ExportResult(ExportOutcome.SAVED_ONLY, file_name, location)
            share.share(location, self._serializer.mime_type, SHARE_DIALOG_TITLE)
        except ShareDismissed:
            logger.info("Share dialog dismissed for %s", file_name)
            return ExportResult(ExportOutcome.SAVED_ONLY, file_name, location)
        except ExportError:
            raise
        except Exception as exc:
            logger.exception("Sharing %s failed", file_name)
            raise ExportError(f"Could not share {file_name}: {exc}") from exc

        return ExportResult(ExportOutcome.SHARED, file_name, location)
