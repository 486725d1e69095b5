"""Abstract serializer turning a RenderedDocument into a binary artifact."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderpad.domain.model.rendered_document import RenderedDocument


class DocumentSerializer(ABC):

    mime_type: str = "application/octet-stream"
    extension: str = ""

    @abstractmethod
    def serialize(self, document: RenderedDocument) -> bytes:
        """Return the document bytes; identical documents give identical bytes."""
