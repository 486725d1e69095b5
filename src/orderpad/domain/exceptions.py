"""Domain-level exceptions.

All rejected operations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Bad user input. ``field`` names the offending input, if known."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidAmount(ValidationError):
    """A text value is not a valid non-negative amount."""


class IncompleteStepError(DomainException):
    """A forward transition was attempted with an unmet step requirement."""

    def __init__(self, message: str, missing: str) -> None:
        super().__init__(message)
        self.missing = missing


class InvalidTransitionError(DomainException):
    """The wizard cannot perform this action in its current state."""


class ExportError(DomainException):
    """Serialization or a host capability failed."""


class ExportInProgressError(ExportError):
    """An export for the same session has not resolved yet."""


class ShareDismissed(DomainException):
    """The user closed the host share dialog without picking a target."""
