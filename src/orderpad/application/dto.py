"""Data Transfer Objects: plain containers that cross layer boundaries.

Results carry what happened to the wizard or the export back to the host
UI without exposing the controller internals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from orderpad.domain.model.order_draft import OrderDraft
from orderpad.domain.model.wizard_session import WizardStep


class TransitionOutcome(Enum):
    ADVANCED = "ADVANCED"
    MOVED_BACK = "MOVED_BACK"
    UNCHANGED = "UNCHANGED"
    FINISHED = "FINISHED"
    CANCEL_REQUESTED = "CANCEL_REQUESTED"
    CANCEL_DENIED = "CANCEL_DENIED"
    CANCELLED = "CANCELLED"


class ExportOutcome(Enum):
    SHARED = "SHARED"
    SAVED_ONLY = "SAVED_ONLY"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class TransitionResult:
    """Output: the step after a transition and what the transition did.

    ``snapshot`` holds the discarded draft after FINISHED or CANCELLED.
    """

    outcome: TransitionOutcome
    step: WizardStep
    snapshot: OrderDraft | None = None


@dataclass(frozen=True)
class ExportResult:
    """Output: how the exported document reached the user."""

    outcome: ExportOutcome
    file_name: str
    location: Path | None = None
