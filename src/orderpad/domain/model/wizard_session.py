"""WizardSession: the in-progress order plus the step the user is on.

The steps are linear: CLIENT -> PRODUCTS -> SUMMARY. Only neighbouring
steps are reachable, so there is no way to jump from CLIENT to SUMMARY.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4

from orderpad.domain.exceptions import IncompleteStepError
from orderpad.domain.model.order_draft import OrderDraft
from orderpad.domain.validation import first_missing_client_field, has_line_items


class WizardStep(Enum):
    CLIENT = 1
    PRODUCTS = 2
    SUMMARY = 3


@dataclass
class WizardSession:
    """One wizard run, exclusively owned by the controller.

    ``draft`` is replaced (never mutated) on every edit. A finished or
    cancelled session is thrown away and a new one takes its place.
    """

    session_id: str = field(default_factory=lambda: uuid4().hex)
    step: WizardStep = WizardStep.CLIENT
    draft: OrderDraft = field(default_factory=OrderDraft)
    cancel_requested: bool = False
    export_in_flight: bool = False

    # --- State transitions ----------------------------------------------------

    def advance(self) -> bool:
        """Move one step forward if the current step is complete.

        Returns False at SUMMARY, where there is no next step.
        Raises IncompleteStepError and leaves ``step`` untouched otherwise.
        """
        if self.step is WizardStep.CLIENT:
            missing = first_missing_client_field(self.draft)
            if missing is not None:
                attribute, label = missing
                raise IncompleteStepError(f"Please fill in the {label}", missing=attribute)
            self.step = WizardStep.PRODUCTS
            return True

        if self.step is WizardStep.PRODUCTS:
            if not has_line_items(self.draft):
                raise IncompleteStepError("Add at least one product (no items)", missing="line_items")
            self.step = WizardStep.SUMMARY
            return True

        return False

    def go_back(self) -> bool:
        """Move one step back. Never validates; False at CLIENT."""
        if self.step is WizardStep.SUMMARY:
            self.step = WizardStep.PRODUCTS
            return True
        if self.step is WizardStep.PRODUCTS:
            self.step = WizardStep.CLIENT
            return True
        return False
