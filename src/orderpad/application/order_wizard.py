"""Application service: the order wizard controller.

Owns the single WizardSession. Every draft edit goes through the
OrderDraft operations and every step change through the session's
transitions; the host UI only calls methods here and reads the results.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from orderpad.application.dto import ExportResult, TransitionOutcome, TransitionResult
from orderpad.application.export_order import ExportOrderHandler, suggested_file_name
from orderpad.domain.exceptions import (
    ExportInProgressError,
    IncompleteStepError,
    InvalidTransitionError,
)
from orderpad.domain.model.order_draft import OrderDraft
from orderpad.domain.model.rendered_document import RenderedDocument
from orderpad.domain.model.wizard_session import WizardSession, WizardStep
from orderpad.domain.service.document_renderer import render

logger = logging.getLogger(__name__)


class OrderWizardController:

    def __init__(
        self,
        export_handler: ExportOrderHandler,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._export_handler = export_handler
        self._clock = clock
        self._session = WizardSession()
        logger.info("Wizard session %s started", self._session.session_id)

    # --- Read access ----------------------------------------------------------

    @property
    def step(self) -> WizardStep:
        return self._session.step

    @property
    def draft(self) -> OrderDraft:
        return self._session.draft

    @property
    def session_id(self) -> str:
        return self._session.session_id

    @property
    def cancel_requested(self) -> bool:
        return self._session.cancel_requested

    @property
    def export_in_flight(self) -> bool:
        return self._session.export_in_flight

    def preview(self) -> RenderedDocument:
        """Render the current draft without exporting it."""
        return render(self._session.draft, self._clock())

    def suggested_file_name(self) -> str:
        return suggested_file_name(self._session.draft)

    # --- Draft edits ----------------------------------------------------------

    def update_client(
        self,
        client_name: str | None = None,
        order_date: str | None = None,
        payment_terms: str | None = None,
        notes: str | None = None,
    ) -> OrderDraft:
        self._session.draft = self._session.draft.update_client_fields(
            client_name=client_name,
            order_date=order_date,
            payment_terms=payment_terms,
            notes=notes,
        )
        return self._session.draft

    def add_item(self, name: str, quantity: str | int, unit_price_text: str) -> OrderDraft:
        """Append a line item; raises ValidationError with the draft untouched."""
        self._session.draft = self._session.draft.add_line_item(name, quantity, unit_price_text)
        added = self._session.draft.line_items[-1]
        logger.debug("Added item %s (%s x %s)", added.name, added.quantity, added.unit_price)
        return self._session.draft

    def increment_item(self, item_id: str) -> OrderDraft:
        self._session.draft = self._session.draft.increment_quantity(item_id)
        return self._session.draft

    def decrement_item(self, item_id: str) -> OrderDraft:
        self._session.draft = self._session.draft.decrement_quantity(item_id)
        return self._session.draft

    def remove_item(self, item_id: str) -> OrderDraft:
        self._session.draft = self._session.draft.remove_line_item(item_id)
        return self._session.draft

    # --- Navigation -----------------------------------------------------------

    def next(self) -> TransitionResult:
        """Advance one step; raises IncompleteStepError if the step is not done."""
        previous = self._session.step
        try:
            moved = self._session.advance()
        except IncompleteStepError as exc:
            logger.info("Next blocked at %s: %s", previous.name, exc)
            raise
        if not moved:
            return self._result(TransitionOutcome.UNCHANGED)
        logger.info("Wizard %s -> %s", previous.name, self._session.step.name)
        return self._result(TransitionOutcome.ADVANCED)

    def previous(self) -> TransitionResult:
        previous = self._session.step
        if not self._session.go_back():
            return self._result(TransitionOutcome.UNCHANGED)
        logger.info("Wizard %s -> %s", previous.name, self._session.step.name)
        return self._result(TransitionOutcome.MOVED_BACK)

    def finish(self) -> TransitionResult:
        """Complete the order from SUMMARY and start over with an empty draft."""
        if self._session.step is not WizardStep.SUMMARY:
            raise InvalidTransitionError(
                f"Finish is only available from the summary step (current: {self._session.step.name})"
            )
        snapshot = self._session.draft
        logger.info(
            "Order finished: client=%s items=%d total=%s",
            snapshot.client_name,
            snapshot.item_count,
            snapshot.total,
        )
        self._reset()
        return self._result(TransitionOutcome.FINISHED, snapshot)

    # --- Cancellation (request, then confirm or deny) -------------------------

    def request_cancel(self) -> TransitionResult:
        self._session.cancel_requested = True
        return self._result(TransitionOutcome.CANCEL_REQUESTED)

    def deny_cancel(self) -> TransitionResult:
        self._require_cancel_request()
        self._session.cancel_requested = False
        return self._result(TransitionOutcome.CANCEL_DENIED)

    def confirm_cancel(self) -> TransitionResult:
        self._require_cancel_request()
        snapshot = self._session.draft
        logger.info("Order cancelled at step %s", self._session.step.name)
        self._reset()
        return self._result(TransitionOutcome.CANCELLED, snapshot)

    # --- Export ---------------------------------------------------------------

    def export(self, file_name: str | None = None) -> ExportResult:
        """Render the current draft and hand it to the host.

        Only one export per session may be pending. On failure the session
        and its step are left as they were.
        """
        session = self._session
        if session.step is not WizardStep.SUMMARY:
            raise IncompleteStepError(
                "Export is only available from the summary step", missing="summary"
            )
        if session.export_in_flight:
            raise ExportInProgressError("An export for this order is already in progress")

        session.export_in_flight = True
        try:
            document = render(session.draft, self._clock())
            result = self._export_handler.handle(
                document, file_name or suggested_file_name(session.draft)
            )
        finally:
            session.export_in_flight = False

        logger.info("Export %s: %s", result.outcome.value, result.file_name)
        return result

    # --- Internal helpers -----------------------------------------------------

    def _require_cancel_request(self) -> None:
        if not self._session.cancel_requested:
            raise InvalidTransitionError("No cancellation is pending")

    def _reset(self) -> None:
        self._session = WizardSession()
        logger.info("Wizard session %s started", self._session.session_id)

    def _result(
        self, outcome: TransitionOutcome, snapshot: OrderDraft | None = None
    ) -> TransitionResult:
        return TransitionResult(outcome=outcome, step=self._session.step, snapshot=snapshot)
