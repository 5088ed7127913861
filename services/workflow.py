"""
Fee request workflow.

    Pending ──decide──▶ Approved ──pay──▶ Paid
       │
       └─────decide──▶ Rejected

Rejected and Paid are terminal. Every transition is applied with a
conditional update on the current status, so of two concurrent writers
only the first succeeds; the second gets InvalidTransition.
"""

from typing import Dict, List, Optional, Set

from core.errors import InvalidTransition, NotFound
from core.logging_config import logger
from models.enums import RequestStatus
from services.fee_request_store import FeeRequestStore


ALLOWED_TRANSITIONS: Dict[RequestStatus, Set[RequestStatus]] = {
    RequestStatus.pending: {RequestStatus.approved, RequestStatus.rejected},
    RequestStatus.approved: {RequestStatus.paid},
    RequestStatus.rejected: set(),
    RequestStatus.paid: set(),
}

DECISION_STATUSES = {RequestStatus.approved, RequestStatus.rejected}

NOT_FOUND_PAYLOAD = {"status": "Not Found"}


def can_transition(current: str, target: str) -> bool:
    try:
        return RequestStatus(target) in ALLOWED_TRANSITIONS.get(RequestStatus(current), set())
    except ValueError:
        return False


class WorkflowEngine:
    """Submission, faculty decisions and payment for fee requests."""

    def __init__(self, store: FeeRequestStore):
        self.store = store

    # -----------------------------------------------------
    # Submit (always enters as Pending)
    # -----------------------------------------------------
    def submit(self, fields: dict) -> str:
        document = {
            "studentName": fields.get("studentName"),
            "regNumber": fields.get("regNumber"),
            "year": fields.get("year"),
            "branch": fields.get("branch"),
            "section": fields.get("section"),
            "feeType": fields.get("feeType"),
            "amount": fields.get("amount"),
            "crtFee": fields.get("crtFee") or 0,
            "attendance": fields.get("attendance") or "",
            "status": RequestStatus.pending.value,
        }
        request_id = self.store.insert(document)
        logger.info(f"Fee request {request_id} submitted for {document['regNumber']}")
        return request_id

    # -----------------------------------------------------
    # Queries
    # -----------------------------------------------------
    def list_pending(self) -> List[dict]:
        return self.store.find_by_status(RequestStatus.pending.value)

    def list_all(self) -> List[dict]:
        return self.store.find_all()

    def get_by_id(self, request_id: str) -> dict:
        request = self.store.find_by_id(request_id)
        if request is None:
            raise NotFound()
        return request

    def get_by_reg_number(self, reg_number: str) -> dict:
        """Soft-fail lookup: unknown regNumber yields {"status": "Not Found"}."""
        request = self.store.find_by_reg_number(reg_number)
        if request is None:
            return dict(NOT_FOUND_PAYLOAD)
        return request

    # -----------------------------------------------------
    # Transitions
    # -----------------------------------------------------
    def decide(self, request_id: str, status: str, reason: Optional[str], faculty: Optional[str]) -> dict:
        current = self.get_by_id(request_id)

        if status not in {s.value for s in DECISION_STATUSES}:
            raise InvalidTransition(
                f"Invalid decision '{status}'. Must be one of: Approved, Rejected"
            )

        fields = {"status": status, "reason": reason or "", "faculty": faculty}
        return self._transition(
            request_id,
            RequestStatus.pending,
            fields,
            "Request can only be decided while Pending",
            current=current,
        )

    def pay(self, request_id: str) -> dict:
        return self._transition(
            request_id,
            RequestStatus.approved,
            {"status": RequestStatus.paid.value},
            "Request not approved for payment",
        )

    def _transition(
        self,
        request_id: str,
        expected: RequestStatus,
        fields: dict,
        rejection: str,
        current: Optional[dict] = None,
    ) -> dict:
        if current is None:
            current = self.get_by_id(request_id)

        if current["status"] != expected.value or not can_transition(current["status"], fields["status"]):
            logger.warning(
                f"Rejected transition on {request_id}: {current['status']} -> {fields['status']}"
            )
            raise InvalidTransition(rejection)

        updated = self.store.update_status(request_id, expected.value, fields)
        if updated is None:
            # status moved between the read and the conditional update
            logger.warning(f"Concurrent update on {request_id}; {fields['status']} not applied")
            raise InvalidTransition(rejection)

        logger.info(f"Fee request {request_id}: {expected.value} -> {updated['status']}")
        return updated
