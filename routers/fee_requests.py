# routers/fee_requests.py

from typing import List

from fastapi import APIRouter, Depends

from core.permission_helpers import requires_permission
from dependencies.auth import CurrentUser
from dependencies.services import get_workflow
from models.fee_request import (
    FeeRequestCreate,
    FeeRequestDecision,
    FeeRequestRead,
    MessageResponse,
    PaymentRequest,
    SubmitResponse,
)
from services.workflow import WorkflowEngine

router = APIRouter(tags=["Fee Requests"])


# -----------------------------------------------------
# Student submission (status is always Pending)
# -----------------------------------------------------
@router.post("/request-fee", response_model=SubmitResponse)
def request_fee(
    payload: FeeRequestCreate,
    workflow: WorkflowEngine = Depends(get_workflow),
):
    request_id = workflow.submit(payload.model_dump(mode="json"))
    return {"message": "Fee request submitted successfully!", "id": request_id}


# -----------------------------------------------------
# Faculty queue
# -----------------------------------------------------
@router.get("/requests", response_model=List[FeeRequestRead])
def list_pending_requests(workflow: WorkflowEngine = Depends(get_workflow)):
    return workflow.list_pending()


# -----------------------------------------------------
# HOD overview
# -----------------------------------------------------
@router.get("/all-requests", response_model=List[FeeRequestRead])
def list_all_requests(
    current_user: CurrentUser = Depends(requires_permission("requests:read_all")),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    return workflow.list_all()


# -----------------------------------------------------
# Faculty decision
# -----------------------------------------------------
@router.post("/faculty/update", response_model=MessageResponse)
def faculty_update(
    payload: FeeRequestDecision,
    current_user: CurrentUser = Depends(requires_permission("requests:decide")),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    """
    Approve or reject a Pending request.
    `faculty` defaults to the caller's account id when omitted.
    """
    workflow.decide(
        payload.id,
        payload.status,
        payload.reason,
        payload.faculty or current_user.id,
    )
    return {"message": "Request updated successfully!"}


@router.get("/request/{request_id}", response_model=FeeRequestRead)
def get_request(request_id: str, workflow: WorkflowEngine = Depends(get_workflow)):
    return workflow.get_by_id(request_id)


# -----------------------------------------------------
# Status lookup by regNumber (soft-fail, always 200)
# -----------------------------------------------------
@router.get("/status/{reg_number}", response_model=None)
def request_status(reg_number: str, workflow: WorkflowEngine = Depends(get_workflow)):
    return workflow.get_by_reg_number(reg_number)


# -----------------------------------------------------
# Payment (status flip only)
# -----------------------------------------------------
@router.post("/pay-fee", response_model=MessageResponse)
def pay_fee(
    payload: PaymentRequest,
    current_user: CurrentUser = Depends(requires_permission("requests:pay")),
    workflow: WorkflowEngine = Depends(get_workflow),
):
    workflow.pay(payload.requestId)
    return {"message": "Payment successful!"}
