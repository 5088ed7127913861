# models/fee_request.py

from typing import Optional
from pydantic import BaseModel, Field

from models.enums import FeeType


class FeeRequestCreate(BaseModel):
    """
    Submission payload. There is deliberately no `status` field:
    unknown keys are ignored, so a client-supplied status never
    reaches the store.
    """
    studentName: Optional[str] = None
    regNumber: Optional[str] = None
    year: Optional[str] = None
    branch: Optional[str] = None
    section: Optional[str] = None
    feeType: Optional[FeeType] = None
    amount: Optional[float] = None
    crtFee: Optional[float] = None
    attendance: Optional[str] = None

    # year: 3 or a numeric regNumber is stored as "3"
    model_config = {"coerce_numbers_to_str": True}


class FeeRequestDecision(BaseModel):
    """Faculty decision (status is checked by the workflow engine)."""
    id: str
    status: str
    reason: Optional[str] = None
    faculty: Optional[str] = None


class PaymentRequest(BaseModel):
    requestId: str


class FeeRequestRead(BaseModel):
    id: str = Field(..., alias="_id")
    studentName: Optional[str] = None
    regNumber: Optional[str] = None
    year: Optional[str] = None
    branch: Optional[str] = None
    section: Optional[str] = None
    feeType: Optional[str] = None
    status: str
    reason: Optional[str] = None
    faculty: Optional[str] = None
    amount: Optional[float] = None
    crtFee: float = 0
    attendance: str = ""

    model_config = {"populate_by_name": True}


class MessageResponse(BaseModel):
    message: str


class SubmitResponse(MessageResponse):
    id: str
