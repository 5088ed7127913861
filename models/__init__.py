# -------------------------
# Enums
# -------------------------
from .enums import (
    Role,
    FeeType,
    RequestStatus,
)

# -------------------------
# Account / Auth Models
# -------------------------
from .user import (
    SignupRequest,
    SignupResponse,
    LoginRequest,
    LoginResponse,
    UserRead,
)

# -------------------------
# Fee Request Models
# -------------------------
from .fee_request import (
    FeeRequestCreate,
    FeeRequestDecision,
    FeeRequestRead,
    PaymentRequest,
    MessageResponse,
    SubmitResponse,
)

__all__ = [
    # enums
    "Role",
    "FeeType",
    "RequestStatus",

    # accounts
    "SignupRequest",
    "SignupResponse",
    "LoginRequest",
    "LoginResponse",
    "UserRead",

    # fee requests
    "FeeRequestCreate",
    "FeeRequestDecision",
    "FeeRequestRead",
    "PaymentRequest",
    "MessageResponse",
    "SubmitResponse",
]
