from fastapi import APIRouter, Depends

from core.errors import NotFound
from dependencies.auth import get_current_user, CurrentUser
from dependencies.services import get_account_store, get_credential_service
from models.user import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    UserRead,
)
from services.account_store import AccountStore
from services.credential_service import CredentialService


router = APIRouter(tags=["Auth"])


# ============================================================
# SIGNUP
# ============================================================
@router.post("/signup", response_model=SignupResponse, summary="Create an account")
def signup(
    payload: SignupRequest,
    credentials: CredentialService = Depends(get_credential_service),
):
    return credentials.signup(
        username=payload.username.strip(),
        email=payload.email.strip().lower(),
        password=payload.password,
        role=payload.designation.strip(),
    )


# ============================================================
# LOGIN
# ============================================================
@router.post("/login", response_model=LoginResponse, summary="Authenticate user")
def login(
    payload: LoginRequest,
    credentials: CredentialService = Depends(get_credential_service),
):
    return credentials.login(
        email=payload.email.strip().lower(),
        password=payload.password,
    )


# ============================================================
# CURRENT ACCOUNT
# ============================================================
@router.get("/me", response_model=UserRead, summary="Current account")
def read_me(
    current_user: CurrentUser = Depends(get_current_user),
    accounts: AccountStore = Depends(get_account_store),
):
    """Account behind the bearer token. The password hash is never included."""
    account = accounts.find_by_id(current_user.id)
    if account is None:
        raise NotFound("Account not found")

    return UserRead(
        id=str(account["_id"]),
        username=account.get("username") or "",
        email=account.get("email") or "",
        role=account.get("role") or current_user.role,
    )
