"""
Credential Service
Signup and login: password hashing, verification and token issuance
"""

from functools import lru_cache
from typing import Any, Dict

from core.errors import InvalidCredentials, InvalidRole
from core.logging_config import logger
from core.permissions import landing_page_for
from core.security import create_access_token, get_password_hash, verify_password
from models.enums import Role
from services.account_store import AccountStore


SIGNUP_REDIRECT = "/login.html"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return get_password_hash("not-a-real-password")


class CredentialService:
    """Service class for account creation and authentication"""

    def __init__(self, accounts: AccountStore):
        self.accounts = accounts

    def signup(self, username: str, email: str, password: str, role: str) -> Dict[str, Any]:
        """Validate the role, hash the password and create the account"""
        if role not in Role.list():
            raise InvalidRole(f"Invalid role '{role}'. Must be one of: {', '.join(Role.list())}")

        account = self.accounts.create_account(
            username=username,
            email=email,
            password_hash=get_password_hash(password),
            role=role,
        )
        logger.info(f"Account created: {account['_id']} ({role})")
        return {"message": "Signup successful!", "redirect": SIGNUP_REDIRECT}

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Authenticate and issue a one-hour access token"""
        account = self.accounts.find_by_email(email)

        if account is None:
            # Spend the same bcrypt work as a real check
            verify_password(password, _dummy_hash())
            logger.info("Login failed: unknown email")
            raise InvalidCredentials()

        if not verify_password(password, account.get("password") or ""):
            logger.info(f"Login failed for account {account['_id']}")
            raise InvalidCredentials()

        role = account.get("role")
        token = create_access_token(str(account["_id"]), role)
        logger.info(f"Login successful for account {account['_id']} ({role})")

        return {
            "message": "Login successful",
            "token": token,
            "role": role,
            "redirect": landing_page_for(role),
        }
