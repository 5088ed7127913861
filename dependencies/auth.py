from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from core.errors import InvalidToken
from core.permissions import ROLE_PERMISSIONS
from core.security import decode_access_token


bearer_scheme = HTTPBearer(auto_error=False)


# ============================================================
# Current User (identity carried by the access token)
# ============================================================
class CurrentUser(BaseModel):
    id: str
    role: str


# ============================================================
# AUTH DECODING (validates the JWT issued by /login)
# ============================================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidToken("Missing bearer token")

    payload = decode_access_token(credentials.credentials)

    role = payload["role"]
    if role not in ROLE_PERMISSIONS:
        raise InvalidToken()

    return CurrentUser(id=str(payload["id"]), role=role)

