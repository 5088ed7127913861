from fastapi import Depends

from core.errors import Forbidden
from core.logging_config import logger
from core.permissions import ROLE_PERMISSIONS
from dependencies.auth import get_current_user, CurrentUser


# -----------------------------------------------------
# Permission evaluation
# -----------------------------------------------------
def get_effective_permissions(user: CurrentUser) -> set:
    return set(ROLE_PERMISSIONS.get(user.role, []))


def has_permission(user: CurrentUser, permission: str) -> bool:
    return permission in get_effective_permissions(user)


# -----------------------------------------------------
# FastAPI dependency wrapper
# -----------------------------------------------------
def requires_permission(permission: str):
    """
    Usage:
        @router.post("/pay-fee")
        def pay(current_user: CurrentUser = Depends(requires_permission("requests:pay"))):
    """

    def dependency(current_user: CurrentUser = Depends(get_current_user)):
        if not has_permission(current_user, permission):
            logger.warning(
                f"Account {current_user.id} ({current_user.role}) denied '{permission}'"
            )
            raise Forbidden(f"Insufficient permissions: '{permission}' required")
        return current_user

    return dependency
