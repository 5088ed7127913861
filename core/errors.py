# core/errors.py

from pymongo.errors import DuplicateKeyError


class FeePortalError(Exception):
    """
    Base error for every failure the API reports to callers.
    Carries the HTTP status and a short, user-safe message.
    """

    status_code = 500
    default_message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmail(FeePortalError):
    status_code = 400
    default_message = "Email already exists"


class InvalidCredentials(FeePortalError):
    status_code = 400
    default_message = "Invalid credentials"


class InvalidRole(FeePortalError):
    status_code = 400
    default_message = "Invalid role"


class InvalidTransition(FeePortalError):
    status_code = 400
    default_message = "Invalid status transition"


class InvalidToken(FeePortalError):
    status_code = 401
    default_message = "Invalid or expired authentication token"


class Forbidden(FeePortalError):
    status_code = 403
    default_message = "Not enough permissions"


class NotFound(FeePortalError):
    status_code = 404
    default_message = "Request not found"


class GenericFailure(FeePortalError):
    status_code = 500
    default_message = "Internal server error"


def extract_database_error(error: Exception) -> str:
    """
    Safely extract readable details from PyMongo errors.
    Handles:
      • OperationFailure / WriteError (carry .details)
      • Connection errors
      • Generic Python exceptions
    """

    details = getattr(error, "details", None)
    if isinstance(details, dict) and details.get("errmsg"):
        return str(details["errmsg"])

    if error.args:
        return str(error.args[0])

    return str(error) or error.__class__.__name__


def handle_database_error(error: Exception, operation: str = "Database operation") -> FeePortalError:
    """
    Handle database errors with consistent formatting.
    Returns the error (doesn't raise) so caller can re-raise with `from`.

    Args:
        error: The exception that occurred
        operation: User-facing description, e.g. "Failed to fetch requests"

    Returns:
        DuplicateEmail for unique-index violations, otherwise GenericFailure.
        The database detail is logged, never returned to the caller.
    """
    from core.logging_config import logger

    logger.error(f"{operation}: {extract_database_error(error)}")

    if isinstance(error, DuplicateKeyError):
        return DuplicateEmail()
    return GenericFailure(operation)
