from dataclasses import dataclass
from typing import Any, Dict

from src.core.errors import StoreError
from src.utils.metrics import WAITLIST_SIGNUP_COUNT
from src.utils.validation import is_valid_email, normalize_email

from src.utils.logger import get_logger
logger = get_logger(__name__)

EMAIL_REQUIRED = "Email is required"
INVALID_EMAIL = "Invalid email format"
JOINED_MESSAGE = "Successfully joined the waitlist!"
ALREADY_REGISTERED_MESSAGE = "This email is already on the waitlist"
DATABASE_ERROR = "Database error. Please try again."
UNEXPECTED_ERROR = "An unexpected error occurred"
METHOD_NOT_ALLOWED = "Method not allowed"

@dataclass
class SignupResult:
    status_code: int
    body: Dict[str, Any]

def _failure(status_code: int, error: str, outcome: str) -> SignupResult:
    WAITLIST_SIGNUP_COUNT.labels(outcome=outcome).inc()
    return SignupResult(status_code, {"success": False, "error": error})

def process_signup(payload: Any, store, notifier, source: str) -> SignupResult:
    """
    Validate, store and welcome a waitlist signup.

    payload is the decoded JSON body (None when it could not be decoded).
    A duplicate email is a success with alreadyRegistered set. The welcome
    email is only sent for new entries and its failure never changes the
    result.
    """
    try:
        email = payload.get("email") if isinstance(payload, dict) else None
        if not email or not isinstance(email, str):
            return _failure(400, EMAIL_REQUIRED, "invalid")

        email = normalize_email(email)
        if not is_valid_email(email):
            return _failure(400, INVALID_EMAIL, "invalid")

        try:
            result = store.insert(email, source)
        except StoreError as e:
            logger.error(f"Waitlist store error: {str(e)}")
            return _failure(500, DATABASE_ERROR, "store_error")

        if not result.created:
            WAITLIST_SIGNUP_COUNT.labels(outcome="already_registered").inc()
            return SignupResult(200, {
                "success": True,
                "alreadyRegistered": True,
                "message": ALREADY_REGISTERED_MESSAGE,
            })

        try:
            notifier.send_welcome(email)
        except Exception as e:
            # The entry is stored; delivery is best effort
            logger.error(f"Welcome email error: {str(e)}")

        WAITLIST_SIGNUP_COUNT.labels(outcome="created").inc()
        return SignupResult(200, {"success": True, "message": JOINED_MESSAGE})
    except Exception as e:
        logger.error(f"Unexpected error in waitlist signup: {str(e)}", exc_info=True)
        return _failure(500, UNEXPECTED_ERROR, "unexpected_error")
