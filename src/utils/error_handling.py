"""Custom exceptions and helpers for consistent error responses."""

import json
from enum import Enum
from typing import Any, Dict, Optional


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class BadRequestError(AppError):
    """Raised when a request body cannot be parsed."""

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message, status_code=400)


class InternalError(AppError):
    """Raised when an unexpected failure stops a request."""

    def __init__(self, message: str = "Internal error"):
        super().__init__(message, status_code=500)


class PurchaseRejection(str, Enum):
    """Reason codes for a rejected ticket purchase."""

    INVALID_ACCOUNT = "invalid_account"
    EMPTY_ORDER = "empty_order"
    TOO_MANY_TICKETS = "too_many_tickets"
    INVALID_TICKET_TYPE = "invalid_ticket_type"
    INVALID_QUANTITY = "invalid_quantity"
    MALFORMED_REQUEST = "malformed_request"
    ADULT_REQUIRED = "adult_required"
    TOO_MANY_INFANTS = "too_many_infants"


_DEFAULT_MESSAGES: Dict[PurchaseRejection, str] = {
    PurchaseRejection.INVALID_ACCOUNT: "Invalid account ID",
    PurchaseRejection.EMPTY_ORDER: "No tickets requested",
    PurchaseRejection.TOO_MANY_TICKETS: "Maximum 25 tickets per purchase",
    PurchaseRejection.INVALID_TICKET_TYPE: "Invalid ticket type",
    PurchaseRejection.INVALID_QUANTITY: "Invalid ticket quantity",
    PurchaseRejection.MALFORMED_REQUEST: "Invalid ticket request format",
    PurchaseRejection.ADULT_REQUIRED: "Child and infant tickets require an adult ticket",
    PurchaseRejection.TOO_MANY_INFANTS: "Cannot have more infants than adults",
}


class InvalidPurchaseError(AppError):
    """Raised when a ticket purchase request breaks a purchasing rule."""

    def __init__(self, reason: PurchaseRejection, message: Optional[str] = None):
        super().__init__(message or _DEFAULT_MESSAGES[reason], status_code=422)
        self.reason = reason


def to_response(error: AppError, **extra: Any) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    body: Dict[str, Any] = {"message": str(error), "status": "error"}
    reason = getattr(error, "reason", None)
    if reason is not None:
        body["reason"] = reason.value
    body.update(extra)
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
