"""
Ticket purchase handler.

Parses POST /purchases, runs the purchase through TicketService and maps
rejections onto HTTP responses. All purchasing rules live in the service.
"""

from __future__ import annotations

import json
import uuid
from typing import Optional

from pydantic import ValidationError

from models.response import ApiResponse
from models.ticket import PurchasePayload
from utils.error_handling import AppError, BadRequestError, InternalError, to_response
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Lazy-loaded so collaborator wiring happens once per warm process
_ticket_service: Optional["TicketService"] = None


def _get_ticket_service():
    """Lazy-load TicketService wired to the production gateways."""
    global _ticket_service
    if _ticket_service is None:
        from services.payment_service import TicketPaymentGateway
        from services.reservation_service import SeatBookingGateway
        from services.ticket_service import TicketService

        _ticket_service = TicketService(TicketPaymentGateway(), SeatBookingGateway())
    return _ticket_service


def _parse_payload(event) -> PurchasePayload:
    try:
        payload = json.loads(event.get("body") or "{}")
        return PurchasePayload.model_validate(payload)
    except (json.JSONDecodeError, TypeError, ValidationError) as exc:
        raise BadRequestError(f"Invalid request: {exc.__class__.__name__}") from exc


def lambda_handler(event, context):
    """Handle POST /purchases."""
    correlation_id = str(uuid.uuid4())

    try:
        payload = _parse_payload(event)
        service = _get_ticket_service()
        order = service.build_order(payload.account_id, payload.tickets)
        service.place_order(order)
    except AppError as exc:
        logger.warning(
            "Purchase request refused",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )
        return to_response(exc, correlation_id=correlation_id)
    except Exception:
        logger.exception("Purchase failed", extra={"correlation_id": correlation_id})
        return to_response(InternalError(), correlation_id=correlation_id)

    response = ApiResponse(
        message="Purchase accepted",
        data=order.model_dump(),
        correlation_id=correlation_id,
    )
    logger.info(
        "Purchase accepted",
        extra={"correlation_id": correlation_id, "account_id": order.account_id},
    )
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": response.model_dump_json(),
    }
