"""Pydantic models for ticket purchases."""

from models.response import ApiResponse  # noqa: F401
from models.ticket import (  # noqa: F401
    PurchaseOrder,
    PurchasePayload,
    TicketCounts,
    TicketLine,
    TicketRequest,
    TicketType,
)
