"""Ticket purchase models."""

from enum import Enum
from typing import Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class TicketType(str, Enum):
    """Ticket categories sold at the box office."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"


class TicketRequest(BaseModel):
    """Immutable request for a number of tickets of one type.

    Positivity of quantity is checked by the ticket service, which also
    accepts any object exposing ``ticket_type`` and ``quantity``.
    """

    model_config = ConfigDict(frozen=True)

    ticket_type: TicketType
    quantity: StrictInt


class TicketCounts(BaseModel):
    """Quantities per ticket type, summed across one purchase."""

    model_config = ConfigDict(frozen=True)

    adults: int = Field(default=0, ge=0)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)

    @classmethod
    def aggregate(cls, requests: Iterable[TicketRequest]) -> "TicketCounts":
        """Sum quantities of same-type requests."""
        counts: Dict[TicketType, int] = {ticket_type: 0 for ticket_type in TicketType}
        for request in requests:
            counts[TicketType(request.ticket_type)] += request.quantity
        return cls(
            adults=counts[TicketType.ADULT],
            children=counts[TicketType.CHILD],
            infants=counts[TicketType.INFANT],
        )

    def count(self, ticket_type: TicketType) -> int:
        return {
            TicketType.ADULT: self.adults,
            TicketType.CHILD: self.children,
            TicketType.INFANT: self.infants,
        }[TicketType(ticket_type)]

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants


class PurchaseOrder(BaseModel):
    """Priced summary of a validated purchase. Never persisted."""

    model_config = ConfigDict(frozen=True)

    account_id: int = Field(gt=0)
    total_amount: int = Field(ge=0)
    total_seats: int = Field(ge=0)


class TicketLine(BaseModel):
    """One ticket line of an inbound purchase payload."""

    ticket_type: str
    quantity: StrictInt


class PurchasePayload(BaseModel):
    """Inbound body for POST /purchases."""

    account_id: StrictInt
    tickets: List[TicketLine] = Field(default_factory=list)

