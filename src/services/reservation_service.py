"""
Seat reservation collaborator.

Seat allocation belongs to the external booking provider; this module only
defines the port the ticket service calls and a thin adapter for it.
"""

from abc import ABC, abstractmethod

from utils.logging_config import get_logger
from utils.validators import is_positive_int

logger = get_logger(__name__)


class SeatReservationService(ABC):
    """Reserves seats for a purchase."""

    @abstractmethod
    def reserve(self, account_id: int, seats: int) -> None:
        """Reserve the given number of seats for the account."""
        ...


class SeatBookingGateway(SeatReservationService):
    """Adapter for the external seat booking provider."""

    def reserve(self, account_id: int, seats: int) -> None:
        if not is_positive_int(account_id):
            raise ValueError("account_id must be a positive integer")
        if not isinstance(seats, int) or isinstance(seats, bool) or seats < 0:
            raise ValueError("seats must be a non-negative integer")

        logger.info(
            "Seat reservation requested",
            extra={"account_id": account_id, "seats": seats},
        )
