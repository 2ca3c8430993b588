"""
Payment collaborator.

The ticket service only ever talks to ``PaymentProcessor``. The gateway
adapter stands in for the external payment provider, which always accepts a
request once it has been made.
"""

from abc import ABC, abstractmethod

from utils.logging_config import get_logger
from utils.validators import is_positive_int

logger = get_logger(__name__)


class PaymentProcessor(ABC):
    """Takes payment for a purchase."""

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Charge amount (whole currency units) to the account."""
        ...


class TicketPaymentGateway(PaymentProcessor):
    """Adapter for the external ticket payment provider."""

    def charge(self, account_id: int, amount: int) -> None:
        if not is_positive_int(account_id):
            raise ValueError("account_id must be a positive integer")
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise ValueError("amount must be a non-negative integer")

        logger.info(
            "Payment requested",
            extra={"account_id": account_id, "amount": amount},
        )
