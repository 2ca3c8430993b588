"""
Ticket purchasing service.

Validates a purchase, prices it and hands the result to the payment and seat
reservation collaborators. Nothing is charged or reserved unless every rule
passes.
"""

from typing import Dict, FrozenSet, List, Optional, Sequence

from models.ticket import PurchaseOrder, TicketCounts, TicketRequest, TicketType
from services.payment_service import PaymentProcessor
from services.reservation_service import SeatReservationService
from utils.error_handling import InvalidPurchaseError, PurchaseRejection
from utils.logging_config import get_logger
from utils.validators import has_attributes, is_positive_int

logger = get_logger(__name__)

MAX_TICKETS_PER_PURCHASE = 25

TICKET_PRICES: Dict[TicketType, int] = {
    TicketType.INFANT: 0,
    TicketType.CHILD: 15,
    TicketType.ADULT: 25,
}

# Infants sit on an adult's lap.
SEAT_ALLOCATING_TYPES: FrozenSet[TicketType] = frozenset(
    {TicketType.CHILD, TicketType.ADULT}
)


class TicketService:
    """Encapsulates ticket purchase rules and pricing."""

    def __init__(
        self,
        payment_processor: PaymentProcessor,
        seat_reservation_service: SeatReservationService,
    ):
        self.payment_processor = payment_processor
        self.seat_reservation_service = seat_reservation_service

    @staticmethod
    def price_of(ticket_type: TicketType) -> int:
        return TICKET_PRICES[TicketType(ticket_type)]

    def purchase_tickets(
        self, account_id: int, ticket_requests: Sequence[TicketRequest]
    ) -> None:
        """
        Charge for and reserve seats for a ticket purchase.

        Raises InvalidPurchaseError before any collaborator call when the
        request breaks a rule. Collaborator errors propagate unchanged.
        """
        self.place_order(self.build_order(account_id, ticket_requests))

    def place_order(self, order: PurchaseOrder) -> None:
        """Charge and reserve seats for an order produced by build_order."""
        self.payment_processor.charge(order.account_id, order.total_amount)
        self.seat_reservation_service.reserve(order.account_id, order.total_seats)

        logger.info(
            "Tickets purchased",
            extra={
                "account_id": order.account_id,
                "total_amount": order.total_amount,
                "total_seats": order.total_seats,
            },
        )

    def build_order(
        self, account_id: int, ticket_requests: Sequence[TicketRequest]
    ) -> PurchaseOrder:
        """Validate and price a purchase without side effects."""
        counts = self.validate(account_id, ticket_requests)
        return PurchaseOrder(
            account_id=account_id,
            total_amount=self._total_amount(counts),
            total_seats=self._total_seats(counts),
        )

    def validate(
        self, account_id: int, ticket_requests: Optional[Sequence[TicketRequest]]
    ) -> TicketCounts:
        """Apply every purchasing rule, in order, and return the aggregated counts."""
        try:
            self._validate_account_id(account_id)
            requests = self._as_list(ticket_requests)
            self._validate_ticket_requests(requests)
            counts = TicketCounts.aggregate(requests)
            self._validate_purchase_rules(counts)
        except InvalidPurchaseError as exc:
            logger.warning(
                "Ticket purchase rejected",
                extra={"account_id": str(account_id), "reason": exc.reason.value},
            )
            raise
        return counts

    def _validate_account_id(self, account_id: int) -> None:
        if not is_positive_int(account_id):
            raise InvalidPurchaseError(PurchaseRejection.INVALID_ACCOUNT)

    @staticmethod
    def _as_list(ticket_requests: Optional[Sequence[TicketRequest]]) -> List[TicketRequest]:
        if ticket_requests is None:
            return []
        try:
            return list(ticket_requests)
        except TypeError:
            raise InvalidPurchaseError(PurchaseRejection.MALFORMED_REQUEST) from None

    def _validate_ticket_requests(self, ticket_requests: List[TicketRequest]) -> None:
        if not ticket_requests:
            raise InvalidPurchaseError(PurchaseRejection.EMPTY_ORDER)

        # Each valid request holds at least one ticket, so the request count
        # is a lower bound on the ticket total.
        if len(ticket_requests) > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseError(PurchaseRejection.TOO_MANY_TICKETS)

        for request in ticket_requests:
            if not has_attributes(request, "ticket_type", "quantity"):
                raise InvalidPurchaseError(PurchaseRejection.MALFORMED_REQUEST)

            try:
                TicketType(request.ticket_type)
            except ValueError:
                raise InvalidPurchaseError(
                    PurchaseRejection.INVALID_TICKET_TYPE,
                    f"Invalid ticket type: {request.ticket_type}",
                ) from None

            if not is_positive_int(request.quantity):
                raise InvalidPurchaseError(PurchaseRejection.INVALID_QUANTITY)

    def _validate_purchase_rules(self, counts: TicketCounts) -> None:
        if counts.total > MAX_TICKETS_PER_PURCHASE:
            raise InvalidPurchaseError(PurchaseRejection.TOO_MANY_TICKETS)

        if (counts.children > 0 or counts.infants > 0) and counts.adults == 0:
            raise InvalidPurchaseError(PurchaseRejection.ADULT_REQUIRED)

        if counts.infants > counts.adults:
            raise InvalidPurchaseError(PurchaseRejection.TOO_MANY_INFANTS)

    def _total_amount(self, counts: TicketCounts) -> int:
        return sum(
            TICKET_PRICES[ticket_type] * counts.count(ticket_type)
            for ticket_type in TicketType
        )

    def _total_seats(self, counts: TicketCounts) -> int:
        return sum(counts.count(ticket_type) for ticket_type in SEAT_ALLOCATING_TYPES)
