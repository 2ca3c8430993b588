"""
Payment and seat reservation adapter tests.

Run with: pytest tests/unit/test_collaborators.py -v
"""

import logging

import pytest

from services.payment_service import PaymentProcessor, TicketPaymentGateway
from services.reservation_service import SeatBookingGateway, SeatReservationService


class TestInterfaces:
    """The ports cannot be used without an implementation."""

    def test_payment_processor_is_abstract(self):
        with pytest.raises(TypeError):
            PaymentProcessor()

    def test_seat_reservation_service_is_abstract(self):
        with pytest.raises(TypeError):
            SeatReservationService()


class TestTicketPaymentGateway:
    """Test the payment adapter."""

    def test_charge_logs_request(self, caplog):
        gateway = TicketPaymentGateway()
        logger = logging.getLogger("services.payment_service")
        logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.INFO, logger="services.payment_service"):
                assert gateway.charge(1, 80) is None
        finally:
            logger.removeHandler(caplog.handler)

        record = caplog.records[-1]
        assert record.getMessage() == "Payment requested"
        assert record.account_id == 1
        assert record.amount == 80

    def test_zero_amount_is_accepted(self):
        TicketPaymentGateway().charge(1, 0)

    @pytest.mark.parametrize("account_id,amount", [(0, 10), (1, -5), (1, 2.5), (True, 10)])
    def test_rejects_bad_arguments(self, account_id, amount):
        with pytest.raises(ValueError):
            TicketPaymentGateway().charge(account_id, amount)


class TestSeatBookingGateway:
    """Test the seat reservation adapter."""

    def test_reserve_accepts_valid_request(self):
        assert SeatBookingGateway().reserve(1, 4) is None

    @pytest.mark.parametrize("account_id,seats", [(-1, 1), (1, -1), (1, "2")])
    def test_rejects_bad_arguments(self, account_id, seats):
        with pytest.raises(ValueError):
            SeatBookingGateway().reserve(account_id, seats)
