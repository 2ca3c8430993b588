"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import purchase_tickets` to work
when running tests, mirroring the deployed layout where src/ is the
import root.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def _ensure_src_on_sys_path() -> None:
    """Add src/ to sys.path if missing."""
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_sys_path()

os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("LOG_LEVEL", "INFO")


@pytest.fixture
def payment_processor():
    from services.payment_service import PaymentProcessor

    return MagicMock(spec=PaymentProcessor)


@pytest.fixture
def seat_reservation_service():
    from services.reservation_service import SeatReservationService

    return MagicMock(spec=SeatReservationService)


@pytest.fixture
def ticket_service(payment_processor, seat_reservation_service):
    from services.ticket_service import TicketService

    return TicketService(payment_processor, seat_reservation_service)
