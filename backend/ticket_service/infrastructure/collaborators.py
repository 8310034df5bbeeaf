from __future__ import annotations

from collections import deque
from typing import Deque, Tuple

from ..domain.collaborators import PaymentService, SeatReservationService

# Only the most recent calls are kept.
HISTORY_LIMIT = 1000


class InMemoryPaymentService(PaymentService):
    """Records charges instead of calling a payment gateway. Development use only."""

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        self.payments: Deque[Tuple[int, int]] = deque(maxlen=history_limit)

    def process_payment(self, account_id: int, amount: int) -> bool:
        self.payments.append((account_id, amount))
        return True


class InMemorySeatReservationService(SeatReservationService):
    """Records reservations instead of calling the seat booking system. Development use only."""

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        self.reservations: Deque[Tuple[int, int]] = deque(maxlen=history_limit)

    def reserve_seats(self, account_id: int, seat_count: int) -> bool:
        self.reservations.append((account_id, seat_count))
        return True
