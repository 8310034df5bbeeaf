from __future__ import annotations

from typing import Protocol


class PaymentService(Protocol):
    def process_payment(self, account_id: int, amount: int) -> bool: ...


class SeatReservationService(Protocol):
    def reserve_seats(self, account_id: int, seat_count: int) -> bool: ...
