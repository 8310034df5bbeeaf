from functools import lru_cache

from fastapi import Header, HTTPException, status

from .infrastructure.collaborators import InMemoryPaymentService, InMemorySeatReservationService


def get_account_id(x_account_id: str | None = Header(default=None)) -> int:
    if x_account_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="X-Account-Id header required")
    try:
        return int(x_account_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid X-Account-Id") from exc


@lru_cache
def get_payment_service() -> InMemoryPaymentService:
    return InMemoryPaymentService()


@lru_cache
def get_seat_reservation_service() -> InMemorySeatReservationService:
    return InMemorySeatReservationService()
