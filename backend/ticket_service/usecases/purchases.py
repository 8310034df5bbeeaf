from ..domain.collaborators import PaymentService, SeatReservationService
from ..domain.errors import InvalidPurchaseError
from ..domain.services import calculate_purchase
from ..models import PurchaseResult, TicketTypeRequest


def purchase_tickets(
    payment_service: PaymentService,
    seat_reservation_service: SeatReservationService,
    account_id: int,
    *requests: TicketTypeRequest,
) -> PurchaseResult:
    result = calculate_purchase(requests)

    # Payment first: seats are never reserved for an unpaid purchase.
    try:
        paid = payment_service.process_payment(account_id, result.total_cost)
    except Exception as exc:
        raise InvalidPurchaseError(str(exc) or "payment processing failed") from exc
    if not paid:
        raise InvalidPurchaseError("payment processing failed")

    try:
        reserved = seat_reservation_service.reserve_seats(account_id, result.total_seats)
    except Exception as exc:
        raise InvalidPurchaseError(str(exc) or "seat reservation failed") from exc
    if not reserved:
        raise InvalidPurchaseError("seat reservation failed")
    return result
