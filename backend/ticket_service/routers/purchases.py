from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_account_id, get_payment_service, get_seat_reservation_service
from ..domain.collaborators import PaymentService, SeatReservationService
from ..domain.errors import InvalidPurchaseError
from ..schemas import PurchaseCreate, PurchaseRead
from ..usecases import purchases as purchase_usecase
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="", tags=["purchases"])


@router.post("/purchases", response_model=PurchaseRead, status_code=status.HTTP_201_CREATED)
def purchase_tickets(
    payload: PurchaseCreate,
    account_id: int = Depends(get_account_id),
    payment_service: PaymentService = Depends(get_payment_service),
    seat_reservation_service: SeatReservationService = Depends(get_seat_reservation_service),
) -> PurchaseRead:
    requests = payload.to_domain()
    try:
        result = purchase_usecase.purchase_tickets(
            payment_service,
            seat_reservation_service,
            account_id,
            *requests,
        )
    except InvalidPurchaseError as exc:
        emit_audit_log(
            action="purchase.rejected",
            initiator="account",
            account_id=account_id,
            request_count=len(requests),
            message=exc.reason,
        )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.reason) from exc

    emit_audit_log(
        action="purchase.completed",
        initiator="account",
        account_id=account_id,
        total_cost=result.total_cost,
        total_seats=result.total_seats,
        request_count=len(requests),
    )
    return PurchaseRead.from_result(account_id=account_id, result=result)
