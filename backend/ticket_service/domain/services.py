from types import MappingProxyType
from typing import Any, Mapping, Sequence

from ..models import PurchaseResult, TicketType, TicketTypeRequest
from .errors import InvalidPurchaseError

MAX_TICKETS_PER_PURCHASE = 20

TICKET_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 20,
        TicketType.CHILD: 10,
        TicketType.INFANT: 0,
    }
)


def ticket_price(ticket_type: TicketType) -> int:
    return TICKET_PRICES[ticket_type]


def _coerce_ticket_type(value: Any) -> TicketType:
    try:
        return TicketType(value)
    except ValueError as exc:
        raise InvalidPurchaseError("invalid ticket type") from exc


def calculate_purchase(requests: Sequence[TicketTypeRequest]) -> PurchaseResult:
    """
    Pure validation and pricing: checks each request, then the aggregate rules.
    Returns total cost and seats to reserve if OK. Raises InvalidPurchaseError otherwise.
    """
    total_cost = 0
    total_seats = 0
    adult_count = 0
    child_and_infant_count = 0

    for request in requests:
        ticket_type = _coerce_ticket_type(request.ticket_type)
        count = request.no_of_tickets
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidPurchaseError("ticket count must be an integer")
        if count <= 0:
            raise InvalidPurchaseError("ticket count must be greater than zero")

        if ticket_type == TicketType.ADULT:
            adult_count += count
        else:
            child_and_infant_count += count
        total_cost += ticket_price(ticket_type) * count
        # Infants sit on an adult's lap.
        if ticket_type != TicketType.INFANT:
            total_seats += count

    if total_seats > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchaseError(f"cannot purchase more than {MAX_TICKETS_PER_PURCHASE} tickets")
    if child_and_infant_count > 0 and adult_count == 0:
        raise InvalidPurchaseError("child/infant tickets require at least one adult ticket")
    return PurchaseResult(total_cost=total_cost, total_seats=total_seats)
