from typing import Any, List

from pydantic import BaseModel, Field

from .models import PurchaseResult, TicketTypeRequest


class TicketRequestIn(BaseModel):
    # Left untyped: calculate_purchase validates both.
    ticket_type: Any = None
    no_of_tickets: Any = None

    def to_domain(self) -> TicketTypeRequest:
        return TicketTypeRequest(ticket_type=self.ticket_type, no_of_tickets=self.no_of_tickets)


class PurchaseCreate(BaseModel):
    ticket_requests: List[TicketRequestIn] = Field(default_factory=list)

    def to_domain(self) -> list[TicketTypeRequest]:
        return [item.to_domain() for item in self.ticket_requests]


class PurchaseRead(BaseModel):
    account_id: int
    total_cost: int
    total_seats: int

    @classmethod
    def from_result(cls, *, account_id: int, result: PurchaseResult) -> "PurchaseRead":
        return cls(
            account_id=account_id,
            total_cost=result.total_cost,
            total_seats=result.total_seats,
        )
