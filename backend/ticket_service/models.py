from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TicketType(StrEnum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    ticket_type: TicketType
    no_of_tickets: int


@dataclass(frozen=True)
class PurchaseResult:
    total_cost: int
    total_seats: int
