"""Domain projections of enrollment and ticket records.

Only the fields the eligibility check reads are carried over.
"""

from dataclasses import dataclass
from enum import Enum


class TicketStatus(Enum):
    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass(frozen=True)
class Address:
    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    address_detail: str | None = None


@dataclass(frozen=True)
class Enrollment:
    """Domain representation of an Enrollment."""

    id: int
    user_id: int
    name: str
    address: Address | None = None


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: int
    name: str
    is_remote: bool
    includes_hotel: bool

    @property
    def grants_hotel_access(self) -> bool:
        """Remote-only tickets never grant a hotel, whatever the flag says."""
        return self.includes_hotel and not self.is_remote


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket, with its type embedded."""

    id: int
    enrollment_id: int
    status: TicketStatus
    ticket_type: TicketType

    @property
    def is_paid(self) -> bool:
        return self.status is TicketStatus.PAID
