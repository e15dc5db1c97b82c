"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Broad failure classes the transport edge knows how to render."""

    NOT_FOUND = "NOT_FOUND"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    UNAUTHORIZED = "UNAUTHORIZED"


class ErrorCode(Enum):
    """Domain error codes."""

    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    TICKET_NOT_PAID = "TICKET_NOT_PAID"
    HOTEL_NOT_INCLUDED = "HOTEL_NOT_INCLUDED"

    @property
    def kind(self) -> ErrorKind:
        return _KINDS[self]


_KINDS = {
    ErrorCode.ENROLLMENT_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.HOTEL_NOT_FOUND: ErrorKind.NOT_FOUND,
    ErrorCode.TICKET_NOT_PAID: ErrorKind.PAYMENT_REQUIRED,
    ErrorCode.HOTEL_NOT_INCLUDED: ErrorKind.UNAUTHORIZED,
}


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    @property
    def kind(self) -> ErrorKind:
        return self.code.kind

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EnrollmentNotFoundError(DomainError):
    """Raised when the user has not enrolled yet."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ENROLLMENT_NOT_FOUND,
            message="No result for this search!",
        )


class TicketNotFoundError(DomainError):
    """Raised when the user's enrollment has no ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="No result for this search!",
        )


class HotelNotFoundError(DomainError):
    """Raised when a hotel is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="No result for this search!",
        )


class TicketNotPaidError(DomainError):
    """Raised when the user's ticket has not been paid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_PAID,
            message="Ticket has not been paid",
        )


class HotelNotIncludedError(DomainError):
    """Raised when the ticket type gives no access to hotels."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_INCLUDED,
            message="Ticket does not include hotel accommodation",
        )
