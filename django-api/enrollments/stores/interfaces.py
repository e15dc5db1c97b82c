"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from enrollments.domain import Enrollment, Ticket


class EnrollmentStore(ABC):
    """Interface for enrollment lookups."""

    @abstractmethod
    def find_with_address_by_user_id(self, user_id: int) -> Enrollment | None:
        """Return the user's enrollment with its address, or None."""
        ...


class TicketStore(ABC):
    """Interface for ticket lookups."""

    @abstractmethod
    def find_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        """Return the enrollment's ticket with its ticket type, or None."""
        ...
