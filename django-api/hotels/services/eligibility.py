"""Eligibility gate for hotel listings.

A user may browse hotels once they have enrolled, hold a ticket for that
enrollment, paid for it, and the ticket type includes an in-person hotel stay.
"""

import logging

from enrollments.stores import EnrollmentStore, TicketStore
from hotels.domain.errors import (
    EnrollmentNotFoundError,
    HotelNotIncludedError,
    TicketNotFoundError,
    TicketNotPaidError,
)

logger = logging.getLogger(__name__)


class EligibilityChecker:
    """Verifies a user may see hotel data. Reads only, never writes."""

    def __init__(self, enrollments: EnrollmentStore, tickets: TicketStore) -> None:
        self._enrollments = enrollments
        self._tickets = tickets

    def check(self, user_id: int) -> None:
        """Return silently when the user is eligible.

        Raises:
            EnrollmentNotFoundError: If the user has no enrollment.
            TicketNotFoundError: If the enrollment has no ticket.
            TicketNotPaidError: If the ticket is still reserved.
            HotelNotIncludedError: If the ticket type is remote or has no hotel.
        """
        enrollment = self._enrollments.find_with_address_by_user_id(user_id)
        if enrollment is None:
            logger.debug("user %s has no enrollment", user_id)
            raise EnrollmentNotFoundError()

        ticket = self._tickets.find_by_enrollment_id(enrollment.id)
        if ticket is None:
            logger.debug("enrollment %s has no ticket", enrollment.id)
            raise TicketNotFoundError()

        if not ticket.is_paid:
            logger.debug("ticket %s is %s", ticket.id, ticket.status.value)
            raise TicketNotPaidError()

        if not ticket.ticket_type.grants_hotel_access:
            logger.debug("ticket type %s grants no hotel", ticket.ticket_type.id)
            raise HotelNotIncludedError()
