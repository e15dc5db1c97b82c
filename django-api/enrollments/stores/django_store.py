"""Django ORM implementations of the enrollment and ticket stores."""

from enrollments import models as orm
from enrollments.domain import Address, Enrollment, Ticket, TicketStatus, TicketType
from enrollments.stores.interfaces import EnrollmentStore, TicketStore


class DjangoEnrollmentStore(EnrollmentStore):
    """Database-backed enrollment store using Django ORM."""

    def find_with_address_by_user_id(self, user_id: int) -> Enrollment | None:
        row = (
            orm.Enrollment.objects.select_related("address")
            .filter(user_id=user_id)
            .first()
        )
        if row is None:
            return None
        # RelatedObjectDoesNotExist subclasses AttributeError
        address = getattr(row, "address", None)
        return Enrollment(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            address=_to_address(address) if address is not None else None,
        )


class DjangoTicketStore(TicketStore):
    """Database-backed ticket store using Django ORM."""

    def find_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        row = (
            orm.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id)
            .first()
        )
        if row is None:
            return None
        return Ticket(
            id=row.id,
            enrollment_id=row.enrollment_id,
            status=TicketStatus(row.status),
            ticket_type=TicketType(
                id=row.ticket_type.id,
                name=row.ticket_type.name,
                is_remote=row.ticket_type.is_remote,
                includes_hotel=row.ticket_type.includes_hotel,
            ),
        )


def _to_address(row: orm.Address) -> Address:
    return Address(
        cep=row.cep,
        street=row.street,
        city=row.city,
        state=row.state,
        number=row.number,
        neighborhood=row.neighborhood,
        address_detail=row.address_detail,
    )
