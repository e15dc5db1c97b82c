from enrollments.stores.django_store import DjangoEnrollmentStore, DjangoTicketStore
from enrollments.stores.interfaces import EnrollmentStore, TicketStore

__all__ = [
    "EnrollmentStore",
    "TicketStore",
    "DjangoEnrollmentStore",
    "DjangoTicketStore",
]
