"""In-memory stores for service tests."""

from datetime import datetime, timezone

from enrollments.domain import Enrollment, Ticket, TicketStatus, TicketType
from enrollments.stores import EnrollmentStore, TicketStore
from hotels.domain import Capacity, Hotel, HotelId, Room, RoomId
from hotels.stores import HotelStore

NOW = datetime(2024, 3, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)


class InMemoryEnrollmentStore(EnrollmentStore):
    def __init__(self, *enrollments: Enrollment) -> None:
        self.by_user = {e.user_id: e for e in enrollments}

    def find_with_address_by_user_id(self, user_id: int) -> Enrollment | None:
        return self.by_user.get(user_id)


class InMemoryTicketStore(TicketStore):
    def __init__(self, *tickets: Ticket) -> None:
        self.by_enrollment = {t.enrollment_id: t for t in tickets}

    def find_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        return self.by_enrollment.get(enrollment_id)


class InMemoryHotelStore(HotelStore):
    def __init__(self, *hotels: Hotel) -> None:
        self.hotels = list(hotels)

    def list_hotels(self) -> list[Hotel]:
        return [
            Hotel(h.id, h.name, h.image, h.created_at, h.updated_at)
            for h in self.hotels
        ]

    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        return next((h for h in self.hotels if h.id == hotel_id), None)


def make_enrollment(user_id: int = 1, enrollment_id: int = 10) -> Enrollment:
    return Enrollment(id=enrollment_id, user_id=user_id, name="Maria Silva")


def make_ticket(
    enrollment_id: int = 10,
    status: TicketStatus = TicketStatus.PAID,
    includes_hotel: bool = True,
    is_remote: bool = False,
) -> Ticket:
    return Ticket(
        id=100,
        enrollment_id=enrollment_id,
        status=status,
        ticket_type=TicketType(
            id=5, name="Presencial", is_remote=is_remote, includes_hotel=includes_hotel
        ),
    )


def make_hotel(hotel_id: int = 1, rooms: int = 0) -> Hotel:
    return Hotel(
        id=HotelId(hotel_id),
        name=f"Hotel {hotel_id}",
        image=f"https://images.example.com/{hotel_id}.jpg",
        created_at=NOW,
        updated_at=NOW,
        rooms=tuple(
            Room(
                id=RoomId(hotel_id * 100 + n),
                hotel_id=HotelId(hotel_id),
                name=f"Room {n}",
                capacity=Capacity(2),
                created_at=NOW,
                updated_at=NOW,
            )
            for n in range(1, rooms + 1)
        ),
    )
