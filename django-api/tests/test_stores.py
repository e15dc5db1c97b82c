"""Tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

import pytest
from django.db import IntegrityError, transaction

from enrollments.domain import TicketStatus
from enrollments.models import Ticket
from enrollments.stores import DjangoEnrollmentStore, DjangoTicketStore
from hotels.domain import Capacity, HotelId
from hotels.stores import DjangoHotelStore
from tests import factories


@pytest.mark.django_db
class TestDjangoHotelStore:
    def test_list_hotels_without_rooms(self):
        hotel = factories.create_hotel()
        factories.create_room(hotel)

        [listed] = DjangoHotelStore().list_hotels()

        assert listed.id == HotelId(hotel.id)
        assert listed.rooms == ()

    def test_get_hotel_with_rooms_in_insertion_order(self):
        hotel = factories.create_hotel()
        rooms = [factories.create_room(hotel, capacity=c) for c in (4, 1, 2)]
        factories.create_room(factories.create_hotel())

        found = DjangoHotelStore().get_hotel_with_rooms(HotelId(hotel.id))

        assert [r.id.value for r in found.rooms] == [r.id for r in rooms]
        assert [r.capacity for r in found.rooms] == [Capacity(4), Capacity(1), Capacity(2)]
        assert all(r.hotel_id == HotelId(hotel.id) for r in found.rooms)

    def test_get_missing_hotel_returns_none(self):
        assert DjangoHotelStore().get_hotel_with_rooms(HotelId(999)) is None

    def test_room_without_capacity_is_rejected(self):
        """Rows with capacity 0 never reach the store."""
        hotel = factories.create_hotel()

        with pytest.raises(IntegrityError), transaction.atomic():
            factories.create_room(hotel, capacity=0)


@pytest.mark.django_db
class TestDjangoEnrollmentStores:
    def test_enrollment_with_address(self, user):
        enrollment = factories.create_enrollment_with_address(user)

        found = DjangoEnrollmentStore().find_with_address_by_user_id(user.id)

        assert found.id == enrollment.id
        assert found.address.city == "Rio de Janeiro"

    def test_missing_enrollment_returns_none(self, user):
        assert DjangoEnrollmentStore().find_with_address_by_user_id(user.id) is None

    def test_ticket_with_type(self, user):
        enrollment = factories.create_enrollment_with_address(user)
        ticket_type = factories.create_ticket_type(includes_hotel=True, is_remote=False)
        factories.create_ticket(enrollment, ticket_type, Ticket.Status.RESERVED)

        found = DjangoTicketStore().find_by_enrollment_id(enrollment.id)

        assert found.status is TicketStatus.RESERVED
        assert found.ticket_type.includes_hotel is True
        assert found.ticket_type.is_remote is False

    def test_missing_ticket_returns_none(self, user):
        enrollment = factories.create_enrollment_with_address(user)

        assert DjangoTicketStore().find_by_enrollment_id(enrollment.id) is None

    def test_second_ticket_for_enrollment_is_rejected(self, user):
        """An enrollment holds one ticket, so the lookup is unambiguous."""
        enrollment = factories.create_enrollment_with_address(user)
        ticket_type = factories.create_ticket_type()
        factories.create_ticket(enrollment, ticket_type, Ticket.Status.RESERVED)

        with pytest.raises(IntegrityError), transaction.atomic():
            factories.create_ticket(enrollment, ticket_type, Ticket.Status.PAID)

    def test_paid_ticket_is_found_after_payment(self, user):
        """Payment updates the single ticket in place."""
        enrollment = factories.create_enrollment_with_address(user)
        ticket = factories.create_ticket(
            enrollment, factories.create_ticket_type(), Ticket.Status.RESERVED
        )
        ticket.status = Ticket.Status.PAID
        ticket.save()

        found = DjangoTicketStore().find_by_enrollment_id(enrollment.id)

        assert found.status is TicketStatus.PAID
