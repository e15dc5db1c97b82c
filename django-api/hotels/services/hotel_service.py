"""Hotel service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from hotels.domain import Hotel, HotelId
from hotels.domain.errors import HotelNotFoundError
from hotels.services.eligibility import EligibilityChecker
from hotels.stores.interfaces import HotelStore


class HotelService:
    """Service for hotel and room listings."""

    def __init__(self, store: HotelStore, eligibility: EligibilityChecker) -> None:
        self._store = store
        self._eligibility = eligibility

    def list_hotels_for_user(self, user_id: int) -> list[Hotel]:
        """Return all hotels once the user is eligible.

        Eligibility errors are propagated unchanged.
        """
        self._eligibility.check(user_id)
        return self._store.list_hotels()

    def list_rooms_for_hotel(self, hotel_id: str, user_id: int) -> Hotel:
        """Return a hotel together with its rooms.

        Raises:
            HotelNotFoundError: If hotel_id is not numeric or no hotel matches.
        """
        self._eligibility.check(user_id)

        try:
            parsed_id = HotelId.from_string(hotel_id)
        except ValueError:
            raise HotelNotFoundError() from None

        hotel = self._store.get_hotel_with_rooms(parsed_id)
        if hotel is None:
            raise HotelNotFoundError()
        return hotel
