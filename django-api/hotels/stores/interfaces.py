"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from hotels.domain import Hotel, HotelId


class HotelStore(ABC):
    """Interface for hotel persistence operations."""

    @abstractmethod
    def list_hotels(self) -> list[Hotel]:
        """Return all hotels in insertion order, without rooms."""
        ...

    @abstractmethod
    def get_hotel_with_rooms(self, hotel_id: HotelId) -> Hotel | None:
        """Return a hotel with its rooms in insertion order, or None if not found."""
        ...
