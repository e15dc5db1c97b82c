from hotels.services.eligibility import EligibilityChecker
from hotels.services.hotel_service import HotelService

__all__ = ["EligibilityChecker", "HotelService"]
