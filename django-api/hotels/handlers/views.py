"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.apps import apps
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain.errors import DomainError, ErrorKind
from hotels.handlers.serializers import HotelSerializer, HotelWithRoomsSerializer
from hotels.services import HotelService

logger = logging.getLogger(__name__)


def error_response(error: DomainError) -> Response:
    """Translate a domain error into a response carrying a user-safe message."""
    match error.kind:
        case ErrorKind.NOT_FOUND:
            return Response({"message": error.message}, status=status.HTTP_404_NOT_FOUND)
        case ErrorKind.UNAUTHORIZED:
            return Response(
                {"message": error.message}, status=status.HTTP_401_UNAUTHORIZED
            )
        case ErrorKind.PAYMENT_REQUIRED:
            return Response(
                {"message": error.message}, status=status.HTTP_402_PAYMENT_REQUIRED
            )
    logger.warning("unmapped domain error %s", error.code.value)
    return Response(status=status.HTTP_400_BAD_REQUEST)


class HotelView(APIView):
    """Base for hotel handlers; ``service`` may be injected via ``as_view()``."""

    permission_classes = [IsAuthenticated]
    service: HotelService | None = None

    def get_service(self) -> HotelService:
        if self.service is not None:
            return self.service
        return apps.get_app_config("hotels").service


class HotelListView(HotelView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = self.get_service().list_hotels_for_user(request.user.id)
        except DomainError as err:
            return error_response(err)
        except Exception:
            logger.exception("listing hotels failed for user %s", request.user.id)
            return Response(status=status.HTTP_400_BAD_REQUEST)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(HotelView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = self.get_service().list_rooms_for_hotel(hotel_id, request.user.id)
        except DomainError as err:
            return error_response(err)
        except Exception:
            logger.exception("listing rooms of hotel %s failed", hotel_id)
            return Response(status=status.HTTP_400_BAD_REQUEST)
        return Response(HotelWithRoomsSerializer(hotel).data)
