from django.urls import re_path

from hotels.handlers import HotelDetailView, HotelListView

urlpatterns = [
    re_path(r"^hotels/?$", HotelListView.as_view(), name="hotel-list"),
    re_path(
        r"^hotels/(?P<hotel_id>[^/]+)/?$", HotelDetailView.as_view(), name="hotel-detail"
    ),
]
