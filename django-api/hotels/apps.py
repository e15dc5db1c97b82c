from django.apps import AppConfig


class HotelsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "hotels"

    def ready(self) -> None:
        # Stores and services are wired once per process; views reach the
        # service through this app config unless one is injected.
        from enrollments.stores import DjangoEnrollmentStore, DjangoTicketStore
        from hotels.services import EligibilityChecker, HotelService
        from hotels.stores import DjangoHotelStore

        self.service = HotelService(
            store=DjangoHotelStore(),
            eligibility=EligibilityChecker(
                enrollments=DjangoEnrollmentStore(),
                tickets=DjangoTicketStore(),
            ),
        )
