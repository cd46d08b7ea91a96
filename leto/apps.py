from django.apps import AppConfig
from django.core import checks


class LetoConfig(AppConfig):
    name = "leto"
    verbose_name = "Leto calendars"

    def ready(self) -> None:
        from .checks import check_calendars

        checks.register(check_calendars, "leto")
