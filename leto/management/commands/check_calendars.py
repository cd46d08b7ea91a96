"""Report the consistency of the configured calendars."""

from django.core.management.base import BaseCommand, CommandError

from leto.calendars import configured_calendars, get_calendar
from leto.checks import check_definition, verify_round_trip
from leto.core import days_today


class Command(BaseCommand):
    help = "Check calendar definitions and optionally sample the round-trip law"

    def add_arguments(self, parser):
        parser.add_argument("calendars", nargs="*", help="calendar names (default: all configured)")
        parser.add_argument(
            "--sample",
            type=int,
            default=0,
            help="resolve this many consecutive days starting a year before today",
        )

    def handle(self, *args, **options):
        names = options["calendars"] or list(configured_calendars())
        try:
            calendars = [get_calendar(name) for name in names]
        except LookupError as exc:
            raise CommandError(str(exc)) from exc

        failed = False
        for calendar in calendars:
            result = check_definition(calendar)
            for warning in result.warnings:
                self.stdout.write(self.style.WARNING(f"{calendar.name}: {warning}"))
            for error in result.errors:
                self.stdout.write(self.style.ERROR(f"{calendar.name}: {error}"))

            problems = []
            if options["sample"] > 0:
                start = days_today(calendar) - 366
                problems = verify_round_trip(calendar, start, options["sample"])
                for problem in problems:
                    self.stdout.write(self.style.ERROR(f"{calendar.name}: {problem}"))

            if result.ok and not problems:
                self.stdout.write(self.style.SUCCESS(f"{calendar.name}: OK"))
            else:
                failed = True

        if failed:
            raise CommandError("Calendar checks failed")
