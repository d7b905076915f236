# apps/calendar_app/adapters/travel.py
import logging
import re
from typing import Iterable, List

from dateutil import parser as date_parser

from apps.calendar_app.adapters.base import BaseEventSource
from apps.calendar_app.domain.mini_apps import Trip
from apps.calendar_app.ports.event_source import CalendarEvent, EventSourceName
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority

logger = logging.getLogger(__name__)

# "March 15-28, 2026" -> ("March", "15", "2026"). Same "August 2026" nie ma dnia -> pomijamy
TRIP_START = re.compile(r'^\s*([A-Za-z]+)\s+(\d{1,2})\b.*?\b(\d{4})\b')


def parse_trip_start(dates: str):
    match = TRIP_START.match(dates or "")
    if not match:
        return None
    month, day, year = match.groups()
    try:
        return date_parser.parse(f"{month} {day} {year}").date()
    except (ValueError, OverflowError):
        return None


class TravelEventSource(BaseEventSource):
    source = EventSourceName.TRAVEL

    def __init__(self, trips: List[Trip], today=None):
        super().__init__(today)
        self.trips = trips

    def _generate(self, date_range) -> Iterable[CalendarEvent]:
        for trip in self.trips:
            start = parse_trip_start(trip.dates)
            if start is None:
                logger.debug("Trip %s: no start day in %r, skipping", trip.id, trip.dates)
                continue

            yield CalendarEvent(
                id=f"travel-{trip.id}",
                title=f"✈️ {trip.destination} Trip",
                description=f"Fund: {trip.fund_progress}% ready",
                aspect_tag=AspectTag.TRAVEL,
                kind=ObjectiveKind.PERSONAL,
                date=start,
                priority=Priority.HIGH,
                source=self.source,
                emoji='✈️',
            )
