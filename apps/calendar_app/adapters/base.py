# apps/calendar_app/adapters/base.py
import datetime
from abc import abstractmethod
from typing import Iterable, List, Optional

from django.utils import timezone

from apps.calendar_app.ports.event_source import CalendarEvent, DateRange, IEventSource


def as_date(value) -> datetime.date:
    """Mini-aplikacje trzymają czasem datetime - w kalendarzu liczy się tylko dzień."""
    if isinstance(value, datetime.datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    return value


class BaseEventSource(IEventSource):
    """
    Wspólna część adapterów: dzień odniesienia (`today`) i przycinanie do zakresu dat.
    Podklasy implementują tylko _generate().
    """

    def __init__(self, today: Optional[datetime.date] = None):
        self.today = today or timezone.localdate()

    def list_events(self, date_range: Optional[DateRange] = None) -> List[CalendarEvent]:
        events = list(self._generate(date_range))
        if date_range is None:
            return events
        return [event for event in events if event.date in date_range]

    @abstractmethod
    def _generate(self, date_range: Optional[DateRange]) -> Iterable[CalendarEvent]:
        pass
