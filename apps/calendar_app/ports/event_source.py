# apps/calendar_app/ports/event_source.py
import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority
from apps.core.exceptions import ValidationError


class EventStatus(str, Enum):
    SCHEDULED = 'scheduled'
    COMPLETED = 'completed'


class EventSourceName(str, Enum):
    TRAINING = 'training'
    FOOD = 'food'
    FRIENDS = 'friends'
    TRAVEL = 'travel'
    FINANCE = 'finance'
    BUSINESS = 'business'
    FAMILY = 'family'
    EVENTS = 'events'
    TEMPLATES = 'templates'
    MANUAL = 'manual'


@dataclass(frozen=True)
class DateRange:
    start: datetime.date
    end: datetime.date  # włącznie

    def __post_init__(self):
        if self.start > self.end:
            raise ValidationError(
                "Date range start must not be after its end",
                {'date_range': [f"{self.start} > {self.end}"]},
            )

    def __contains__(self, day: datetime.date) -> bool:
        return self.start <= day <= self.end

    @classmethod
    def for_days(cls, start: datetime.date, days: int) -> 'DateRange':
        """Zakres `days` dni zaczynając od `start` (np. tydzień = 7)."""
        return cls(start, start + datetime.timedelta(days=days - 1))


@dataclass(frozen=True)
class CalendarEvent:
    id: str
    title: str
    aspect_tag: AspectTag
    kind: ObjectiveKind
    date: datetime.date
    source: EventSourceName
    time: Optional[datetime.time] = None  # None = wydarzenie całodniowe
    priority: Priority = Priority.MEDIUM
    status: EventStatus = EventStatus.SCHEDULED
    emoji: str = ""
    description: str = ""

    @property
    def is_all_day(self) -> bool:
        return self.time is None


class IEventSource(ABC):
    source: EventSourceName

    @abstractmethod
    def list_events(self, date_range: Optional[DateRange] = None) -> List[CalendarEvent]:
        """Zwraca wydarzenia mini-aplikacji (tylko odczyt, bez efektów ubocznych)."""
        pass
