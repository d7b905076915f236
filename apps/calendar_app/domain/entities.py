# apps/calendar_app/domain/entities.py
import datetime
from dataclasses import dataclass
from typing import Optional

from apps.calendar_app.ports.event_source import CalendarEvent, EventSourceName, EventStatus
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority


@dataclass
class ManualEventEntity:
    """Wydarzenie dodane ręcznie w kalendarzu - jedyne edytowalne wydarzenie."""
    id: str
    title: str
    date: datetime.date
    time: Optional[datetime.time] = None
    aspect_tag: AspectTag = AspectTag.EVENTS
    kind: ObjectiveKind = ObjectiveKind.PERSONAL
    priority: Priority = Priority.MEDIUM
    status: EventStatus = EventStatus.SCHEDULED
    emoji: str = ""
    description: str = ""
    created_at: Optional[datetime.datetime] = None

    def to_event(self) -> CalendarEvent:
        return CalendarEvent(
            id=self.id,
            title=self.title,
            aspect_tag=self.aspect_tag,
            kind=self.kind,
            date=self.date,
            time=self.time,
            priority=self.priority,
            status=self.status,
            source=EventSourceName.MANUAL,
            emoji=self.emoji,
            description=self.description,
        )
