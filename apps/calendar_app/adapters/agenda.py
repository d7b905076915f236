# apps/calendar_app/adapters/agenda.py
from typing import Iterable, List

from apps.calendar_app.adapters.base import BaseEventSource, as_date
from apps.calendar_app.domain.mini_apps import AgendaItem
from apps.calendar_app.ports.event_source import CalendarEvent, EventSourceName, EventStatus
from apps.core.domain.entities import AspectTag, ObjectiveKind


class AgendaEventSource(BaseEventSource):
    """Mini-aplikacje, które same trzymają terminy - rzutowanie 1:1 na wydarzenia."""
    aspect_tag: AspectTag
    kind: ObjectiveKind
    default_emoji = ""

    def __init__(self, items: List[AgendaItem], today=None):
        super().__init__(today)
        self.items = items

    def _generate(self, date_range) -> Iterable[CalendarEvent]:
        for item in self.items:
            yield CalendarEvent(
                id=f"{self.source.value}-{item.id}",
                title=item.title,
                description=item.description,
                aspect_tag=self.aspect_tag,
                kind=self.kind,
                date=as_date(item.date),
                time=item.time,
                priority=item.priority,
                status=EventStatus.COMPLETED if item.completed else EventStatus.SCHEDULED,
                source=self.source,
                emoji=item.emoji or self.default_emoji,
            )


class BusinessEventSource(AgendaEventSource):
    source = EventSourceName.BUSINESS
    aspect_tag = AspectTag.BUSINESS
    kind = ObjectiveKind.JOB
    default_emoji = '💼'


class FamilyEventSource(AgendaEventSource):
    source = EventSourceName.FAMILY
    aspect_tag = AspectTag.FAMILY
    kind = ObjectiveKind.PERSONAL
    default_emoji = '👨‍👩‍👧‍👦'


class PersonalEventsSource(AgendaEventSource):
    source = EventSourceName.EVENTS
    aspect_tag = AspectTag.EVENTS
    kind = ObjectiveKind.PERSONAL
    default_emoji = '🎉'
