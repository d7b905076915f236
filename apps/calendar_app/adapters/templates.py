# apps/calendar_app/adapters/templates.py
import datetime
from typing import Iterable, List, Optional

from dateutil.rrule import rrule, DAILY, WEEKLY, MONTHLY

from apps.calendar_app.adapters.base import BaseEventSource
from apps.calendar_app.domain.templates import CalendarTemplate, TemplateEvent
from apps.calendar_app.ports.event_source import CalendarEvent, DateRange, EventSourceName
from apps.core.conf import dashboard_setting

FREQUENCIES = {
    'daily': DAILY,
    'weekly': WEEKLY,
    'monthly': MONTHLY,
}


def occurrences(template_event: TemplateEvent, first_day: datetime.date,
                date_range: Optional[DateRange] = None) -> List[datetime.date]:
    """Dni wystąpień wydarzenia z szablonu (dateutil.rrule dla powtarzalnych)."""
    recurrence = template_event.recurrence
    if recurrence is None:
        return [first_day]

    dtstart = datetime.datetime.combine(first_day, datetime.time.min)
    rule_kwargs = {
        'dtstart': dtstart,
        'interval': max(1, recurrence.frequency),
    }
    if recurrence.end_after_occurrences:
        rule_kwargs['count'] = recurrence.end_after_occurrences
    elif date_range is None:
        # Seria bez końca i bez zakresu -> ograniczamy horyzontem z ustawień
        horizon = dashboard_setting('TEMPLATE_HORIZON_DAYS')
        rule_kwargs['until'] = dtstart + datetime.timedelta(days=horizon)

    rule = rrule(FREQUENCIES[recurrence.pattern], **rule_kwargs)

    if date_range is not None:
        window_start = datetime.datetime.combine(date_range.start, datetime.time.min)
        window_end = datetime.datetime.combine(date_range.end, datetime.time.min)
        return [dt.date() for dt in rule.between(window_start, window_end, inc=True)]
    return [dt.date() for dt in rule]


class TemplateEventSource(BaseEventSource):
    """Szablon z katalogu rozwinięty względem daty startu."""
    source = EventSourceName.TEMPLATES

    def __init__(self, template: CalendarTemplate, start_date: datetime.date, today=None):
        super().__init__(today)
        self.template = template
        self.start_date = start_date

    def _generate(self, date_range) -> Iterable[CalendarEvent]:
        for template_event in self.template.events:
            first_day = self.start_date + datetime.timedelta(days=template_event.relative_days)
            days = occurrences(template_event, first_day, date_range)

            for day in days:
                yield CalendarEvent(
                    id=f"{self.template.id}-{template_event.id}-{day.isoformat()}",
                    title=template_event.title,
                    description=template_event.description,
                    aspect_tag=template_event.aspect_tag,
                    kind=template_event.kind,
                    date=day,
                    time=None if template_event.is_all_day else template_event.start_time,
                    priority=template_event.priority,
                    source=self.source,
                    emoji=template_event.emoji,
                )
