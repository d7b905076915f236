# apps/calendar_app/filters.py
import datetime
from typing import Iterable, List

import pytz
from django import forms
from django.conf import settings

from apps.calendar_app.ports.event_source import CalendarEvent, DateRange
from apps.core.domain.entities import ALL, AspectTag, ObjectiveKind, choices
from apps.core.filters import apply_filter_form

ALL_CHOICE = [(ALL, 'All')]


class EventFilterForm(forms.Form):
    kind = forms.ChoiceField(choices=ALL_CHOICE + choices(ObjectiveKind), required=False)
    aspect_tag = forms.ChoiceField(choices=ALL_CHOICE + choices(AspectTag), required=False)


def filter_events(events: Iterable[CalendarEvent], kind=None, aspect_tag=None, search=None) -> List[CalendarEvent]:
    """Filtr typu (personal/job/all), aspektu i tekstu. Zachowuje kolejność wejścia."""
    result = apply_filter_form(EventFilterForm, events, {'kind': kind, 'aspect_tag': aspect_tag}, "event filter")

    if search and search.strip():
        needle = search.strip().lower()
        result = [
            event for event in result
            if needle in event.title.lower() or needle in event.description.lower()
        ]
    return result


def local_day(value) -> datetime.date:
    """Dzień kalendarzowy w strefie z ustawień (TIME_ZONE) dla datetime ze strefą."""
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(pytz.timezone(settings.TIME_ZONE))
        return value.date()
    return value


def events_on_date(events: Iterable[CalendarEvent], day) -> List[CalendarEvent]:
    day = local_day(day)
    return [event for event in events if event.date == day]


def events_in_range(events: Iterable[CalendarEvent], date_range: DateRange) -> List[CalendarEvent]:
    return [event for event in events if event.date in date_range]
