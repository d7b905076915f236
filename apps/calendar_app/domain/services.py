# apps/calendar_app/domain/services.py
import copy
import datetime
import logging
import uuid
from dataclasses import replace
from typing import Callable, Iterable, List, Optional

from django.utils import timezone

from apps.calendar_app.domain.entities import ManualEventEntity
from apps.calendar_app.forms import ManualEventForm
from apps.calendar_app.ports.event_source import CalendarEvent, DateRange, IEventSource
from apps.core.domain.record_set import RecordSet
from apps.core.exceptions import NotFoundError, ValidationError
from apps.core.forms import clean_or_raise

logger = logging.getLogger(__name__)

READ_ONLY_FIELDS = frozenset({'id', 'created_at'})


def chronological_key(event: CalendarEvent):
    # Wydarzenia całodniowe przed tymi z godziną
    return event.date, event.time is not None, event.time or datetime.time.min


class CalendarAggregator:
    """
    Jedna oś czasu z wielu źródeł.

    Kolejność: adaptery w kolejności rejestracji, potem wydarzenia ręczne w kolejności dodania,
    następnie stabilne sortowanie po (dzień, ma godzinę, godzina). Bez deduplikacji.
    """

    def __init__(
            self,
            record_set: RecordSet,
            sources: Iterable[IEventSource] = (),
            id_factory: Optional[Callable[[], str]] = None,
            clock: Optional[Callable] = None,
    ):
        self.record_set = record_set
        self._sources: List[IEventSource] = []
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)
        self._now = clock or timezone.now
        for source in sources:
            self.register(source)

    def register(self, source: IEventSource) -> None:
        self._sources.append(source)
        logger.debug("Registered event source: %s", source.source.value)

    @property
    def sources(self) -> List[IEventSource]:
        return list(self._sources)

    # --- Oś czasu ---

    def all_events(self, date_range: Optional[DateRange] = None) -> List[CalendarEvent]:
        events: List[CalendarEvent] = []
        for source in self._sources:
            events.extend(source.list_events(date_range))

        for manual in self.record_set.manual_events.values():
            event = manual.to_event()
            if date_range is None or event.date in date_range:
                events.append(event)

        return sorted(events, key=chronological_key)

    def events_on(self, day: datetime.date) -> List[CalendarEvent]:
        return self.all_events(DateRange(day, day))

    def dates_with_events(self, date_range: Optional[DateRange] = None) -> List[datetime.date]:
        return sorted({event.date for event in self.all_events(date_range)})

    # --- Wydarzenia ręczne ---

    def get_manual_event(self, event_id: str) -> ManualEventEntity:
        return copy.deepcopy(self._locate(event_id))

    def add_manual_event(self, fields: dict) -> str:
        fields = dict(fields or {})
        self._check_editable(fields)

        defaults = self._form_data(ManualEventEntity(id='', title='', date=None))
        data = clean_or_raise(ManualEventForm, {**defaults, **fields}, "manual event")

        event = ManualEventEntity(id=self._new_id(), created_at=self._now(), **data)
        self.record_set.manual_events[event.id] = event

        logger.info("Added manual event %s on %s: %s", event.id, event.date, event.title)
        return event.id

    def edit_manual_event(self, event_id: str, fields: dict) -> None:
        current = self._locate(event_id)
        fields = dict(fields or {})
        self._check_editable(fields)

        data = clean_or_raise(ManualEventForm, {**self._form_data(current), **fields}, "manual event")
        self.record_set.manual_events[event_id] = replace(current, **data)

        logger.debug("Edited manual event %s: %s", event_id, ", ".join(sorted(fields)))

    def remove_manual_event(self, event_id: str) -> None:
        event = self._locate(event_id)
        del self.record_set.manual_events[event_id]
        logger.info("Removed manual event %s: %s", event_id, event.title)

    def _locate(self, event_id: str) -> ManualEventEntity:
        try:
            return self.record_set.manual_events[event_id]
        except KeyError:
            raise NotFoundError("Manual event", event_id) from None

    @staticmethod
    def _form_data(event: ManualEventEntity) -> dict:
        return {name: getattr(event, name) for name in ManualEventForm.base_fields}

    @staticmethod
    def _check_editable(fields: dict) -> None:
        read_only = sorted(set(fields) & READ_ONLY_FIELDS)
        unknown = sorted(set(fields) - set(ManualEventForm.base_fields) - READ_ONLY_FIELDS)
        if read_only or unknown:
            errors = {name: ["This field cannot be changed."] for name in read_only}
            errors.update({name: ["Unknown field."] for name in unknown})
            raise ValidationError(f"Invalid manual event fields: {', '.join(sorted(errors))}", errors)
