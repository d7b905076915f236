import datetime

import pytest

from apps.calendar_app.adapters.templates import TemplateEventSource, occurrences
from apps.calendar_app.domain.templates import (
    CalendarTemplate, Recurrence, TEMPLATE_CATALOG, TemplateEvent, TemplateObjective, get_template,
)
from apps.calendar_app.ports.event_source import DateRange, EventSourceName
from apps.calendar_app.services.template_service import apply_template_objectives
from apps.core.domain.entities import AspectTag, ObjectiveKind, ObjectiveLevel
from apps.core.exceptions import NotFoundError, ValidationError
from apps.tasks.domain.entities import TaskStatus


def test_catalog_contains_core_templates():
    assert {'morning-routine', 'client-meeting', 'weekly-review'} <= set(TEMPLATE_CATALOG)


def test_unknown_template():
    with pytest.raises(NotFoundError):
        get_template('space-mission')


def test_template_events_relative_to_start_date():
    source = TemplateEventSource(get_template('client-meeting'), start_date=datetime.date(2026, 3, 20))

    events = [(event.id, event.date, event.time) for event in source.list_events()]

    assert events == [
        ('client-meeting-research-2026-03-19', datetime.date(2026, 3, 19), datetime.time(14, 0)),
        ('client-meeting-content-prep-2026-03-19', datetime.date(2026, 3, 19), datetime.time(16, 0)),
        ('client-meeting-rehearsal-2026-03-20', datetime.date(2026, 3, 20), datetime.time(9, 0)),
        ('client-meeting-meeting-2026-03-20', datetime.date(2026, 3, 20), datetime.time(11, 0)),
    ]
    assert all(event.source == EventSourceName.TEMPLATES for event in source.list_events())
    assert all(event.kind == ObjectiveKind.JOB for event in source.list_events())


def test_weekly_recurrence_within_range():
    source = TemplateEventSource(get_template('workout-routine'), start_date=datetime.date(2026, 3, 16))

    events = source.list_events(DateRange(datetime.date(2026, 3, 16), datetime.date(2026, 3, 29)))

    assert sorted(event.date.isoformat() for event in events) == [
        '2026-03-16', '2026-03-18', '2026-03-20', '2026-03-23', '2026-03-25', '2026-03-27',
    ]


def test_open_ended_recurrence_is_capped_by_horizon(settings):
    settings.DASHBOARD = {'TEMPLATE_HORIZON_DAYS': 14}
    cardio = get_template('workout-routine').events[0]

    days = occurrences(cardio, datetime.date(2026, 3, 16))

    assert days == [datetime.date(2026, 3, 16), datetime.date(2026, 3, 23), datetime.date(2026, 3, 30)]


def test_recurrence_with_interval_and_count():
    event = TemplateEvent(
        id='water', title='Water plants', aspect_tag=AspectTag.FAMILY, kind=ObjectiveKind.PERSONAL,
        recurrence=Recurrence('daily', frequency=2, end_after_occurrences=3),
    )

    assert occurrences(event, datetime.date(2026, 3, 10)) == [
        datetime.date(2026, 3, 10), datetime.date(2026, 3, 12), datetime.date(2026, 3, 14),
    ]
    window = DateRange(datetime.date(2026, 3, 11), datetime.date(2026, 3, 20))
    assert occurrences(event, datetime.date(2026, 3, 10), window) == [
        datetime.date(2026, 3, 12), datetime.date(2026, 3, 14),
    ]


def test_all_day_template_event_has_no_time():
    template = CalendarTemplate(id='trip', name='Trip', category='personal', events=(
        TemplateEvent(id='pack', title='Pack bags', aspect_tag=AspectTag.TRAVEL, kind=ObjectiveKind.PERSONAL,
                      start_time=datetime.time(9, 0), is_all_day=True),
    ))

    event = TemplateEventSource(template, datetime.date(2026, 5, 1)).list_events()[0]

    assert event.is_all_day


def test_apply_template_objectives(store):
    created = apply_template_objectives(store, get_template('morning-routine'), datetime.date(2026, 3, 10))

    assert len(created) == 1
    task = store.get(created[0])
    assert task.title == 'Complete daily exercise routine'
    assert task.aspect_tag == AspectTag.TRAINING
    assert task.status == TaskStatus.PENDING
    assert task.target_date == datetime.date(2026, 3, 10)


def test_apply_template_objectives_for_weekly_and_monthly(store):
    template = CalendarTemplate(id='plan', name='Plan', category='productivity', objectives=(
        TemplateObjective(id='month', title='Quarter prep', level=ObjectiveLevel.MONTHLY,
                          aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.JOB, success_criteria=('Budget',)),
        TemplateObjective(id='week', title='Review week', level=ObjectiveLevel.WEEKLY,
                          aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.JOB, estimated_duration_days=2),
    ))

    monthly_id, weekly_id = apply_template_objectives(store, template, datetime.date(2026, 3, 12))

    assert store.get(monthly_id).target_month == datetime.date(2026, 3, 1)
    assert store.get(monthly_id).success_criteria == ['Budget']
    assert store.get(weekly_id).target_week_start == datetime.date(2026, 3, 9)
    assert store.get(weekly_id).estimated_duration_days == 2


def test_apply_template_objectives_is_all_or_nothing(store, record_set):
    template = CalendarTemplate(id='broken', name='Broken', category='custom', objectives=(
        TemplateObjective(id='ok', title='Valid', level=ObjectiveLevel.DAILY,
                          aspect_tag=AspectTag.FOOD, kind=ObjectiveKind.PERSONAL),
        TemplateObjective(id='bad', title='  ', level=ObjectiveLevel.DAILY,
                          aspect_tag=AspectTag.FOOD, kind=ObjectiveKind.PERSONAL),
    ))
    before = record_set.copy()

    with pytest.raises(ValidationError):
        apply_template_objectives(store, template, datetime.date(2026, 3, 10))

    assert record_set == before


def test_apply_template_objectives_restores_on_unexpected_error(store, record_set, monkeypatch):
    template = CalendarTemplate(id='two', name='Two', category='custom', objectives=(
        TemplateObjective(id='a', title='First', level=ObjectiveLevel.DAILY,
                          aspect_tag=AspectTag.FOOD, kind=ObjectiveKind.PERSONAL),
        TemplateObjective(id='b', title='Second', level=ObjectiveLevel.DAILY,
                          aspect_tag=AspectTag.FOOD, kind=ObjectiveKind.PERSONAL),
    ))
    before = record_set.copy()
    real_add = store.add
    calls = []

    def failing_add(level, fields):
        calls.append(level)
        if len(calls) == 2:
            raise TypeError("unexpected field type")
        return real_add(level, fields)

    monkeypatch.setattr(store, 'add', failing_add)

    with pytest.raises(TypeError):
        apply_template_objectives(store, template, datetime.date(2026, 3, 10))

    assert len(calls) == 2
    assert record_set == before
