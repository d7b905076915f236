import datetime
import itertools

import pytest

from apps.calendar_app.domain.services import CalendarAggregator
from apps.core.domain.record_set import RecordSet
from apps.goals.services.objective_store import ObjectiveStore


@pytest.fixture
def now() -> datetime.datetime:
    return datetime.datetime(2026, 3, 10, 9, 30, tzinfo=datetime.timezone.utc)


@pytest.fixture
def today() -> datetime.date:
    # wtorek
    return datetime.date(2026, 3, 10)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"rec-{next(counter)}"


@pytest.fixture
def record_set() -> RecordSet:
    return RecordSet()


@pytest.fixture
def store(record_set, id_factory, now) -> ObjectiveStore:
    return ObjectiveStore(record_set, id_factory=id_factory, clock=lambda: now)


@pytest.fixture
def calendar(record_set, id_factory, now) -> CalendarAggregator:
    return CalendarAggregator(record_set, id_factory=id_factory, clock=lambda: now)
