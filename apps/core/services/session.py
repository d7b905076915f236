# apps/core/services/session.py
import logging
from typing import Iterable, Optional

from apps.calendar_app.domain.services import CalendarAggregator
from apps.calendar_app.ports.event_source import DateRange, IEventSource
from apps.core.domain.record_set import RecordSet
from apps.core.ports.insight_provider import IInsightProvider, InsightSnapshot
from apps.core.ports.repositories import IRecordSetRepository
from apps.goals.services.objective_store import ObjectiveStore

logger = logging.getLogger(__name__)


class DashboardSession:
    """
    Sesja pracy z dashboardem:
    1. start() wczytuje rekordy z repozytorium i przelicza postęp,
    2. store / calendar operują na tym samym zbiorze rekordów,
    3. commit() zapisuje zbiór z powrotem.

    Jako context manager zapisuje tylko wtedy, gdy blok zakończył się bez wyjątku.
    """

    def __init__(self, repository: IRecordSetRepository, sources: Iterable[IEventSource] = (),
                 id_factory=None, clock=None):
        self.repository = repository
        self._sources = list(sources)
        self._id_factory = id_factory
        self._clock = clock
        self.record_set: Optional[RecordSet] = None
        self.store: Optional[ObjectiveStore] = None
        self.calendar: Optional[CalendarAggregator] = None

    def start(self) -> 'DashboardSession':
        self.record_set = self.repository.load()
        self.store = ObjectiveStore(self.record_set, id_factory=self._id_factory, clock=self._clock)
        self.store.recompute()
        self.calendar = CalendarAggregator(
            self.record_set, self._sources, id_factory=self._id_factory, clock=self._clock
        )
        logger.debug("Dashboard session started with %s event source(s)", len(self._sources))
        return self

    def commit(self) -> None:
        if self.record_set is None:
            raise RuntimeError("Session not started")
        self.repository.save(self.record_set)

    def request_insights(self, provider: IInsightProvider, date_range: Optional[DateRange] = None) -> str:
        if self.record_set is None:
            raise RuntimeError("Session not started")
        snapshot = InsightSnapshot.capture(self.record_set, self.calendar.all_events(date_range))
        return provider.suggest(snapshot)

    def __enter__(self) -> 'DashboardSession':
        return self.start()

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        if exc_type is None:
            self.commit()
        else:
            logger.warning("Dashboard session aborted, changes not saved: %s", exc_value)
        return False
