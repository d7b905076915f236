# apps/core/ports/insight_provider.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from apps.calendar_app.ports.event_source import CalendarEvent
from apps.core.domain.record_set import RecordSet
from apps.goals.domain.entities import MonthlyObjectiveEntity, WeeklyObjectiveEntity
from apps.tasks.domain.entities import DailyTaskEntity


@dataclass(frozen=True)
class InsightSnapshot:
    """Kopia tylko do odczytu - dostawca wskazówek nie ma dostępu do żywych rekordów."""
    monthly: Tuple[MonthlyObjectiveEntity, ...] = ()
    weekly: Tuple[WeeklyObjectiveEntity, ...] = ()
    daily: Tuple[DailyTaskEntity, ...] = ()
    events: Tuple[CalendarEvent, ...] = ()

    @classmethod
    def capture(cls, record_set: RecordSet, events=()) -> 'InsightSnapshot':
        frozen = record_set.copy()
        return cls(
            monthly=tuple(frozen.monthly.values()),
            weekly=tuple(frozen.weekly.values()),
            daily=tuple(frozen.daily.values()),
            events=tuple(events),
        )


class IInsightProvider(ABC):
    @abstractmethod
    def suggest(self, snapshot: InsightSnapshot) -> str:
        """Zwraca tekst wskazówek. Wynik jest nieprzezroczysty dla rdzenia."""
        pass
