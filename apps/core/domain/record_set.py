# apps/core/domain/record_set.py
import copy
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from apps.calendar_app.domain.entities import ManualEventEntity
from apps.core.domain.entities import ObjectiveLevel
from apps.goals.domain.entities import MonthlyObjectiveEntity, WeeklyObjectiveEntity
from apps.tasks.domain.entities import DailyTaskEntity

AnyObjective = Union[MonthlyObjectiveEntity, WeeklyObjectiveEntity, DailyTaskEntity]


@dataclass
class RecordSet:
    """
    Jawny, wstrzykiwany zbiór rekordów dashboardu (zamiast globalnego stanu).
    Słowniki zachowują kolejność wstawiania.
    """
    monthly: Dict[str, MonthlyObjectiveEntity] = field(default_factory=dict)
    weekly: Dict[str, WeeklyObjectiveEntity] = field(default_factory=dict)
    daily: Dict[str, DailyTaskEntity] = field(default_factory=dict)
    manual_events: Dict[str, ManualEventEntity] = field(default_factory=dict)

    def copy(self) -> 'RecordSet':
        return copy.deepcopy(self)

    def collection(self, level: ObjectiveLevel) -> Dict[str, AnyObjective]:
        return {
            ObjectiveLevel.MONTHLY: self.monthly,
            ObjectiveLevel.WEEKLY: self.weekly,
            ObjectiveLevel.DAILY: self.daily,
        }[ObjectiveLevel(level)]

    def find(self, record_id: str) -> Optional[Tuple[ObjectiveLevel, AnyObjective]]:
        """Poziom i rekord o danym ID albo None."""
        for level in ObjectiveLevel:
            record = self.collection(level).get(record_id)
            if record is not None:
                return level, record
        return None

    def replace_contents(self, other: 'RecordSet') -> None:
        """Podmienia zawartość w miejscu - uchwyt (ten obiekt) pozostaje ten sam."""
        self.monthly = other.monthly
        self.weekly = other.weekly
        self.daily = other.daily
        self.manual_events = other.manual_events
