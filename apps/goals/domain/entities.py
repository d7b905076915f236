# apps/goals/domain/entities.py
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from apps.core.domain.entities import AspectTag, ObjectiveKind, ObjectiveLevel, Priority


class ObjectiveStatus(str, Enum):
    ACTIVE = 'active'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'
    PAUSED = 'paused'


@dataclass
class ObjectiveEntity:
    id: str
    title: str
    description: str = ""
    aspect_tag: AspectTag = AspectTag.BUSINESS
    kind: ObjectiveKind = ObjectiveKind.PERSONAL
    priority: Priority = Priority.MEDIUM
    status: ObjectiveStatus = ObjectiveStatus.ACTIVE

    # 0-100. Wyliczane z dzieci (Aggregator), ręczna wartość tylko gdy dzieci brak
    progress_percentage: int = 0

    estimated_duration_days: Optional[int] = None
    success_criteria: List[str] = field(default_factory=list)

    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def parent_id(self) -> Optional[str]:
        return None

    def is_completed(self) -> bool:
        return self.status == ObjectiveStatus.COMPLETED


@dataclass
class MonthlyObjectiveEntity(ObjectiveEntity):
    target_month: Optional[date] = None  # pierwszy dzień miesiąca

    level = ObjectiveLevel.MONTHLY


@dataclass
class WeeklyObjectiveEntity(ObjectiveEntity):
    monthly_objective_id: Optional[str] = None
    target_week_start: Optional[date] = None  # poniedziałek

    level = ObjectiveLevel.WEEKLY

    @property
    def parent_id(self) -> Optional[str]:
        return self.monthly_objective_id
