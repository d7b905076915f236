# apps/tasks/domain/entities.py
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from enum import Enum

from apps.core.domain.entities import AspectTag, ObjectiveKind, ObjectiveLevel, Priority


class TaskStatus(str, Enum):
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


@dataclass
class DailyTaskEntity:
    id: str
    title: str
    description: str = ""
    aspect_tag: AspectTag = AspectTag.BUSINESS
    kind: ObjectiveKind = ObjectiveKind.PERSONAL
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING

    # Relacja (tylko ID). Brak = zadanie niepodpięte, nie wpływa na postęp
    weekly_objective_id: Optional[str] = None

    # Czas
    target_date: Optional[date] = None
    estimated_duration_minutes: Optional[int] = None
    actual_duration_minutes: Optional[int] = None

    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    level = ObjectiveLevel.DAILY

    @property
    def parent_id(self) -> Optional[str]:
        return self.weekly_objective_id

    @property
    def progress_percentage(self) -> int:
        """Dla zadania postęp wynika 1:1 ze statusu."""
        return 100 if self.is_completed() else 0

    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED
