# apps/tasks/domain/services/transitions.py
from dataclasses import replace
from datetime import datetime
from typing import Dict, FrozenSet

from apps.core.exceptions import ValidationError
from apps.tasks.domain.entities import DailyTaskEntity, TaskStatus

# pending -> in_progress -> completed, completed <-> pending (przełącznik w UI),
# wszystko poza cancelled -> cancelled. Z cancelled nie ma wyjścia.
ALLOWED_TRANSITIONS: Dict[TaskStatus, FrozenSet[TaskStatus]] = {
    TaskStatus.PENDING: frozenset({TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.CANCELLED}),
    TaskStatus.IN_PROGRESS: frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED}),
    TaskStatus.COMPLETED: frozenset({TaskStatus.PENDING, TaskStatus.CANCELLED}),
    TaskStatus.CANCELLED: frozenset(),
}


def can_transition(current: TaskStatus, new: TaskStatus) -> bool:
    if current == new:
        return True
    return new in ALLOWED_TRANSITIONS[current]


def transition(task: DailyTaskEntity, new_status: TaskStatus, now: datetime) -> DailyTaskEntity:
    """
    Zwraca kopię zadania z nowym statusem.
    Status i completed_at zmieniają się razem - oryginał nie jest modyfikowany.
    """
    new_status = TaskStatus(new_status)
    if not can_transition(task.status, new_status):
        raise ValidationError(
            f"Cannot change task status from {task.status.value} to {new_status.value}",
            {'status': [f"Transition {task.status.value} -> {new_status.value} is not allowed."]},
        )

    if new_status == task.status:
        return replace(task)

    completed_at = now if new_status == TaskStatus.COMPLETED else None
    return replace(task, status=new_status, completed_at=completed_at)


def toggled_status(current: TaskStatus) -> TaskStatus:
    """Przełącznik 'zrobione' z UI: completed -> pending, reszta -> completed."""
    if current == TaskStatus.COMPLETED:
        return TaskStatus.PENDING
    return TaskStatus.COMPLETED
