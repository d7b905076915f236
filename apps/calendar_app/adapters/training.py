# apps/calendar_app/adapters/training.py
from typing import Iterable, List, Optional

from apps.calendar_app.adapters.base import BaseEventSource, as_date
from apps.calendar_app.domain.mini_apps import Workout, WorkoutPlan
from apps.calendar_app.ports.event_source import CalendarEvent, EventSourceName, EventStatus
from apps.core.conf import dashboard_time
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority


class TrainingEventSource(BaseEventSource):
    source = EventSourceName.TRAINING

    def __init__(self, workouts: List[Workout], todays_plan: Optional[WorkoutPlan] = None, today=None):
        super().__init__(today)
        self.workouts = workouts
        self.todays_plan = todays_plan

    def _generate(self, date_range) -> Iterable[CalendarEvent]:
        session_time = dashboard_time('TRAINING_SESSION_TIME')

        # 1. Zalogowane treningi (w tym już wykonane)
        for workout in self.workouts:
            yield CalendarEvent(
                id=f"training-{workout.id}",
                title=workout.name,
                aspect_tag=AspectTag.TRAINING,
                kind=ObjectiveKind.PERSONAL,
                date=as_date(workout.date),
                time=session_time,
                priority=Priority.HIGH,
                status=EventStatus.COMPLETED if workout.completed else EventStatus.SCHEDULED,
                source=self.source,
                emoji='💪',
            )

        # 2. Plan na dziś
        plan = self.todays_plan
        if plan:
            yield CalendarEvent(
                id='training-today',
                title=plan.name,
                description=f"{len(plan.exercises)} exercises, ~{plan.estimated_duration} min",
                aspect_tag=AspectTag.TRAINING,
                kind=ObjectiveKind.PERSONAL,
                date=self.today,
                time=session_time,
                priority=Priority.HIGH,
                source=self.source,
                emoji='🏋️',
            )
