# apps/calendar_app/services/daily_suggestions.py
import datetime
import logging
from typing import Dict, Iterable, List, Optional

from django.utils import timezone

from apps.calendar_app.adapters.base import as_date
from apps.calendar_app.domain.mini_apps import AgendaItem, Meal, SavingsGoal, WorkoutPlan
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority
from apps.goals.services.objective_store import ObjectiveStore
from apps.tasks.domain.entities import DailyTaskEntity, TaskStatus
from apps.tasks.forms import DailyTaskForm

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')


def _todays_meal(meal_plan: Dict[str, Optional[Meal]], today: datetime.date) -> Optional[Meal]:
    wanted = WEEKDAY_NAMES[today.weekday()]
    for day_name, meal in meal_plan.items():
        if day_name.strip().lower() == wanted:
            return meal
    return None


def suggest_daily_tasks(
        today: Optional[datetime.date] = None,
        todays_plan: Optional[WorkoutPlan] = None,
        meal_plan: Optional[Dict[str, Optional[Meal]]] = None,
        savings_goals: Iterable[SavingsGoal] = (),
        business_items: Iterable[AgendaItem] = (),
) -> List[DailyTaskEntity]:
    """
    Propozycje zadań na dziś z danych mini-aplikacji (tylko odczyt).
    Zwraca szkice DailyTaskEntity - nic nie trafia do zbioru rekordów.
    """
    today = today or timezone.localdate()
    tasks = []

    # 1. Trening z planu na dziś
    if todays_plan:
        tasks.append(DailyTaskEntity(
            id='task-training-today', title=todays_plan.name,
            aspect_tag=AspectTag.TRAINING, kind=ObjectiveKind.PERSONAL, priority=Priority.HIGH,
            target_date=today, estimated_duration_minutes=todays_plan.estimated_duration or None,
        ))

    # 2. Przygotowanie dzisiejszego posiłku
    meal = _todays_meal(meal_plan or {}, today)
    if meal:
        tasks.append(DailyTaskEntity(
            id='task-food-dinner', title=f"Prepare: {meal.name}",
            aspect_tag=AspectTag.FOOD, kind=ObjectiveKind.PERSONAL, priority=Priority.MEDIUM,
            target_date=today, estimated_duration_minutes=meal.prep_time or None,
        ))

    # 3. Przegląd wydatków, gdy są cele oszczędnościowe
    if list(savings_goals):
        tasks.append(DailyTaskEntity(
            id='task-finance-review', title='Review weekly spending',
            aspect_tag=AspectTag.FINANCE, kind=ObjectiveKind.PERSONAL, priority=Priority.LOW,
            target_date=today,
        ))

    # 4. Dzisiejsze sprawy służbowe
    for item in business_items:
        if as_date(item.date) != today:
            continue
        tasks.append(DailyTaskEntity(
            id=f"task-business-{item.id}", title=item.title, description=item.description,
            aspect_tag=AspectTag.BUSINESS, kind=ObjectiveKind.JOB, priority=item.priority,
            status=TaskStatus.COMPLETED if item.completed else TaskStatus.PENDING,
            target_date=today,
        ))

    return tasks


def draft_fields(task: DailyTaskEntity) -> dict:
    """Pola szkicu w postaci przyjmowanej przez ObjectiveStore.add."""
    return {name: getattr(task, name) for name in DailyTaskForm.base_fields}


def add_suggested_tasks(store: ObjectiveStore, tasks: Iterable[DailyTaskEntity]) -> List[str]:
    """Dodaje szkice do Objective Store. Wszystkie albo żaden."""
    snapshot = store.record_set.copy()
    created = []
    try:
        for task in tasks:
            created.append(store.add('daily', draft_fields(task)))
    except Exception:
        store.record_set.replace_contents(snapshot)
        raise

    logger.info("Added %s suggested daily task(s)", len(created))
    return created
