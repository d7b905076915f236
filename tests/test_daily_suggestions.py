import datetime
import logging

import pytest

from apps.calendar_app.domain.mini_apps import AgendaItem, Meal, SavingsGoal, WorkoutPlan
from apps.calendar_app.services.daily_suggestions import add_suggested_tasks, suggest_daily_tasks
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority
from apps.core.exceptions import ValidationError
from apps.tasks.domain.entities import DailyTaskEntity, TaskStatus


@pytest.fixture
def mini_apps(today):
    return {
        'todays_plan': WorkoutPlan(name='Upper Body', exercises=['Bench'], estimated_duration=45),
        'meal_plan': {
            'Monday': Meal(id='m1', name='Pasta'),
            'Tuesday': Meal(id='m2', name='Tacos', prep_time=30),
        },
        'savings_goals': [SavingsGoal(id='g1', name='Vacation', target=5000, current=1000)],
        'business_items': [
            AgendaItem(id='b1', title='Client call', date=today, priority=Priority.HIGH, description='Q2 scope'),
            AgendaItem(id='b2', title='Invoice', date=datetime.datetime(2026, 3, 10, 8, 0), completed=True),
            AgendaItem(id='b3', title='Board meeting', date=today + datetime.timedelta(days=1)),
        ],
    }


def test_suggestions_from_all_mini_apps(today, mini_apps):
    tasks = suggest_daily_tasks(today=today, **mini_apps)

    assert [task.id for task in tasks] == [
        'task-training-today', 'task-food-dinner', 'task-finance-review', 'task-business-b1', 'task-business-b2',
    ]
    assert all(task.target_date == today for task in tasks)

    training, food, finance, call, invoice = tasks
    assert training.title == 'Upper Body'
    assert training.aspect_tag == AspectTag.TRAINING
    assert training.priority == Priority.HIGH
    assert training.estimated_duration_minutes == 45
    assert food.title == 'Prepare: Tacos'
    assert food.estimated_duration_minutes == 30
    assert finance.aspect_tag == AspectTag.FINANCE
    assert finance.priority == Priority.LOW
    assert call.kind == ObjectiveKind.JOB
    assert call.priority == Priority.HIGH
    assert call.description == 'Q2 scope'
    assert call.status == TaskStatus.PENDING
    assert invoice.status == TaskStatus.COMPLETED


def test_suggestions_skip_missing_inputs(today):
    tasks = suggest_daily_tasks(
        today=today,
        meal_plan={'monday': Meal(id='m1', name='Pasta'), 'tuesday': None},
        savings_goals=[],
    )

    assert tasks == []


def test_meal_plan_day_names_ignore_case(today):
    tasks = suggest_daily_tasks(today=today, meal_plan={'TUESDAY ': Meal(id='m2', name='Soup')})

    assert [task.title for task in tasks] == ['Prepare: Soup']
    assert tasks[0].estimated_duration_minutes is None


def test_add_suggested_tasks_stores_drafts(store, today, mini_apps, now, caplog):
    drafts = suggest_daily_tasks(today=today, **mini_apps)

    with caplog.at_level(logging.INFO, logger='apps.calendar_app.services.daily_suggestions'):
        created = add_suggested_tasks(store, drafts)

    assert created == ['rec-1', 'rec-2', 'rec-3', 'rec-4', 'rec-5']
    stored = [store.get(task_id) for task_id in created]
    assert [task.title for task in stored] == [draft.title for draft in drafts]
    assert stored[0].target_date == today
    assert stored[4].status == TaskStatus.COMPLETED
    assert stored[4].completed_at == now
    assert any('Added 5 suggested daily task(s)' in record.getMessage() for record in caplog.records)


def test_add_suggested_tasks_is_all_or_nothing(store, record_set, today):
    drafts = [
        DailyTaskEntity(id='ok', title='Stretch', target_date=today),
        DailyTaskEntity(id='bad', title='  ', target_date=today),
    ]
    before = record_set.copy()

    with pytest.raises(ValidationError):
        add_suggested_tasks(store, drafts)

    assert record_set == before
