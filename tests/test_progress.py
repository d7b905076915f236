import pytest

from apps.core.domain.entities import ObjectiveKind
from apps.core.domain.record_set import RecordSet
from apps.goals.domain.entities import MonthlyObjectiveEntity, ObjectiveStatus, WeeklyObjectiveEntity
from apps.goals.domain.services.progress import ProgressAggregator, rollup_percentage, round_half_up_div
from apps.goals.domain.services.summary import summarize
from apps.tasks.domain.entities import DailyTaskEntity, TaskStatus


def build_hierarchy(reverse: bool = False) -> RecordSet:
    monthly = [
        MonthlyObjectiveEntity(id='m1', title='Launch App', kind=ObjectiveKind.JOB),
        MonthlyObjectiveEntity(id='m2', title='Read more', progress_percentage=25),
    ]
    weekly = [
        WeeklyObjectiveEntity(id='w1', title='Build MVP', kind=ObjectiveKind.JOB, monthly_objective_id='m1'),
        WeeklyObjectiveEntity(
            id='w2', title='Write docs', kind=ObjectiveKind.JOB, monthly_objective_id='m1',
            status=ObjectiveStatus.COMPLETED,
        ),
    ]
    daily = [
        DailyTaskEntity(id='d1', title='Login', kind=ObjectiveKind.JOB, weekly_objective_id='w1',
                        status=TaskStatus.COMPLETED),
        DailyTaskEntity(id='d2', title='Signup', kind=ObjectiveKind.JOB, weekly_objective_id='w1'),
        DailyTaskEntity(id='d3', title='Logout', kind=ObjectiveKind.JOB, weekly_objective_id='w1'),
    ]
    if reverse:
        monthly, weekly, daily = monthly[::-1], weekly[::-1], daily[::-1]

    record_set = RecordSet()
    record_set.monthly.update((o.id, o) for o in monthly)
    record_set.weekly.update((o.id, o) for o in weekly)
    record_set.daily.update((t.id, t) for t in daily)
    return record_set


def test_rollup_percentage_rounds_half_up():
    assert rollup_percentage(1, 3) == 33
    assert rollup_percentage(2, 3) == 67
    assert rollup_percentage(1, 8) == 13
    assert rollup_percentage(1, 2) == 50
    assert rollup_percentage(0, 4) == 0
    assert rollup_percentage(4, 4) == 100


def test_round_half_up_rejects_empty_denominator():
    with pytest.raises(ValueError):
        round_half_up_div(1, 0)
    with pytest.raises(ValueError):
        rollup_percentage(0, 0)


def test_aggregate_rolls_up_both_levels():
    result = ProgressAggregator().aggregate(build_hierarchy())

    assert result.weekly['w1'].progress_percentage == 33
    assert result.weekly['w2'].progress_percentage == 0  # brak zadań -> bez zmian
    assert result.monthly['m1'].progress_percentage == 50


def test_aggregate_does_not_mutate_input():
    record_set = build_hierarchy()
    before = record_set.copy()

    ProgressAggregator().aggregate(record_set)

    assert record_set == before


def test_aggregate_is_idempotent():
    aggregator = ProgressAggregator()
    once = aggregator.aggregate(build_hierarchy())

    assert aggregator.aggregate(once) == once


def test_aggregate_is_independent_of_insertion_order():
    aggregator = ProgressAggregator()

    assert aggregator.aggregate(build_hierarchy(reverse=True)) == aggregator.aggregate(build_hierarchy())


def test_childless_parent_keeps_manual_progress():
    result = ProgressAggregator().aggregate(build_hierarchy())

    assert result.monthly['m2'].progress_percentage == 25


def test_children_of_missing_parent_are_ignored():
    record_set = build_hierarchy()
    record_set.daily['ghost'] = DailyTaskEntity(id='ghost', title='Orphan', weekly_objective_id='nope',
                                                status=TaskStatus.COMPLETED)

    result = ProgressAggregator().aggregate(record_set)

    assert result.weekly['w1'].progress_percentage == 33


def test_cancelled_children_count_towards_total():
    record_set = RecordSet()
    record_set.weekly['w'] = WeeklyObjectiveEntity(id='w', title='Week')
    record_set.daily['a'] = DailyTaskEntity(id='a', title='A', weekly_objective_id='w', status=TaskStatus.COMPLETED)
    record_set.daily['b'] = DailyTaskEntity(id='b', title='B', weekly_objective_id='w', status=TaskStatus.CANCELLED)

    result = ProgressAggregator().aggregate(record_set)

    assert result.weekly['w'].progress_percentage == 50


def test_monthly_rollup_uses_weekly_status_not_progress():
    record_set = RecordSet()
    record_set.monthly['m'] = MonthlyObjectiveEntity(id='m', title='Month')
    record_set.weekly['w'] = WeeklyObjectiveEntity(id='w', title='Week', monthly_objective_id='m')
    record_set.daily['d'] = DailyTaskEntity(id='d', title='Task', weekly_objective_id='w', status=TaskStatus.COMPLETED)

    result = ProgressAggregator().aggregate(record_set)

    assert result.weekly['w'].progress_percentage == 100
    assert result.monthly['m'].progress_percentage == 0


def test_summarize_counts_and_averages():
    record_set = ProgressAggregator().aggregate(build_hierarchy())

    summary = summarize(record_set)

    assert summary.monthly_total == 2
    assert summary.monthly_completed == 0
    assert summary.weekly_total == 2
    assert summary.weekly_completed == 1
    assert summary.daily_total == 3
    assert summary.daily_completed == 1
    assert summary.daily_progress == 33
    # (50 + 25) / 2 = 37.5 -> 38
    assert summary.average_monthly_progress == 38


def test_summarize_by_kind():
    record_set = ProgressAggregator().aggregate(build_hierarchy())

    summary = summarize(record_set, kind='job')

    assert summary.monthly_total == 1
    assert summary.average_monthly_progress == 50

    personal = summarize(record_set, kind='personal')
    assert personal.daily_total == 0
    assert personal.daily_progress == 0


def test_summarize_empty_record_set():
    summary = summarize(RecordSet())

    assert summary.average_monthly_progress == 0
    assert summary.daily_progress == 0
