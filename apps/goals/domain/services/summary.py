# apps/goals/domain/services/summary.py
from dataclasses import dataclass

from apps.core.domain.record_set import RecordSet
from apps.goals.domain.services.progress import round_half_up_div, rollup_percentage
from apps.goals.filters import filter_objectives


@dataclass(frozen=True)
class ProgressSummary:
    monthly_total: int
    monthly_completed: int
    weekly_total: int
    weekly_completed: int
    daily_total: int
    daily_completed: int
    daily_progress: int  # % ukończonych zadań dziennych
    average_monthly_progress: int


def summarize(record_set: RecordSet, kind=None) -> ProgressSummary:
    """Podsumowanie postępu (stopka dashboardu), opcjonalnie zawężone do typu celu."""
    monthly = filter_objectives(record_set.monthly.values(), kind=kind)
    weekly = filter_objectives(record_set.weekly.values(), kind=kind)
    daily = filter_objectives(record_set.daily.values(), kind=kind)

    daily_completed = sum(1 for task in daily if task.is_completed())

    return ProgressSummary(
        monthly_total=len(monthly),
        monthly_completed=sum(1 for objective in monthly if objective.is_completed()),
        weekly_total=len(weekly),
        weekly_completed=sum(1 for objective in weekly if objective.is_completed()),
        daily_total=len(daily),
        daily_completed=daily_completed,
        daily_progress=rollup_percentage(daily_completed, len(daily)) if daily else 0,
        average_monthly_progress=(
            round_half_up_div(sum(o.progress_percentage for o in monthly), len(monthly)) if monthly else 0
        ),
    )
