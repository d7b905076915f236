# apps/goals/domain/services/progress.py
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from apps.core.domain.record_set import RecordSet

logger = logging.getLogger(__name__)


def round_half_up_div(numerator: int, denominator: int) -> int:
    """Dzielenie z zaokrągleniem połówek w górę, na liczbach całkowitych (bez float)."""
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    return (2 * numerator + denominator) // (2 * denominator)


def rollup_percentage(completed: int, total: int) -> int:
    """round-half-up(100 * completed / total): 1/3 -> 33, 2/3 -> 67, 1/8 -> 13."""
    return round_half_up_div(100 * completed, total)


def _group_by_parent(children: Iterable, parents: Dict) -> Dict[str, List]:
    """Grupuje dzieci po parent_id. Rodzic spoza zbioru = dziecko niepodpięte."""
    grouped = defaultdict(list)
    for child in children:
        parent_id = child.parent_id
        if parent_id and parent_id in parents:
            grouped[parent_id].append(child)
    return grouped


class ProgressAggregator:
    """
    Czyste przeliczenie postępu hierarchii celów.

    Przebieg 1: cele tygodniowe z zadań dziennych (status zadania).
    Przebieg 2: cele miesięczne z celów tygodniowych (status celu, NIE jego postęp).
    Rodzic bez dzieci zachowuje swoją (ręczną) wartość.
    """

    def aggregate(self, record_set: RecordSet) -> RecordSet:
        result = record_set.copy()

        # 1. Tygodniowe <- dzienne
        tasks_by_weekly = _group_by_parent(result.daily.values(), result.weekly)
        for weekly_id, weekly in result.weekly.items():
            self._apply(weekly, tasks_by_weekly.get(weekly_id, []))

        # 2. Miesięczne <- tygodniowe (już przeliczone)
        weeklies_by_monthly = _group_by_parent(result.weekly.values(), result.monthly)
        for monthly_id, monthly in result.monthly.items():
            self._apply(monthly, weeklies_by_monthly.get(monthly_id, []))

        return result

    def _apply(self, parent, children: List) -> None:
        if not children:
            return  # brak sygnału z dzieci -> wartość ręczna zostaje

        done = sum(1 for child in children if child.is_completed())
        new_progress = rollup_percentage(done, len(children))

        if parent.progress_percentage != new_progress:
            logger.debug(
                "Rollup %s %s: %s%% -> %s%% (%s/%s)",
                parent.level.value, parent.id, parent.progress_percentage, new_progress, done, len(children)
            )
            parent.progress_percentage = new_progress
