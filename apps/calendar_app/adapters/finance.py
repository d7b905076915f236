# apps/calendar_app/adapters/finance.py
import re
from typing import Iterable, List

from dateutil import parser as date_parser

from apps.calendar_app.adapters.base import BaseEventSource
from apps.calendar_app.domain.mini_apps import SavingsGoal
from apps.calendar_app.ports.event_source import CalendarEvent, EventSourceName
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority

# "March 2026" -> pierwszy dzień miesiąca
DEADLINE = re.compile(r'^\s*([A-Za-z]+)\s+(\d{4})\s*$')


def parse_deadline(deadline):
    match = DEADLINE.match(deadline or "")
    if not match:
        return None
    month, year = match.groups()
    try:
        return date_parser.parse(f"{month} 1 {year}").date()
    except (ValueError, OverflowError):
        return None


def money(amount) -> str:
    """4500 -> '4,500', 85.2 -> '85.2'."""
    text = f"{amount:,.2f}"
    return text.rstrip('0').rstrip('.')


class FinanceEventSource(BaseEventSource):
    source = EventSourceName.FINANCE

    def __init__(self, savings_goals: List[SavingsGoal], today=None):
        super().__init__(today)
        self.savings_goals = savings_goals

    def _generate(self, date_range) -> Iterable[CalendarEvent]:
        for goal in self.savings_goals:
            deadline = parse_deadline(goal.deadline)
            if deadline is None or deadline < self.today:
                continue

            # Prawie uzbierane (> 80%) -> niski priorytet. Cel 0: cokolwiek odłożone = ponad 100%
            if goal.target > 0:
                nearly_there = goal.current / goal.target > 0.8
            else:
                nearly_there = goal.current > 0

            yield CalendarEvent(
                id=f"finance-goal-{goal.id}",
                title=f"{goal.name} Deadline",
                description=f"${money(goal.current)} / ${money(goal.target)}",
                aspect_tag=AspectTag.FINANCE,
                kind=ObjectiveKind.PERSONAL,
                date=deadline,
                priority=Priority.LOW if nearly_there else Priority.HIGH,
                source=self.source,
                emoji='💰',
            )
