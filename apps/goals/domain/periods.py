# apps/goals/domain/periods.py
from datetime import date

from dateutil.relativedelta import relativedelta, MO


def week_start(day: date) -> date:
    """Poniedziałek tygodnia, w którym leży `day` (niedziela należy do tygodnia, który się kończy)."""
    return day + relativedelta(weekday=MO(-1))


def month_start(day: date) -> date:
    return day + relativedelta(day=1)
