# apps/calendar_app/adapters/food.py
import logging
from typing import Dict, Iterable, Optional

from dateutil.relativedelta import relativedelta
from dateutil.rrule import MO, TU, WE, TH, FR, SA, SU

from apps.calendar_app.adapters.base import BaseEventSource
from apps.calendar_app.domain.mini_apps import Meal
from apps.calendar_app.ports.event_source import CalendarEvent, EventSourceName
from apps.core.conf import dashboard_time
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority

logger = logging.getLogger(__name__)

# Plan posiłków jest kluczowany pełną nazwą dnia (jak w mini-aplikacji Food)
DAY_MAP = {
    'monday': MO, 'tuesday': TU, 'wednesday': WE, 'thursday': TH,
    'friday': FR, 'saturday': SA, 'sunday': SU,
}


class FoodEventSource(BaseEventSource):
    source = EventSourceName.FOOD

    def __init__(self, meal_plan: Dict[str, Optional[Meal]], today=None):
        super().__init__(today)
        self.meal_plan = meal_plan

    def _generate(self, date_range) -> Iterable[CalendarEvent]:
        dinner_time = dashboard_time('DINNER_TIME')

        for day_name, meal in self.meal_plan.items():
            if not meal:
                continue

            weekday = DAY_MAP.get(day_name.strip().lower())
            if weekday is None:
                logger.debug("Food plan: unknown day name %r, skipping", day_name)
                continue

            # Najbliższy taki dzień tygodnia (dzisiaj włącznie)
            event_date = self.today + relativedelta(weekday=weekday)

            yield CalendarEvent(
                id=f"food-{day_name.strip().lower()}",
                title=meal.name,
                description=", ".join(meal.tags),
                aspect_tag=AspectTag.FOOD,
                kind=ObjectiveKind.PERSONAL,
                date=event_date,
                time=dinner_time,
                priority=Priority.LOW,
                source=self.source,
                emoji=meal.emoji,
            )
