# apps/calendar_app/adapters/friends.py
import datetime
from typing import Iterable, List

from dateutil.relativedelta import relativedelta

from apps.calendar_app.adapters.base import BaseEventSource, as_date
from apps.calendar_app.domain.mini_apps import Friend
from apps.calendar_app.ports.event_source import CalendarEvent, EventSourceName
from apps.core.conf import dashboard_setting
from apps.core.domain.entities import AspectTag, ObjectiveKind, Priority


class FriendsEventSource(BaseEventSource):
    source = EventSourceName.FRIENDS

    def __init__(self, friends: List[Friend], today=None):
        super().__init__(today)
        self.friends = friends

    def next_birthday(self, birthday: datetime.date) -> datetime.date:
        """Najbliższe urodziny (dzisiaj włącznie). relativedelta radzi sobie z 29 lutego."""
        candidate = birthday + relativedelta(years=self.today.year - birthday.year)
        if candidate < self.today:
            candidate = birthday + relativedelta(years=self.today.year - birthday.year + 1)
        return candidate

    def _generate(self, date_range) -> Iterable[CalendarEvent]:
        lookahead = datetime.timedelta(days=dashboard_setting('BIRTHDAY_LOOKAHEAD_DAYS'))
        catch_up_after = dashboard_setting('CATCH_UP_AFTER_DAYS')
        max_suggestions = dashboard_setting('MAX_CATCH_UP_SUGGESTIONS')

        # 1. Urodziny w oknie wyprzedzenia
        for friend in self.friends:
            if not friend.birthday:
                continue
            birthday = self.next_birthday(as_date(friend.birthday))
            if birthday <= self.today + lookahead:
                yield CalendarEvent(
                    id=f"friends-bday-{friend.id}",
                    title=f"{friend.name}'s Birthday 🎂",
                    aspect_tag=AspectTag.FRIENDS,
                    kind=ObjectiveKind.PERSONAL,
                    date=birthday,
                    priority=Priority.MEDIUM,
                    source=self.source,
                    emoji='🎂',
                )

        # 2. Propozycje kontaktu (dawno niewidziani znajomi), po jednej na kolejne dni
        to_contact = [
            f for f in self.friends
            if (self.today - as_date(f.last_contact)).days > catch_up_after
        ]
        for offset, friend in enumerate(to_contact[:max_suggestions], start=1):
            yield CalendarEvent(
                id=f"friends-catchup-{friend.id}",
                title=f"Catch up with {friend.name}?",
                description=friend.notes or 'Been a while since you connected',
                aspect_tag=AspectTag.FRIENDS,
                kind=ObjectiveKind.PERSONAL,
                date=self.today + datetime.timedelta(days=offset),
                priority=Priority.LOW,
                source=self.source,
                emoji='📱',
            )
