# apps/core/conf.py
from datetime import datetime, time

from django.conf import settings

DEFAULTS = {
    'TRAINING_SESSION_TIME': '07:00',
    'DINNER_TIME': '18:30',
    'BIRTHDAY_LOOKAHEAD_DAYS': 60,
    'CATCH_UP_AFTER_DAYS': 14,
    'MAX_CATCH_UP_SUGGESTIONS': 2,
    'TEMPLATE_HORIZON_DAYS': 90,
}


def dashboard_setting(name: str):
    """Zwraca wartość z settings.DASHBOARD (lub wartość domyślną)."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown dashboard setting: {name}")
    overrides = getattr(settings, 'DASHBOARD', None) or {}
    return overrides.get(name, DEFAULTS[name])


def dashboard_time(name: str) -> time:
    """Godziny w ustawieniach trzymamy jako 'HH:MM'."""
    value = dashboard_setting(name)
    if isinstance(value, time):
        return value
    return datetime.strptime(value, '%H:%M').time()
